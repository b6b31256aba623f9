"""
Define the categories of per-user application data.
"""

from __future__ import annotations

import enum
from typing import Self

from typing_extensions import override


class DataCategory(enum.Enum):
    """
    The category an application's per-user data belongs to.

    These mirror the Windows conventions that separate data that should be synchronized
    across machines (``ROAMING``) from data that should not (``LOCAL``), and from data that
    must be accessible to processes running with restricted privileges (``LOCAL_LOW``).
    ``NONE`` places data directly in the user's configuration directory.
    """

    NONE = "none"
    LOCAL = "local"
    LOCAL_LOW = "local-low"
    ROAMING = "roaming"

    @property
    def label(self) -> str:
        """
        The path segment for this category.

        This is empty for :py:attr:`appfs.category.DataCategory.NONE`.
        """
        return _LABELS[self]

    @classmethod
    def from_label(cls, label: str) -> Self:
        """
        Get the category for a label.

        :raises ValueError: Raised if the label is not known.
        """
        for category, category_label in _LABELS.items():
            if category_label == label:
                return category  # type: ignore[return-value]
        raise ValueError(f'"{label}" is not a known data category label.')

    @override
    def __str__(self) -> str:
        return self.label


_LABELS: dict[DataCategory, str] = {
    DataCategory.NONE: "",
    DataCategory.LOCAL: "Local",
    DataCategory.LOCAL_LOW: "LocalLow",
    DataCategory.ROAMING: "Roaming",
}

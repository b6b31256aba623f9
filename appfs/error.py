"""
Provide error handling utilities.
"""

from __future__ import annotations

from pathlib import Path
from typing import Self

from typing_extensions import override

from appfs.locale import Localizable, Localizer, _, DEFAULT_LOCALIZER


class UserFacingError(Exception, Localizable):
    """
    A localizable, user-facing error.

    This type of error is fatal, but fixing it does not require knowledge of appfs's internals or the stack trace
    leading to the error. It must therefore have an end-user-friendly message, and its stack trace must not be shown.
    """

    def __init__(self, message: Localizable):
        super().__init__(
            # Provide a default localization so this exception can be displayed like any other.
            message.localize(DEFAULT_LOCALIZER),
        )
        self._localizable_message = message

    @override
    def __str__(self) -> str:
        return self.localize(DEFAULT_LOCALIZER)

    @override
    def localize(self, localizer: Localizer) -> str:
        return self._localizable_message.localize(localizer)


class PlatformQueryError(UserFacingError, OSError):
    """
    Raised when the platform cannot tell where the executable or the user's configuration lives.
    """

    pass


class FileNotFound(UserFacingError, FileNotFoundError):
    """
    Raised when a file cannot be found.
    """

    @classmethod
    def new(cls, file_path: Path) -> Self:
        """
        Create a new instance for the given file path.
        """
        return cls(
            _('Could not find the file "{file_path}".').format(file_path=str(file_path))
        )


class PlatformIOError(UserFacingError, OSError):
    """
    Raised when the platform fails to create, open, read, write, or close a file or directory.
    """

    @classmethod
    def new(cls, path: Path, error: OSError) -> Self:
        """
        Create a new instance for the given path and underlying error.
        """
        return cls(
            _('Could not access "{path}": {error}').format(
                path=str(path),
                error=error.strerror or str(error),
            )
        )

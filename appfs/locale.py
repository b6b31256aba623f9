"""
Provide the Locale API.

Error and log messages are built from localizables, so they can be translated at the point of use.
"""

from __future__ import annotations

import gettext
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from typing_extensions import override

DEFAULT_LOCALE = "en-US"


class Localizer:
    """
    Provide localization functionality for a specific locale.
    """

    def __init__(self, locale: str, translations: gettext.NullTranslations):
        self._locale = locale
        self._translations = translations

    @property
    def locale(self) -> str:
        """
        The locale.
        """
        return self._locale

    def _(self, message: str) -> str:
        """
        Like :py:meth:`gettext.gettext`.
        """
        return self._translations.gettext(message)

    def gettext(self, message: str) -> str:
        """
        Like :py:meth:`gettext.gettext`.
        """
        return self._translations.gettext(message)


DEFAULT_LOCALIZER = Localizer(DEFAULT_LOCALE, gettext.NullTranslations())


class Localizable(ABC):
    """
    A localizable object.

    Objects of this type can convert themselves to localized strings at the point of use.
    """

    @abstractmethod
    def localize(self, localizer: Localizer) -> str:
        """
        Localize ``self`` to a human-readable string.
        """
        pass

    @override
    def __str__(self) -> str:
        return self.localize(DEFAULT_LOCALIZER)


class _FormattableLocalizable(Localizable):
    def format(self, **format_kwargs: str | Localizable) -> Localizable:
        return _FormattedLocalizable(self, format_kwargs)


class _PlainStrLocalizable(_FormattableLocalizable):
    def __init__(self, plain: str):
        self._plain = plain

    @override
    def localize(self, localizer: Localizer) -> str:
        return self._plain


def plain(plain: Any) -> _FormattableLocalizable:
    """
    Create a new localizable that outputs the given plain text string.
    """
    return _PlainStrLocalizable(str(plain))


class _GettextLocalizable(_FormattableLocalizable):
    def __init__(self, message: str):
        self._message = message

    @override
    def localize(self, localizer: Localizer) -> str:
        return localizer.gettext(self._message)


def _(message: str) -> _FormattableLocalizable:
    """
    Like :py:meth:`gettext._`.

    Keyword arguments to ``format()`` are identical to those of :py:meth:`str.format`, except that
    any :py:class:`appfs.locale.Localizable` will be localized before string formatting.
    """
    return _GettextLocalizable(message)


class _FormattedLocalizable(Localizable):
    def __init__(
        self,
        localizable: Localizable,
        format_kwargs: Mapping[str, str | Localizable],
    ):
        self._localizable = localizable
        self._format_kwargs = format_kwargs

    @override
    def localize(self, localizer: Localizer) -> str:
        return self._localizable.localize(localizer).format(
            **{
                format_kwarg_key: format_kwarg.localize(localizer)
                if isinstance(format_kwarg, Localizable)
                else format_kwarg
                for format_kwarg_key, format_kwarg in self._format_kwargs.items()
            },
        )

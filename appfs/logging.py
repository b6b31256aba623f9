"""
Provide logging utilities.

Log messages may be :py:class:`appfs.locale.Localizable`, including :py:class:`appfs.error.UserFacingError`. Handlers
that know their user's locale localize them when formatting. Any other handler gets the default localization.
"""

import copy
import sys
from logging import ERROR, WARNING, INFO, NOTSET, StreamHandler, LogRecord

from typing_extensions import override

from appfs.locale import DEFAULT_LOCALIZER, Localizable, Localizer


class CliHandler(
    StreamHandler,  # type: ignore[type-arg]
):
    """
    Output localized log records to stderr, colored by level.
    """

    COLOR_LEVELS = (
        (ERROR, 91),
        (WARNING, 93),
        (INFO, 92),
        (NOTSET, 97),
    )

    def __init__(self, localizer: Localizer = DEFAULT_LOCALIZER):
        StreamHandler.__init__(self, sys.stderr)
        self._localizer = localizer

    @override
    def format(self, record: LogRecord) -> str:
        if isinstance(record.msg, Localizable):
            # Other handlers receive the same record, so leave it untouched.
            record = copy.copy(record)
            record.msg = record.msg.localize(self._localizer)
        return self._color(StreamHandler.format(self, record), self._level_color(record.levelno))

    def _level_color(self, levelno: int) -> int:
        for level, color in self.COLOR_LEVELS:
            if levelno >= level:
                return color
        return self.COLOR_LEVELS[-1][1]

    def _color(self, s: str, color: int) -> str:
        return "\033[%dm%s\033[0m" % (color, s)

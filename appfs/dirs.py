"""
Resolve the directories applications keep their files in.

Two base directories are available:

- the directory containing the running executable;
- the application data directory, which lives in the current user's configuration directory, under an optional
  :py:class:`appfs.category.DataCategory` and the program's name.

Paths are resolved afresh on every call, and are never cached.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path, PurePath
from typing import TYPE_CHECKING

import platformdirs

from appfs.error import PlatformQueryError, PlatformIOError
from appfs.locale import _

if TYPE_CHECKING:
    from appfs.category import DataCategory
    from appfs.config import AppFsConfiguration


def base_name(program: str) -> str:
    """
    Get a program's base name.

    This is the final component of the program's path, without its last extension, so that ``/opt/myapp.exe``
    becomes ``myapp``.
    """
    name = PurePath(program).name
    stem, separator, _extension = name.rpartition(".")
    if separator:
        return stem
    return name


def program_name(*, configuration: AppFsConfiguration | None = None) -> str:
    """
    Get the base name of the running program.

    :raises appfs.error.PlatformQueryError: Raised if the program was invoked without a name.
    """
    if configuration is not None and configuration.program_name is not None:
        return configuration.program_name
    try:
        invoked_as = sys.argv[0]
    except (AttributeError, IndexError):
        invoked_as = ""
    name = base_name(invoked_as)
    if not name:
        raise PlatformQueryError(
            _('Could not determine the program name from "{invoked_as}".').format(
                invoked_as=invoked_as
            )
        )
    return name


def _main_script_path() -> Path | None:
    try:
        invoked_as = sys.argv[0]
    except (AttributeError, IndexError):
        return None
    if not invoked_as:
        return None
    script_path = Path(invoked_as)
    if script_path.is_file():
        return script_path
    return None


def executable_path() -> Path:
    """
    Get the absolute path to the running executable.

    For frozen applications, such as those built with PyInstaller, this is the application itself. Otherwise this is
    the main script, or the Python interpreter if there is no main script, such as in interactive sessions.

    :raises appfs.error.PlatformQueryError: Raised if the platform cannot report the executable's path.
    """
    if getattr(sys, "frozen", False):
        candidate = Path(sys.executable) if sys.executable else None
    else:
        candidate = _main_script_path() or (
            Path(sys.executable) if sys.executable else None
        )
    if candidate is None:
        raise PlatformQueryError(_("Could not determine the path to the running executable."))
    try:
        return candidate.resolve(strict=True)
    except (OSError, RuntimeError) as error:
        raise PlatformQueryError(
            _('Could not resolve the running executable "{executable}": {error}').format(
                executable=str(candidate),
                error=str(error),
            )
        ) from error


def executable_directory() -> Path:
    """
    Get the directory containing the running executable.

    :raises appfs.error.PlatformQueryError: Raised if the platform cannot report the executable's path.
    """
    return executable_path().parent


def user_config_directory(*, configuration: AppFsConfiguration | None = None) -> Path:
    """
    Get the current user's configuration directory.

    This is the roaming application data directory on Windows, ``~/Library/Application Support`` on macOS, and
    ``$XDG_CONFIG_HOME`` or ``~/.config`` elsewhere.

    :raises appfs.error.PlatformQueryError: Raised if the platform cannot report the directory, or if the directory
        is not absolute.
    """
    if configuration is not None and configuration.user_config_directory is not None:
        config_directory_path = configuration.user_config_directory
    else:
        try:
            config_directory_path = platformdirs.user_config_path(roaming=True)
        except (KeyError, OSError, RuntimeError) as error:
            raise PlatformQueryError(
                _("Could not determine the user configuration directory: {error}").format(
                    error=str(error)
                )
            ) from error
    # Covers relative overrides, and platform paths with an unexpanded ``~``.
    if not config_directory_path.is_absolute():
        raise PlatformQueryError(
            _('Could not determine the user configuration directory: "{path}" is not absolute.').format(
                path=str(config_directory_path)
            )
        )
    return config_directory_path


def app_data_directory(
    category: DataCategory, *, configuration: AppFsConfiguration | None = None
) -> Path:
    """
    Get the application data directory for a category, and create it if it does not exist yet.

    The directory is ``{user configuration directory}/{category label}/{program name}``. The category label is
    omitted for :py:attr:`appfs.category.DataCategory.NONE`.

    :raises appfs.error.PlatformQueryError: Raised if the program name or user configuration directory cannot be
        determined.
    :raises appfs.error.PlatformIOError: Raised if the directory cannot be created.
    """
    name = program_name(configuration=configuration)
    directory_path = user_config_directory(configuration=configuration)
    if category.label:
        directory_path /= category.label
    directory_path /= name
    if not directory_path.is_dir():
        try:
            directory_path.mkdir(parents=True, exist_ok=True)
        except OSError as error:
            raise PlatformIOError.new(directory_path, error) from error
        logging.getLogger(__name__).debug(
            _('Created application data directory "{path}".').format(
                path=str(directory_path)
            )
        )
    return directory_path

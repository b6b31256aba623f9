"""
Open, read, and write files relative to the executable or application data directories.
"""

from __future__ import annotations

import asyncio
import enum
from pathlib import Path, PurePath
from typing import BinaryIO, TYPE_CHECKING

import aiofiles

from appfs.category import DataCategory
from appfs.dirs import app_data_directory, executable_directory
from appfs.error import FileNotFound, PlatformIOError

if TYPE_CHECKING:
    from appfs.config import AppFsConfiguration


class BaseDirectory(enum.Enum):
    """
    The directory a path fragment is relative to.
    """

    EXECUTABLE = "executable"
    APP_DATA = "app-data"


def base_directory_path(
    base: BaseDirectory,
    category: DataCategory = DataCategory.NONE,
    *,
    configuration: AppFsConfiguration | None = None,
) -> Path:
    """
    Resolve a base directory.

    The category is only used for :py:attr:`appfs.fs.BaseDirectory.APP_DATA`.
    """
    if base is BaseDirectory.EXECUTABLE:
        return executable_directory()
    return app_data_directory(category, configuration=configuration)


def _resolve(
    path_fragment: str | Path,
    base: BaseDirectory,
    category: DataCategory,
    configuration: AppFsConfiguration | None,
) -> Path:
    fragment = PurePath(path_fragment)
    # Anchored fragments are still nested under the base directory.
    fragment_parts = fragment.parts[1:] if fragment.anchor else fragment.parts
    return base_directory_path(base, category, configuration=configuration).joinpath(
        *fragment_parts
    )


def _read_error(file_path: Path, error: OSError) -> OSError:
    if isinstance(error, FileNotFoundError):
        return FileNotFound.new(file_path)
    return PlatformIOError.new(file_path, error)


def open_file(
    path_fragment: str | Path,
    base: BaseDirectory = BaseDirectory.APP_DATA,
    category: DataCategory = DataCategory.NONE,
    *,
    configuration: AppFsConfiguration | None = None,
) -> BinaryIO:
    """
    Open a file for reading.

    The file is not created if it does not exist. Callers own the returned handle, and should close it, for
    example by using it as a context manager.

    :raises appfs.error.FileNotFound: Raised if the file does not exist.
    :raises appfs.error.PlatformIOError: Raised if the file cannot be opened for any other reason.
    """
    file_path = _resolve(path_fragment, base, category, configuration)
    try:
        return open(file_path, "rb")
    except OSError as error:
        raise _read_error(file_path, error) from error


def read_file(
    path_fragment: str | Path,
    base: BaseDirectory = BaseDirectory.APP_DATA,
    category: DataCategory = DataCategory.NONE,
    *,
    configuration: AppFsConfiguration | None = None,
) -> bytes:
    """
    Read a file's entire contents.

    :raises appfs.error.FileNotFound: Raised if the file does not exist.
    :raises appfs.error.PlatformIOError: Raised if the file cannot be read for any other reason.
    """
    file_path = _resolve(path_fragment, base, category, configuration)
    try:
        with open(file_path, "rb") as f:
            return f.read()
    except OSError as error:
        raise _read_error(file_path, error) from error


def write_file(
    path_fragment: str | Path,
    data: bytes,
    base: BaseDirectory = BaseDirectory.APP_DATA,
    category: DataCategory = DataCategory.NONE,
    *,
    configuration: AppFsConfiguration | None = None,
) -> int:
    """
    Write data to a file, and return the number of bytes written.

    The file is created if it does not exist, and truncated if it does. It is closed before this function
    returns, whether writing succeeded or not.

    :raises appfs.error.PlatformIOError: Raised if the file cannot be created, written, or closed.
    """
    file_path = _resolve(path_fragment, base, category, configuration)
    try:
        with open(file_path, "wb") as f:
            return f.write(data)
    except OSError as error:
        raise PlatformIOError.new(file_path, error) from error


async def read_file_async(
    path_fragment: str | Path,
    base: BaseDirectory = BaseDirectory.APP_DATA,
    category: DataCategory = DataCategory.NONE,
    *,
    configuration: AppFsConfiguration | None = None,
) -> bytes:
    """
    Like :py:func:`appfs.fs.read_file`, but without blocking the event loop.
    """
    file_path = await asyncio.to_thread(
        _resolve, path_fragment, base, category, configuration
    )
    try:
        async with aiofiles.open(file_path, "rb") as f:
            return await f.read()
    except OSError as error:
        raise _read_error(file_path, error) from error


async def write_file_async(
    path_fragment: str | Path,
    data: bytes,
    base: BaseDirectory = BaseDirectory.APP_DATA,
    category: DataCategory = DataCategory.NONE,
    *,
    configuration: AppFsConfiguration | None = None,
) -> int:
    """
    Like :py:func:`appfs.fs.write_file`, but without blocking the event loop.
    """
    file_path = await asyncio.to_thread(
        _resolve, path_fragment, base, category, configuration
    )
    try:
        async with aiofiles.open(file_path, "wb") as f:
            return await f.write(data)
    except OSError as error:
        raise PlatformIOError.new(file_path, error) from error


def open_executable_file(path_fragment: str | Path) -> BinaryIO:
    """
    Open a file relative to the executable directory for reading.
    """
    return open_file(path_fragment, BaseDirectory.EXECUTABLE)


def read_executable_file(path_fragment: str | Path) -> bytes:
    """
    Read a file relative to the executable directory.
    """
    return read_file(path_fragment, BaseDirectory.EXECUTABLE)


def write_executable_file(path_fragment: str | Path, data: bytes) -> int:
    """
    Write a file relative to the executable directory.
    """
    return write_file(path_fragment, data, BaseDirectory.EXECUTABLE)


def open_app_data_file(
    path_fragment: str | Path,
    category: DataCategory = DataCategory.NONE,
    *,
    configuration: AppFsConfiguration | None = None,
) -> BinaryIO:
    """
    Open a file relative to the application data directory for reading.

    The application data directory is created if it does not exist yet, but the file is not.
    """
    return open_file(
        path_fragment, BaseDirectory.APP_DATA, category, configuration=configuration
    )


def read_app_data_file(
    path_fragment: str | Path,
    category: DataCategory = DataCategory.NONE,
    *,
    configuration: AppFsConfiguration | None = None,
) -> bytes:
    """
    Read a file relative to the application data directory.
    """
    return read_file(
        path_fragment, BaseDirectory.APP_DATA, category, configuration=configuration
    )


def write_app_data_file(
    path_fragment: str | Path,
    data: bytes,
    category: DataCategory = DataCategory.NONE,
    *,
    configuration: AppFsConfiguration | None = None,
) -> int:
    """
    Write a file relative to the application data directory.
    """
    return write_file(
        path_fragment,
        data,
        BaseDirectory.APP_DATA,
        category,
        configuration=configuration,
    )

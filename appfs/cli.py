"""
Provide the Command Line Interface.
"""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from functools import wraps
from pathlib import Path
from typing import Callable, Iterator, ParamSpec, TypeVar

import click
from click import Context, get_current_context

from appfs.about import version
from appfs.category import DataCategory
from appfs.config import AppFsConfiguration, read_configuration
from appfs.dirs import app_data_directory, executable_directory
from appfs.error import UserFacingError
from appfs.fs import BaseDirectory, read_file, write_file
from appfs.logging import CliHandler

_P = ParamSpec("_P")
_T = TypeVar("_T")


@contextmanager
def catch_exceptions() -> Iterator[None]:
    """
    Catch and log all exceptions.
    """
    try:
        yield
    except KeyboardInterrupt:
        print("Quitting...")  # noqa T201
        sys.exit(0)
    except Exception as e:
        logger = logging.getLogger(__name__)
        if isinstance(e, UserFacingError):
            logger.error(e)
        else:
            logger.exception(e)
        sys.exit(1)


def command(f: Callable[_P, _T]) -> Callable[_P, _T]:
    """
    Mark something an appfs command.
    """

    @wraps(f)
    @catch_exceptions()
    def _command(*args: _P.args, **kwargs: _P.kwargs) -> _T:
        return f(*args, **kwargs)

    return _command


def _configuration() -> AppFsConfiguration:
    return get_current_context().obj["configuration"]


_category_option = click.option(
    "--category",
    type=click.Choice(
        [category.label for category in DataCategory if category.label],
        case_sensitive=False,
    ),
    help="The category of application data. Omit this to use the user configuration directory itself.",
    callback=lambda _, __, label: DataCategory.from_label(label or ""),
)


_base_option = click.option(
    "--base",
    type=click.Choice([base.value for base in BaseDirectory]),
    default=BaseDirectory.APP_DATA.value,
    show_default=True,
    help="The directory the path is relative to.",
    callback=lambda _, __, value: BaseDirectory(value),
)


def _init_ctx_logging(ctx: Context) -> None:
    handler = CliHandler()
    root_logger = logging.getLogger()
    root_logger.addHandler(handler)
    ctx.call_on_close(lambda: root_logger.removeHandler(handler))


@click.group(help="Locate, read, and write application files.")
@click.option(
    "--configuration",
    "-c",
    "configuration_file_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="The path to an appfs configuration file in JSON or YAML format.",
)
@click.option(
    "-v",
    "--verbose",
    default=False,
    is_flag=True,
    help="Show verbose output, including debug log messages.",
)
@click.version_option(version(), prog_name="appfs")
@click.pass_context
@command
def main(ctx: Context, configuration_file_path: Path | None, verbose: bool) -> None:
    """
    Launch appfs's Command-Line Interface.
    """
    ctx.ensure_object(dict)
    _init_ctx_logging(ctx)
    if verbose:
        logging.getLogger("appfs").setLevel(logging.DEBUG)
    ctx.obj["configuration"] = (
        read_configuration(configuration_file_path)
        if configuration_file_path
        else AppFsConfiguration()
    )


@main.command("executable-directory", help="Show the directory of the running executable.")
@command
def _executable_directory() -> None:
    click.echo(str(executable_directory()))


@main.command(
    "app-data-directory",
    help="Show the application data directory, and create it if it does not exist yet.",
)
@_category_option
@command
def _app_data_directory(category: DataCategory) -> None:
    click.echo(str(app_data_directory(category, configuration=_configuration())))


@main.command("read", help="Write a file's contents to stdout.")
@click.argument("path_fragment")
@_base_option
@_category_option
@command
def _read(path_fragment: str, base: BaseDirectory, category: DataCategory) -> None:
    data = read_file(path_fragment, base, category, configuration=_configuration())
    stdout = click.get_binary_stream("stdout")
    stdout.write(data)
    stdout.flush()


@main.command("write", help="Write stdin to a file, replacing any existing contents.")
@click.argument("path_fragment")
@_base_option
@_category_option
@command
def _write(path_fragment: str, base: BaseDirectory, category: DataCategory) -> None:
    data = click.get_binary_stream("stdin").read()
    written = write_file(
        path_fragment, data, base, category, configuration=_configuration()
    )
    click.echo(str(written))

"""
Provide configuration for appfs.

Configuration is optional. It overrides what appfs would otherwise ask the platform for, which is useful for
applications started through a launcher, or under a name other than their own, and for tests.
"""

from __future__ import annotations

import json
from pathlib import Path
from textwrap import indent
from typing import Any, Self

import yaml
from typing_extensions import override

from appfs.error import UserFacingError, FileNotFound, PlatformIOError
from appfs.locale import _, Localizable


class ConfigurationError(UserFacingError, ValueError):
    """
    A configuration error.
    """

    def __init__(self, message: Localizable):
        super().__init__(message)
        self._contexts: tuple[str, ...] = ()

    @override
    def __str__(self) -> str:
        return (super().__str__() + "\n" + indent("\n".join(self._contexts), "- ")).strip()

    @property
    def contexts(self) -> tuple[str, ...]:
        """
        The messages describing the error's context.
        """
        return self._contexts

    def with_context(self, *contexts: str) -> Self:
        """
        Add a message describing the error's context.
        """
        self_copy = type(self)(self._localizable_message)
        self_copy._contexts = (*self._contexts, *contexts)
        return self_copy


class Format:
    """
    A configuration file format.
    """

    @property
    def extensions(self) -> set[str]:
        raise NotImplementedError

    def load(self, dumped_configuration: str) -> Any:
        raise NotImplementedError


class Json(Format):
    @property
    @override
    def extensions(self) -> set[str]:
        return {"json"}

    @override
    def load(self, dumped_configuration: str) -> Any:
        try:
            return json.loads(dumped_configuration)
        except json.JSONDecodeError as e:
            raise ConfigurationError(_("Invalid JSON: {error}.").format(error=str(e))) from None


class Yaml(Format):
    @property
    @override
    def extensions(self) -> set[str]:
        return {"yaml", "yml"}

    @override
    def load(self, dumped_configuration: str) -> Any:
        try:
            return yaml.safe_load(dumped_configuration)
        except yaml.YAMLError as e:
            raise ConfigurationError(_("Invalid YAML: {error}.").format(error=str(e))) from None


FORMATS: list[Format] = [
    Json(),
    Yaml(),
]

FORMATS_BY_EXTENSION: dict[str, Format] = {
    extension: _format for _format in FORMATS for extension in _format.extensions
}


def format_for(configuration_file_path: Path) -> Format:
    """
    Get the format for a configuration file, based on its extension.
    """
    extension = configuration_file_path.suffix[1:]
    try:
        return FORMATS_BY_EXTENSION[extension]
    except KeyError:
        raise ConfigurationError(
            _('Unknown file format ".{extension}". Supported formats are: {supported_formats}.').format(
                extension=extension,
                supported_formats=", ".join(
                    f".{extension}" for extension in sorted(FORMATS_BY_EXTENSION)
                ),
            )
        ) from None


class AppFsConfiguration:
    """
    Override how appfs resolves directories.

    Fields left ``None`` are resolved from the platform.
    """

    def __init__(
        self,
        *,
        program_name: str | None = None,
        user_config_directory: Path | None = None,
    ):
        self.program_name = program_name
        self.user_config_directory = user_config_directory

    def load(self, dump: Any) -> None:
        """
        Load a configuration dump into ``self``.

        :raises appfs.config.ConfigurationError: Raised if the dump is invalid.
        """
        if dump is None:
            return
        if not isinstance(dump, dict):
            raise ConfigurationError(_("This must be a key-value mapping."))
        known_keys = {"program_name", "user_config_directory"}
        for key in dump:
            if key not in known_keys:
                raise ConfigurationError(
                    _("Unknown key: {unknown_key}. Did you mean {known_keys}?").format(
                        unknown_key=f'"{key}"',
                        known_keys=", ".join(f'"{x}"' for x in sorted(known_keys)),
                    )
                ).with_context(key)
        if "program_name" in dump:
            program_name = dump["program_name"]
            if not isinstance(program_name, str) or not program_name:
                raise ConfigurationError(_("This must be a non-empty string.")).with_context(
                    "program_name"
                )
            self.program_name = program_name
        if "user_config_directory" in dump:
            user_config_directory = dump["user_config_directory"]
            if not isinstance(user_config_directory, str) or not user_config_directory:
                raise ConfigurationError(_("This must be a non-empty string.")).with_context(
                    "user_config_directory"
                )
            self.user_config_directory = Path(user_config_directory).expanduser().resolve()


def read_configuration(configuration_file_path: Path) -> AppFsConfiguration:
    """
    Read configuration from a JSON or YAML file.

    :raises appfs.config.ConfigurationError: Raised if the file's format is unknown, or its contents are invalid.
    :raises appfs.error.FileNotFound: Raised if the file does not exist.
    """
    configuration_format = format_for(configuration_file_path)
    try:
        with open(configuration_file_path, encoding="utf-8") as f:
            dumped_configuration = f.read()
    except FileNotFoundError:
        raise FileNotFound.new(configuration_file_path) from None
    except OSError as error:
        raise PlatformIOError.new(configuration_file_path, error) from error
    configuration = AppFsConfiguration()
    try:
        configuration.load(configuration_format.load(dumped_configuration))
    except ConfigurationError as error:
        raise error.with_context(
            f'in "{configuration_file_path.resolve()}"'
        ) from None
    return configuration


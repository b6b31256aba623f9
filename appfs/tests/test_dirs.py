import sys
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from appfs.category import DataCategory
from appfs.config import AppFsConfiguration
from appfs.dirs import (
    app_data_directory,
    base_name,
    executable_directory,
    executable_path,
    program_name,
    user_config_directory,
)
from appfs.error import PlatformIOError, PlatformQueryError


class TestBaseName:
    @pytest.mark.parametrize(
        ("expected", "program"),
        [
            ("myapp", "myapp.exe"),
            ("myapp", "myapp"),
            ("myapp", "/opt/myapp/myapp"),
            ("myapp", "/opt/my.app/myapp.exe"),
            ("myapp.tar", "myapp.tar.gz"),
            ("", ""),
        ],
    )
    async def test(self, expected: str, program: str) -> None:
        assert base_name(program) == expected


class TestProgramName:
    async def test(self, program: str) -> None:
        assert program_name() == program

    async def test_with_configuration(self, program: str) -> None:
        configuration = AppFsConfiguration(program_name="my-other-app")
        assert program_name(configuration=configuration) == "my-other-app"

    async def test_without_program_name(self, mocker: MockerFixture) -> None:
        mocker.patch("sys.argv", [""])
        with pytest.raises(PlatformQueryError):
            program_name()

    async def test_without_arguments(self, mocker: MockerFixture) -> None:
        mocker.patch("sys.argv", [])
        with pytest.raises(PlatformQueryError):
            program_name()


class TestExecutablePath:
    async def test_with_main_script(self, mocker: MockerFixture, tmp_path: Path) -> None:
        script_path = tmp_path / "myapp.py"
        script_path.touch()
        mocker.patch("sys.argv", [str(script_path)])
        assert executable_path() == script_path.resolve()

    async def test_without_main_script(self, mocker: MockerFixture, tmp_path: Path) -> None:
        interpreter_path = tmp_path / "python"
        interpreter_path.touch()
        mocker.patch("sys.argv", [""])
        mocker.patch("sys.executable", str(interpreter_path))
        assert executable_path() == interpreter_path.resolve()

    async def test_frozen(self, mocker: MockerFixture, tmp_path: Path) -> None:
        script_path = tmp_path / "myapp.py"
        script_path.touch()
        frozen_executable_path = tmp_path / "dist" / "myapp.exe"
        frozen_executable_path.parent.mkdir()
        frozen_executable_path.touch()
        mocker.patch.object(sys, "frozen", True, create=True)
        mocker.patch("sys.argv", [str(script_path)])
        mocker.patch("sys.executable", str(frozen_executable_path))
        assert executable_path() == frozen_executable_path.resolve()

    async def test_without_executable(self, mocker: MockerFixture) -> None:
        mocker.patch("sys.argv", [""])
        mocker.patch("sys.executable", "")
        with pytest.raises(PlatformQueryError):
            executable_path()

    async def test_with_deleted_executable(
        self, mocker: MockerFixture, tmp_path: Path
    ) -> None:
        mocker.patch("sys.argv", [""])
        mocker.patch("sys.executable", str(tmp_path / "deleted"))
        with pytest.raises(PlatformQueryError):
            executable_path()


class TestExecutableDirectory:
    async def test(self) -> None:
        sut = executable_directory()
        assert sut.is_absolute()
        assert sut.is_dir()

    async def test_with_main_script(self, mocker: MockerFixture, tmp_path: Path) -> None:
        script_path = tmp_path / "myapp.py"
        script_path.touch()
        mocker.patch("sys.argv", [str(script_path)])
        assert executable_directory() == tmp_path.resolve()


class TestUserConfigDirectory:
    async def test(self, user_config_directory_path: Path) -> None:
        assert user_config_directory() == user_config_directory_path

    async def test_with_configuration(
        self, user_config_directory_path: Path, tmp_path: Path
    ) -> None:
        configuration = AppFsConfiguration(user_config_directory=tmp_path / "elsewhere")
        assert user_config_directory(configuration=configuration) == tmp_path / "elsewhere"

    async def test_with_relative_configuration(self, user_config_directory_path: Path) -> None:
        configuration = AppFsConfiguration(user_config_directory=Path("relative"))
        with pytest.raises(PlatformQueryError):
            user_config_directory(configuration=configuration)

    async def test_without_home_directory(self, mocker: MockerFixture) -> None:
        mocker.patch("platformdirs.user_config_path", return_value=Path("~/.config"))
        with pytest.raises(PlatformQueryError):
            user_config_directory()

    async def test_with_platform_error(self, mocker: MockerFixture) -> None:
        mocker.patch("platformdirs.user_config_path", side_effect=KeyError("APPDATA"))
        with pytest.raises(PlatformQueryError):
            user_config_directory()

    async def test_without_override(self) -> None:
        assert user_config_directory().is_absolute()


class TestAppDataDirectory:
    @pytest.mark.parametrize(
        ("expected_relative_path", "category"),
        [
            (Path("myapp"), DataCategory.NONE),
            (Path("Local") / "myapp", DataCategory.LOCAL),
            (Path("LocalLow") / "myapp", DataCategory.LOCAL_LOW),
            (Path("Roaming") / "myapp", DataCategory.ROAMING),
        ],
    )
    async def test(
        self,
        expected_relative_path: Path,
        category: DataCategory,
        program: str,
        user_config_directory_path: Path,
    ) -> None:
        sut = app_data_directory(category)
        assert sut == user_config_directory_path / expected_relative_path
        assert sut.is_dir()

    async def test_without_category_segment(
        self, program: str, user_config_directory_path: Path
    ) -> None:
        sut = app_data_directory(DataCategory.NONE)
        assert sut.parts[-2:] == (user_config_directory_path.name, program)

    @pytest.mark.parametrize(
        "category",
        list(DataCategory),
    )
    async def test_is_idempotent(
        self, category: DataCategory, program: str, user_config_directory_path: Path
    ) -> None:
        assert app_data_directory(category) == app_data_directory(category)

    async def test_with_existing_directory(
        self, program: str, user_config_directory_path: Path
    ) -> None:
        directory_path = user_config_directory_path / "Roaming" / program
        directory_path.mkdir(parents=True)
        (directory_path / "settings.json").write_text("{}")
        assert app_data_directory(DataCategory.ROAMING) == directory_path
        assert (directory_path / "settings.json").read_text() == "{}"

    async def test_with_configuration(self, tmp_path: Path) -> None:
        configuration = AppFsConfiguration(
            program_name="my-other-app",
            user_config_directory=tmp_path,
        )
        sut = app_data_directory(DataCategory.LOCAL, configuration=configuration)
        assert sut == tmp_path / "Local" / "my-other-app"
        assert sut.is_dir()

    async def test_with_relative_configuration(
        self, program: str, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        configuration = AppFsConfiguration(user_config_directory=Path("relative"))
        with pytest.raises(PlatformQueryError):
            app_data_directory(DataCategory.LOCAL, configuration=configuration)
        assert not (tmp_path / "relative").exists()

    async def test_with_uncreatable_directory(
        self, mocker: MockerFixture, program: str, tmp_path: Path
    ) -> None:
        user_config_file_path = tmp_path / "config"
        user_config_file_path.touch()
        mocker.patch("platformdirs.user_config_path", return_value=user_config_file_path)
        with pytest.raises(PlatformIOError):
            app_data_directory(DataCategory.LOCAL)

    async def test_with_platform_query_error(
        self, mocker: MockerFixture, user_config_directory_path: Path
    ) -> None:
        mocker.patch("sys.argv", [""])
        with pytest.raises(PlatformQueryError):
            app_data_directory(DataCategory.NONE)
        assert list(user_config_directory_path.iterdir()) == []

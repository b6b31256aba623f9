"""
Pytest configuration.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pytest_mock import MockerFixture


PROGRAM_NAME = "myapp"


@pytest.fixture
def user_config_directory_path(tmp_path: Path, mocker: MockerFixture) -> Path:
    """
    Redirect the user configuration directory to a temporary directory.
    """
    user_config_directory_path = tmp_path / "config"
    user_config_directory_path.mkdir()
    mocker.patch("platformdirs.user_config_path", return_value=user_config_directory_path)
    return user_config_directory_path


@pytest.fixture
def program(mocker: MockerFixture) -> str:
    """
    Pretend the running program was invoked as ``myapp.exe``.
    """
    mocker.patch("sys.argv", [f"/opt/{PROGRAM_NAME}/{PROGRAM_NAME}.exe"])
    return PROGRAM_NAME

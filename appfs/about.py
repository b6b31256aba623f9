"""
Provide information about (this version of) appfs.
"""

from appfs import _ROOT_DIRECTORY_PATH


def version() -> str:
    """
    Get the current appfs installation's version.
    """
    with open(
        _ROOT_DIRECTORY_PATH / "appfs" / "assets" / "VERSION", encoding="utf-8"
    ) as f:
        return f.read().strip()

"""Installed version of minicalc."""

from importlib.metadata import PackageNotFoundError, version

DISTRIBUTION_NAME = "minicalc"
UNKNOWN_VERSION = "0.0.0+unknown"


def get_version() -> str:
    """Version recorded in the installed distribution metadata.

    Editable installs carry metadata too, so this only falls back when the
    package is imported straight from a source checkout.
    """
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return UNKNOWN_VERSION


__version__ = get_version()

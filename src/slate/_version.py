"""Version of the installed Slate distribution."""

from importlib.metadata import PackageNotFoundError, version

DISTRIBUTION = "slate-lang"


def get_version() -> str:
    """Return the installed version, or ``0+unknown`` from an uninstalled checkout."""
    try:
        return version(DISTRIBUTION)
    except PackageNotFoundError:
        return "0+unknown"

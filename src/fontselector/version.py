"""Package version helpers shared across interfaces."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version as _pkg_version


def get_version() -> str:
    """Return the installed fontselector version."""
    try:
        return _pkg_version("fontselector")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = get_version()

__all__ = ["__version__", "get_version"]

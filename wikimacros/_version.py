"""Package version, taken from the installed distribution metadata."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("wikimacros")
except PackageNotFoundError:
    # source checkout that was never pip-installed
    __version__ = "0.0.0.dev0"

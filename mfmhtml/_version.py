"""Installed distribution version of mfm-html."""
from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__: str = version("mfm-html")
except PackageNotFoundError:
    # Imported from a checkout that was never pip-installed.
    __version__ = "0.0.0+unknown"

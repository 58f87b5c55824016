from __future__ import annotations

from importlib import metadata

from theatrical.reports import html_statement, statement

try:
    __version__ = metadata.version("theatrical")
except metadata.PackageNotFoundError:
    __version__ = "0.0.0+local"

__all__ = ["__version__", "html_statement", "statement"]

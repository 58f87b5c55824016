"""Statement renderers and the command line entry point."""

from __future__ import annotations

from .html import render_html
from .money import usd
from .text import render_plain_text

__all__ = ["render_html", "render_plain_text", "usd"]

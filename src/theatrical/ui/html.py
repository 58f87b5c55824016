"""HTML statement rendering backed by a Jinja2 template."""

from __future__ import annotations

from functools import cache
from typing import TYPE_CHECKING

from jinja2 import Environment, PackageLoader, StrictUndefined, select_autoescape

from .money import usd

if TYPE_CHECKING:
    from theatrical.domain.model import StatementData

STATEMENT_TEMPLATE = "statement.html"


@cache
def _environment() -> Environment:
    env = Environment(
        loader=PackageLoader("theatrical.ui", "templates"),
        autoescape=select_autoescape(["html", "xml"]),
        undefined=StrictUndefined,
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["usd"] = usd
    return env


def render_html(data: StatementData) -> str:
    template = _environment().get_template(STATEMENT_TEMPLATE)
    return template.render(data=data)

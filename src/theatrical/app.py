"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, TypeAlias

from theatrical.adapters.json import load_catalog, load_invoices
from theatrical.config import OutputFormat
from theatrical.domain.pricing import DEFAULT_PRICING
from theatrical.reports import html_statement, statement

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable
    from pathlib import Path

    from theatrical.domain.model import Catalog, Invoice
    from theatrical.domain.pricing import PricingRegistry

StatementRenderer: TypeAlias = "Callable[..., str]"


log = getLogger(__name__)

_RENDERERS: dict[OutputFormat, StatementRenderer] = {
    OutputFormat.TEXT: statement,
    OutputFormat.HTML: html_statement,
}


def render_statements(
    invoices: Iterable[Invoice],
    catalog: Catalog,
    *,
    output_format: OutputFormat = OutputFormat.TEXT,
    pricing: PricingRegistry = DEFAULT_PRICING,
) -> list[str]:
    """Render one statement per invoice, failing on the first invalid invoice."""

    render = _RENDERERS[output_format]
    rendered = [render(invoice, catalog, pricing=pricing) for invoice in invoices]
    log.info("Rendered %s %s statement(s)", len(rendered), output_format.value)
    return rendered


def render_statement_files(
    plays_path: Path,
    invoices_path: Path,
    *,
    output_format: OutputFormat = OutputFormat.TEXT,
) -> list[str]:
    """Load plays and invoices from JSON files and render their statements."""

    catalog = load_catalog(plays_path)
    invoices = load_invoices(invoices_path)
    return render_statements(invoices, catalog, output_format=output_format)

"""Public statement operations."""

from __future__ import annotations

from typing import TYPE_CHECKING

from theatrical.domain.pricing import DEFAULT_PRICING
from theatrical.domain.statement import make_statement_data
from theatrical.ui.html import render_html
from theatrical.ui.text import render_plain_text

if TYPE_CHECKING:
    from theatrical.domain.model import Catalog, Invoice
    from theatrical.domain.pricing import PricingRegistry


def statement(
    invoice: Invoice, catalog: Catalog, *, pricing: PricingRegistry = DEFAULT_PRICING
) -> str:
    """Return the plain-text statement for ``invoice``.

    Raises:
        UnknownPlayError: If a performance references a play missing from ``catalog``.
        UnknownGenreError: If a play's genre has no registered calculator.
    """

    return render_plain_text(make_statement_data(invoice, catalog, pricing=pricing))


def html_statement(
    invoice: Invoice, catalog: Catalog, *, pricing: PricingRegistry = DEFAULT_PRICING
) -> str:
    """Return the HTML statement for ``invoice``; fails the same way as :func:`statement`."""

    return render_html(make_statement_data(invoice, catalog, pricing=pricing))

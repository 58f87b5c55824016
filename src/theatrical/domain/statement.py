"""Fold priced performances into statement data."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from theatrical.domain.enrichment import enrich_performances
from theatrical.domain.model import EnrichedPerformance, StatementData
from theatrical.domain.pricing import DEFAULT_PRICING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from theatrical.domain.model import Catalog, Invoice, PlayedPerformance
    from theatrical.domain.pricing import PricingRegistry


log = getLogger(__name__)


def price_performance(
    played: PlayedPerformance, *, pricing: PricingRegistry = DEFAULT_PRICING
) -> EnrichedPerformance:
    priced = pricing.price(played.performance, played.play)
    return EnrichedPerformance(
        play_id=played.play_id,
        performance=played.performance,
        play=played.play,
        amount=priced.amount,
        volume_credits=priced.volume_credits,
    )


def aggregate(customer: str, performances: Iterable[EnrichedPerformance]) -> StatementData:
    """Build :class:`StatementData` from priced lines, keeping their order."""

    lines = tuple(performances)
    return StatementData(
        customer=customer,
        performances=lines,
        total_amount=sum(line.amount for line in lines),
        total_volume_credits=sum(line.volume_credits for line in lines),
    )


def make_statement_data(
    invoice: Invoice,
    catalog: Catalog,
    *,
    pricing: PricingRegistry = DEFAULT_PRICING,
) -> StatementData:
    """Enrich, price and total every performance on ``invoice``.

    All plays are resolved before any line is priced, so an unknown play id fails the whole
    statement before an amount is computed.

    Raises:
        UnknownPlayError: If a performance references a play missing from ``catalog``.
        UnknownGenreError: If a play's genre has no registered calculator.
    """

    played = enrich_performances(invoice.performances, catalog)
    data = aggregate(
        invoice.customer,
        (price_performance(item, pricing=pricing) for item in played),
    )
    log.debug(
        "Statement for %s: lines=%s, total_amount=%s, total_volume_credits=%s",
        data.customer,
        len(data.performances),
        data.total_amount,
        data.total_volume_credits,
    )
    return data

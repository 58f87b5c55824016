"""Public domain model surface."""

from __future__ import annotations

from theatrical.domain.model.catalog import Catalog, Play, PlayId
from theatrical.domain.model.enums import Genre
from theatrical.domain.model.invoice import Invoice, Performance
from theatrical.domain.model.statement import (
    EnrichedPerformance,
    PlayedPerformance,
    Price,
    StatementData,
)

__all__ = [
    "Catalog",
    "EnrichedPerformance",
    "Genre",
    "Invoice",
    "Performance",
    "Play",
    "PlayId",
    "PlayedPerformance",
    "Price",
    "StatementData",
]

"""JSON document adapter for plays and invoices."""

from __future__ import annotations

from .loader import PayloadError, load_catalog, load_invoices
from .schema import (
    InvoicePayload,
    InvoicesDocument,
    PerformancePayload,
    PlayPayload,
    PlaysDocument,
)
from .translator import to_catalog, to_genre, to_invoice, to_invoices, to_play

__all__ = [
    "InvoicePayload",
    "InvoicesDocument",
    "PayloadError",
    "PerformancePayload",
    "PlayPayload",
    "PlaysDocument",
    "load_catalog",
    "load_invoices",
    "to_catalog",
    "to_genre",
    "to_invoice",
    "to_invoices",
    "to_play",
]

"""Translate JSON payloads into domain records."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from theatrical.domain.model import Genre, Invoice, Performance, Play

if TYPE_CHECKING:
    from .schema import InvoicePayload, InvoicesDocument, PlayPayload, PlaysDocument


log = getLogger(__name__)


def to_genre(raw: str) -> Genre | str:
    """Return the matching :class:`Genre`, or ``raw`` unchanged when it is unknown."""

    try:
        return Genre(raw)
    except ValueError:
        log.debug("Keeping unrecognised genre %r for pricing to reject", raw)
        return raw


def to_play(payload: PlayPayload) -> Play:
    return Play(name=payload.name, genre=to_genre(payload.genre))


def to_catalog(document: PlaysDocument) -> dict[str, Play]:
    return {play_id: to_play(payload) for play_id, payload in document.root.items()}


def to_invoice(payload: InvoicePayload) -> Invoice:
    return Invoice(
        customer=payload.customer,
        performances=tuple(
            Performance(play_id=item.play_id, audience=item.audience)
            for item in payload.performances
        ),
    )


def to_invoices(document: InvoicesDocument) -> list[Invoice]:
    return [to_invoice(payload) for payload in document.invoices]

"""Join booked performances with their plays."""

from __future__ import annotations

from typing import TYPE_CHECKING

from theatrical.domain.errors import UnknownPlayError
from theatrical.domain.model import PlayedPerformance

if TYPE_CHECKING:
    from collections.abc import Iterable

    from theatrical.domain.model import Catalog, Performance


def enrich_performance(performance: Performance, catalog: Catalog) -> PlayedPerformance:
    """Return ``performance`` joined with its play from ``catalog``.

    Raises:
        UnknownPlayError: If ``performance.play_id`` is not in the catalog.
    """

    try:
        play = catalog[performance.play_id]
    except KeyError:
        raise UnknownPlayError(performance.play_id) from None
    return PlayedPerformance(play_id=performance.play_id, performance=performance, play=play)


def enrich_performances(
    performances: Iterable[Performance], catalog: Catalog
) -> list[PlayedPerformance]:
    """Enrich every performance, failing on the first unknown play id."""

    return [enrich_performance(performance, catalog) for performance in performances]

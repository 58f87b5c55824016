from __future__ import annotations

import pytest

from theatrical.domain.enrichment import enrich_performance, enrich_performances
from theatrical.domain.errors import ErrorCode, UnknownPlayError
from theatrical.domain.model import Performance, Play


def test_enrich_performance_joins_play(plays: dict[str, Play]) -> None:
    performance = Performance(play_id="hamlet", audience=55)

    played = enrich_performance(performance, plays)

    assert played.play_id == "hamlet"
    assert played.play == plays["hamlet"]
    assert played.performance is performance
    assert played.audience == 55


def test_enrich_performance_unknown_play(plays: dict[str, Play]) -> None:
    with pytest.raises(UnknownPlayError, match="macbeth: unknown play") as exc:
        enrich_performance(Performance(play_id="macbeth", audience=10), plays)

    assert exc.value.play_id == "macbeth"
    assert exc.value.code is ErrorCode.UNKNOWN_PLAY
    assert isinstance(exc.value, LookupError)


def test_enrich_performances_preserves_order(plays: dict[str, Play]) -> None:
    performances = [
        Performance("othello", 1),
        Performance("hamlet", 2),
        Performance("as-like", 3),
    ]

    played = enrich_performances(performances, plays)

    assert [item.play_id for item in played] == ["othello", "hamlet", "as-like"]

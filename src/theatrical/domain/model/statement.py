"""Derived records produced while building a statement."""

from __future__ import annotations

from dataclasses import dataclass

from .catalog import Play, PlayId  # noqa: TC001
from .invoice import Performance  # noqa: TC001


@dataclass(frozen=True, slots=True)
class PlayedPerformance:
    """A performance joined with its play, not yet priced."""

    play_id: PlayId
    performance: Performance
    play: Play

    @property
    def audience(self) -> int:
        return self.performance.audience


@dataclass(frozen=True, slots=True)
class Price:
    amount: int
    volume_credits: int


@dataclass(frozen=True, slots=True)
class EnrichedPerformance:
    """A statement line: the performance, its play and the computed price.

    ``amount`` is in cents.
    """

    play_id: PlayId
    performance: Performance
    play: Play
    amount: int
    volume_credits: int

    @property
    def audience(self) -> int:
        return self.performance.audience


@dataclass(frozen=True, slots=True)
class StatementData:
    """Everything a renderer needs; totals always equal the sums of the lines."""

    customer: str
    performances: tuple[EnrichedPerformance, ...]
    total_amount: int
    total_volume_credits: int

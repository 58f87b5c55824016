"""Genre-keyed pricing strategies.

Each genre has one calculator; :class:`PricingRegistry` maps genres to calculators so a new
genre is added by registering a calculator, without touching the existing ones. Amounts are
integer cents.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Protocol

from theatrical.domain.errors import UnknownGenreError
from theatrical.domain.model import Genre, Price

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from theatrical.domain.model import Performance, Play

VOLUME_CREDIT_THRESHOLD = 30


class PerformanceCalculator(Protocol):
    def amount_for(self, audience: int) -> int: ...

    def volume_credits_for(self, audience: int) -> int: ...


class BaseCalculator(ABC):
    """Shared volume-credit rule: one credit per seat above the threshold."""

    @abstractmethod
    def amount_for(self, audience: int) -> int: ...

    def volume_credits_for(self, audience: int) -> int:
        return max(audience - VOLUME_CREDIT_THRESHOLD, 0)


class TragedyCalculator(BaseCalculator):
    base_amount = 40000
    surge_threshold = 30
    surge_per_seat = 1000

    def amount_for(self, audience: int) -> int:
        amount = self.base_amount
        if audience > self.surge_threshold:
            amount += self.surge_per_seat * (audience - self.surge_threshold)
        return amount


class ComedyCalculator(BaseCalculator):
    base_amount = 30000
    surge_threshold = 20
    surge_flat = 10000
    surge_per_seat = 500
    per_seat = 300
    seats_per_bonus_credit = 5

    def amount_for(self, audience: int) -> int:
        amount = self.base_amount
        if audience > self.surge_threshold:
            amount += self.surge_flat + self.surge_per_seat * (audience - self.surge_threshold)
        amount += self.per_seat * audience
        return amount

    def volume_credits_for(self, audience: int) -> int:
        return super().volume_credits_for(audience) + audience // self.seats_per_bonus_credit


class PricingRegistry:
    """Lookup table from genre to pricing strategy."""

    def __init__(self, calculators: Mapping[Genre, PerformanceCalculator] | None = None) -> None:
        self._calculators: dict[Genre | str, PerformanceCalculator] = {}
        for genre, calculator in (calculators or {}).items():
            self.register(genre, calculator)

    def register(
        self,
        genre: Genre | str,
        calculator: PerformanceCalculator,
        *,
        replace: bool = False,
    ) -> None:
        if genre in self._calculators and not replace:
            raise ValueError(f"Calculator already registered for genre: {genre}")
        self._calculators[genre] = calculator

    def calculator_for(self, genre: Genre | str) -> PerformanceCalculator:
        """Return the calculator for ``genre``.

        Raises:
            UnknownGenreError: If no calculator is registered for ``genre``.
        """

        try:
            return self._calculators[genre]
        except (KeyError, TypeError):
            raise UnknownGenreError(genre) from None

    def price(self, performance: Performance, play: Play) -> Price:
        calculator = self.calculator_for(play.genre)
        return Price(
            amount=calculator.amount_for(performance.audience),
            volume_credits=calculator.volume_credits_for(performance.audience),
        )

    def __contains__(self, genre: object) -> bool:
        return genre in self._calculators

    def __iter__(self) -> Iterator[Genre | str]:
        return iter(self._calculators)

    def __len__(self) -> int:
        return len(self._calculators)


def default_pricing() -> PricingRegistry:
    """Return a fresh registry holding the built-in genres."""

    return PricingRegistry(
        {
            Genre.TRAGEDY: TragedyCalculator(),
            Genre.COMEDY: ComedyCalculator(),
        }
    )


DEFAULT_PRICING = default_pricing()


def price(
    performance: Performance, play: Play, *, pricing: PricingRegistry = DEFAULT_PRICING
) -> Price:
    """Price one performance of ``play``."""

    return pricing.price(performance, play)

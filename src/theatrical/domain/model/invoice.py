"""Invoice input records."""

from __future__ import annotations

from dataclasses import dataclass

from .catalog import PlayId  # noqa: TC001


@dataclass(frozen=True, slots=True)
class Performance:
    """One booked performance, i.e. one line of an invoice."""

    play_id: PlayId
    audience: int

    def __post_init__(self) -> None:
        if self.audience < 0:
            raise ValueError("audience cannot be negative")


@dataclass(frozen=True, slots=True)
class Invoice:
    customer: str
    performances: tuple[Performance, ...] = ()

    def __post_init__(self) -> None:
        # accept any iterable from callers while keeping the record immutable
        object.__setattr__(self, "performances", tuple(self.performances))

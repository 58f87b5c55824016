"""Plain-text statement rendering."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .money import usd

if TYPE_CHECKING:
    from theatrical.domain.model import StatementData


def render_plain_text(data: StatementData) -> str:
    lines = [f"Statement for {data.customer}"]
    lines.extend(
        f"  {line.play.name}: {usd(line.amount)} ({line.audience} seats)"
        for line in data.performances
    )
    lines.append(f"Amount owed is {usd(data.total_amount)}")
    lines.append(f"You earned {data.total_volume_credits} credits")
    return "".join(f"{line}\n" for line in lines)

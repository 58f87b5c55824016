from __future__ import annotations

from theatrical.domain.model import Genre, Invoice, Performance, Play

BIGCO_STATEMENT = (
    "Statement for BigCo\n"
    "  Hamlet: $650.00 (55 seats)\n"
    "  As You Like It: $580.00 (35 seats)\n"
    "  Othello: $500.00 (40 seats)\n"
    "Amount owed is $1,730.00\n"
    "You earned 47 credits\n"
)


def make_plays() -> dict[str, Play]:
    return {
        "hamlet": Play(name="Hamlet", genre=Genre.TRAGEDY),
        "as-like": Play(name="As You Like It", genre=Genre.COMEDY),
        "othello": Play(name="Othello", genre=Genre.TRAGEDY),
    }


def make_bigco_invoice() -> Invoice:
    return Invoice(
        customer="BigCo",
        performances=(
            Performance(play_id="hamlet", audience=55),
            Performance(play_id="as-like", audience=35),
            Performance(play_id="othello", audience=40),
        ),
    )

from __future__ import annotations

import pytest

from tests.helpers.fixtures import BIGCO_STATEMENT
from theatrical import html_statement, statement
from theatrical.domain.errors import StatementError, UnknownGenreError, UnknownPlayError
from theatrical.domain.model import Invoice, Performance, Play
from theatrical.domain.pricing import ComedyCalculator, default_pricing


def test_statement_bigco(bigco_invoice: Invoice, plays: dict[str, Play]) -> None:
    assert statement(bigco_invoice, plays) == BIGCO_STATEMENT


def test_html_statement_bigco(bigco_invoice: Invoice, plays: dict[str, Play]) -> None:
    html = html_statement(bigco_invoice, plays)

    assert "<h1>Statement for BigCo</h1>" in html
    assert "<em>$1,730.00</em>" in html


def test_statement_unknown_type() -> None:
    plays = {"xyz": Play(name="XYZ", genre="-1")}
    invoice = Invoice(customer="UT KK", performances=[Performance("xyz", 10)])

    with pytest.raises(UnknownGenreError) as exc:
        statement(invoice, plays)

    assert str(exc.value) == "-1: unknown genre"


@pytest.mark.parametrize("render", [statement, html_statement])
def test_unknown_play_aborts_whole_statement(
    render: object, bigco_invoice: Invoice, plays: dict[str, Play]
) -> None:
    del plays["othello"]

    with pytest.raises(UnknownPlayError, match="othello: unknown play"):
        render(bigco_invoice, plays)  # type: ignore[operator]


def test_statement_errors_share_base(plays: dict[str, Play]) -> None:
    invoice = Invoice(customer="Acme", performances=[Performance("missing", 1)])

    with pytest.raises(StatementError):
        statement(invoice, plays)


def test_statement_accepts_custom_pricing(plays: dict[str, Play]) -> None:
    registry = default_pricing()
    registry.register("farce", ComedyCalculator())
    plays["noises-off"] = Play(name="Noises Off", genre="farce")
    invoice = Invoice(customer="Acme", performances=[Performance("noises-off", 35)])

    assert statement(invoice, plays, pricing=registry) == (
        "Statement for Acme\n"
        "  Noises Off: $580.00 (35 seats)\n"
        "Amount owed is $580.00\n"
        "You earned 12 credits\n"
    )

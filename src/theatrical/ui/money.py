"""Fixed US-dollar formatting for cent amounts."""

from __future__ import annotations

CURRENCY_SYMBOL = "$"
MINOR_UNITS_PER_MAJOR = 100


def usd(cents: int) -> str:
    """Format integer cents as dollars, e.g. ``173000`` -> ``"$1,730.00"``."""

    sign = "-" if cents < 0 else ""
    major, minor = divmod(abs(cents), MINOR_UNITS_PER_MAJOR)
    return f"{sign}{CURRENCY_SYMBOL}{major:,}.{minor:02d}"

"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class Genre(StrEnum):
    """Play category that selects the pricing rules."""

    TRAGEDY = "tragedy"
    COMEDY = "comedy"

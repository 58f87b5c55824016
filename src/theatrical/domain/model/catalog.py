"""Plays and the read-only catalog they are looked up in."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TypeAlias

from .enums import Genre


@dataclass(frozen=True, slots=True)
class Play:
    """Play metadata owned by the catalog.

    ``genre`` stays a plain string when the source data names a genre the domain does not
    know; pricing rejects it later with :class:`~theatrical.domain.errors.UnknownGenreError`.
    """

    name: str
    genre: Genre | str


PlayId: TypeAlias = str
Catalog: TypeAlias = Mapping[PlayId, Play]

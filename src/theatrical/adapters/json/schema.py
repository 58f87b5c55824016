"""Pydantic models describing the plays / invoices JSON documents."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, RootModel, field_validator


class TheatricalBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class PlayPayload(TheatricalBaseModel):
    name: str
    genre: str = Field(alias="type")

    @field_validator("genre", mode="before")
    @classmethod
    def _normalize_genre(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value


class PlaysDocument(RootModel[dict[str, PlayPayload]]):
    """Mapping of play id to play, as in ``plays.json``."""


class PerformancePayload(TheatricalBaseModel):
    play_id: str = Field(alias="playID")
    audience: int = Field(ge=0)


class InvoicePayload(TheatricalBaseModel):
    customer: str
    performances: list[PerformancePayload] = Field(default_factory=list)


class InvoicesDocument(RootModel[list[InvoicePayload] | InvoicePayload]):
    """Either a single invoice or a list of invoices, as in ``invoices.json``."""

    @property
    def invoices(self) -> list[InvoicePayload]:
        if isinstance(self.root, InvoicePayload):
            return [self.root]
        return list(self.root)

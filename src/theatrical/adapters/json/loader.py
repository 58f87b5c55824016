"""Read plays and invoices from JSON files."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import ValidationError

from .schema import InvoicesDocument, PlaysDocument
from .translator import to_catalog, to_invoices

if TYPE_CHECKING:
    from pathlib import Path

    from theatrical.domain.model import Invoice, Play


log = getLogger(__name__)


class PayloadError(ValueError):
    """Raised when a JSON document cannot be read or does not match its schema."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path


def _read(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as exc:
        raise PayloadError(path, exc.strerror or str(exc)) from exc


def load_catalog(path: Path) -> dict[str, Play]:
    try:
        document = PlaysDocument.model_validate_json(_read(path))
    except ValidationError as exc:
        raise PayloadError(path, str(exc)) from exc
    catalog = to_catalog(document)
    log.debug("Loaded %s plays from %s", len(catalog), path)
    return catalog


def load_invoices(path: Path) -> list[Invoice]:
    try:
        document = InvoicesDocument.model_validate_json(_read(path))
    except ValidationError as exc:
        raise PayloadError(path, str(exc)) from exc
    invoices = to_invoices(document)
    log.debug("Loaded %s invoices from %s", len(invoices), path)
    return invoices

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tests.helpers.fixtures import make_bigco_invoice, make_plays
from theatrical.adapters.json import PayloadError, load_catalog, load_invoices

if TYPE_CHECKING:
    from pathlib import Path


def test_load_catalog(plays_path: Path) -> None:
    assert load_catalog(plays_path) == make_plays()


def test_load_invoices(invoices_path: Path) -> None:
    assert load_invoices(invoices_path) == [make_bigco_invoice()]


def test_load_invoices_rejects_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "invoices.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(PayloadError) as exc:
        load_invoices(path)

    assert exc.value.path == path
    assert str(exc.value).startswith(f"{path}: ")


def test_load_catalog_rejects_schema_mismatch(tmp_path: Path) -> None:
    path = tmp_path / "plays.json"
    path.write_text('{"hamlet": {"name": "Hamlet"}}', encoding="utf-8")

    with pytest.raises(PayloadError):
        load_catalog(path)


def test_missing_file_raises_payload_error(tmp_path: Path) -> None:
    with pytest.raises(PayloadError):
        load_catalog(tmp_path / "absent.json")


def test_load_catalog_rejects_invalid_utf8(tmp_path: Path) -> None:
    path = tmp_path / "plays.json"
    path.write_bytes(b'{"hamlet": {"name": "Ham\xfflet", "type": "tragedy"}}')

    with pytest.raises(PayloadError) as exc:
        load_catalog(path)

    assert exc.value.path == path

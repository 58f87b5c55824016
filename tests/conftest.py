from __future__ import annotations

from pathlib import Path

import pytest

from tests.helpers.fixtures import make_bigco_invoice, make_plays
from theatrical.domain.model import Invoice, Play

DATA_DIR = Path(__file__).resolve().parent / "data"


@pytest.fixture
def plays() -> dict[str, Play]:
    return make_plays()


@pytest.fixture
def bigco_invoice() -> Invoice:
    return make_bigco_invoice()


@pytest.fixture(scope="session")
def plays_path() -> Path:
    return DATA_DIR / "plays.json"


@pytest.fixture(scope="session")
def invoices_path() -> Path:
    return DATA_DIR / "invoices.json"

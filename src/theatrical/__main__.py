from __future__ import annotations

from theatrical.ui.cli import run

run()

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from theatrical.app import render_statement_files
from theatrical.config import (
    ConfigurationError,
    OutputFormat,
    configure_logging,
    get_statement_config,
    parse_output_format,
)

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Print invoice statements for theater bookings")
    parser.add_argument("plays", type=Path, help="JSON file mapping play ids to plays")
    parser.add_argument(
        "invoices",
        type=Path,
        help="JSON file holding one invoice or a list of invoices",
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=[fmt.value for fmt in OutputFormat],
        default=None,
        help="Statement format (defaults to THEATRICAL_OUTPUT_FORMAT or text)",
    )
    return parser.parse_args(list(argv))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    try:
        config = get_statement_config()
    except ConfigurationError:
        configure_logging()
        log.exception("Configuration error")
        sys.exit(2)
    configure_logging(level=config.log_level)

    output_format = (
        parse_output_format(parsed_args.output_format)
        if parsed_args.output_format
        else config.output_format
    )

    try:
        statements = render_statement_files(
            parsed_args.plays,
            parsed_args.invoices,
            output_format=output_format,
        )
    except Exception:
        log.exception("Failed to render statements")
        sys.exit(1)

    for rendered in statements:
        sys.stdout.write(rendered)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from bomcopyright.app import BomReconciliationRequest, reconcile_bom
from bomcopyright.config import configure_logging
from bomcopyright.config.storage import DEFAULT_OUTPUT_DIR

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)

_PROGRESS_STEPS = 10


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Fill in copyright notices of a CycloneDX BOM and merge local overrides"
    )
    parser.add_argument("bom", type=Path, help="Generated CycloneDX JSON BOM")
    parser.add_argument(
        "--local",
        type=Path,
        help="CycloneDX JSON file with hand-maintained license and copyright values",
    )
    parser.add_argument(
        "--missing-values",
        type=Path,
        help="Where to write components still lacking a copyright "
        "(defaults to OUTPUT_DIR/missingValues.json)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path(DEFAULT_OUTPUT_DIR),
        help="Directory for the updated BOM and license texts",
    )
    parser.add_argument(
        "--pdf",
        type=Path,
        help="Also write a PDF report of all components "
        "(license text pages are included with --license-texts)",
    )
    parser.add_argument(
        "--no-download",
        action="store_true",
        help="Skip fetching license and readme files from GitHub",
    )
    parser.add_argument(
        "--license-texts",
        action="store_true",
        help="Also write the SPDX license texts used by the BOM",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-file", type=Path, help="Also write log output to this file")
    return parser.parse_args(list(argv))


def _build_request(args: argparse.Namespace) -> BomReconciliationRequest:
    if args.bom.suffix.lower() != ".json":
        raise ValueError(f"Only JSON BOMs are supported: {args.bom}")
    if args.local is not None and args.local.suffix.lower() != ".json":
        raise ValueError(f"Only JSON local files are supported: {args.local}")
    return BomReconciliationRequest(
        bom_path=args.bom,
        local_path=args.local,
        output_dir=args.output_dir,
        missing_values_path=args.missing_values,
        pdf_path=args.pdf,
        download=not args.no_download,
        license_texts=args.license_texts,
    )


class _ProgressLogger:
    """Log resolution progress in roughly ten percent steps."""

    def __init__(self) -> None:
        self._last_step = 0

    def __call__(self, done: int, total: int) -> None:
        if total <= 0:
            return
        step = done * _PROGRESS_STEPS // total
        if step == self._last_step:
            return
        self._last_step = step
        log.info("Copyright resolution progress: %s/%s", done, total)


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(
        level=logging.DEBUG if parsed_args.verbose else logging.INFO,
        log_file=parsed_args.log_file,
    )
    try:
        request = _build_request(parsed_args)
    except ValueError:
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        reconcile_bom(request, on_progress=_ProgressLogger())
    except Exception:
        log.exception("Fatal error during reconciliation")
        sys.exit(1)


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

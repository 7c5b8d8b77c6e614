"""Command-line entry point.

Usage:
    xctransfer -i SHAREDATA -o OUTPUT_DIR [--debug]

Options:
    -i, --input    XChange2 ShareData file
    -o, --output   Directory that receives xctransfer-<N>.kml
    --debug        Echo SQL and log at DEBUG level
"""
from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from loguru import logger

from xctransfer.config import settings
from xctransfer.errors import XCTransferError
from xctransfer.kml.writer import next_output_path
from xctransfer.pipeline import Pipeline
from xctransfer.source import ShareDataSource

_DEFAULT_INPUT_HINT = (
    "C:\\Users\\[username]\\AppData\\Roaming\\XChange2\\Share\\ShareData"
)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="xctransfer",
        description="Export XChange2 geohunts, waypoints and findpoints to KML.",
    )
    ap.add_argument(
        "-i", "--input", default="",
        help=f"Input ShareData file (default location: {_DEFAULT_INPUT_HINT})",
    )
    ap.add_argument("-o", "--output", default="", help="Output directory for KML-file")
    ap.add_argument("--debug", action="store_true", help="Echo SQL, log at DEBUG level")
    return ap


def configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one export. Returns the process exit status."""
    args = build_parser().parse_args(argv)
    debug = args.debug or settings.debug
    configure_logging("DEBUG" if debug else settings.log_level)

    # Missing flags are reported but are not a failed run
    if not args.input:
        logger.error("Please specify input ShareData file with option -i")
        return 0
    if not args.output:
        logger.error("Please specify output directory with option -o")
        return 0

    output_path = next_output_path(args.output, prefix=settings.file_prefix)
    logger.info(f"Input: {args.input}")
    logger.info(f"Output: {output_path}")

    try:
        with ShareDataSource.open(args.input, echo=debug) as source:
            summary = Pipeline(source).run(output_path)
    except XCTransferError as e:
        logger.error(str(e))
        return 1

    logger.info(
        f"{summary.routes} routes, {summary.waypoints} waypoints, "
        f"{summary.findpoints} findpoints"
    )
    logger.info(f"KML file saved in: {summary.output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

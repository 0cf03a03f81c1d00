import argparse
import asyncio
import sys
from pathlib import Path

from rosterscan.batch.aggregator import BatchAggregator
from rosterscan.config.settings import Settings
from rosterscan.export.clipboard import PyperclipClipboard
from rosterscan.export.exceptions import ExportError
from rosterscan.export.spreadsheet import OpenpyxlSpreadsheetWriter
from rosterscan.export.tsv import to_tsv
from rosterscan.extraction.factory import RequesterFactory
from rosterscan.loader.exceptions import ImageLoadError
from rosterscan.loader.image_loader import ImageLoader
from rosterscan.logging.logger import Log
from rosterscan.session.session import ExtractionSession


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="rosterscan",
        description="Extract influencer rosters from photos into a spreadsheet",
    )
    parser.add_argument(
        "images",
        nargs="+",
        type=Path,
        help="Image files to extract (JPEG, PNG, WebP, HEIC)",
    )
    parser.add_argument(
        "-o", "--output-dir",
        type=Path,
        help="Directory for the .xlsx file (default: OUTPUT_DIR setting)",
    )
    parser.add_argument(
        "--copy",
        action="store_true",
        help="Copy the result to the clipboard as tab-separated text",
    )
    parser.add_argument(
        "--tsv",
        action="store_true",
        help="Print the result to stdout as tab-separated text",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def build_session(settings: Settings) -> ExtractionSession:
    """Build a session with the configured requester."""
    requester = RequesterFactory.create(settings)
    aggregator = BatchAggregator(
        requester,
        max_batch_images=settings.max_batch_images,
        max_image_attempts=settings.max_image_attempts,
    )
    return ExtractionSession(aggregator)


def main(argv: list[str] | None = None) -> int:
    """Entry point: load images -> extract batch -> export."""
    args = parse_args(argv)
    settings = Settings()
    # Keep stdout clean for --tsv output.
    Log.configure(
        "DEBUG" if args.verbose else settings.log_level,
        stream=sys.stderr if args.tsv else sys.stdout,
    )

    try:
        images = ImageLoader().load_many(args.images)
    except (ImageLoadError, FileNotFoundError) as exc:
        Log.error(f"Could not load images: {exc}")
        return 2

    session = build_session(settings)
    state = asyncio.run(session.submit(images))
    if state.status == "error":
        Log.error(f"Processing error: {state.error}")
        return 1

    output_dir = args.output_dir if args.output_dir is not None else Path(settings.output_dir)
    try:
        path = session.export(OpenpyxlSpreadsheetWriter(output_dir))
    except ExportError as exc:
        Log.error(f"Export error: {exc}")
        return 1
    Log.info(
        f"Extraction complete: {len(state.dataset.rows)} records found "
        f"from {state.image_count} file(s)"
    )
    if path is not None:
        Log.info(f"Spreadsheet written to {path}")

    if args.copy and not session.copy(PyperclipClipboard()):
        Log.warning("Result was not copied to the clipboard")
    if args.tsv:
        sys.stdout.write(to_tsv(state.dataset.rows, state.dataset.headers) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Command-line interface for WistiaDL."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.table import Table

from . import __version__
from .config import load_config
from .core import (
    AssetCollection,
    AssetExtractor,
    BulkDownloader,
    Exporter,
    ExportFormat,
    WistiaDLError,
)
from .utils.file_utils import FileWriteError, format_dimensions, format_size, write_text_file_safe
from .utils.logging import setup_logging

SORT_KEYS = ["name", "size", "width", "height", "type", "ext", "url"]

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INTERRUPTED = 130

err_console = Console(stderr=True)


def create_parser() -> argparse.ArgumentParser:
    """Create the command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog="wistiadl",
        description="WistiaDL - List, export and download the assets of a Wistia video",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  wistiadl abc123def4                               # List assets of a video ID
  wistiadl https://acme.wistia.com/medias/abc123    # Resolve the ID from a URL
  wistiadl abc123 --search mp4 --sort size --desc   # Filter and sort
  wistiadl abc123 --export csv --output exports     # Write wistia_assets.csv
  wistiadl abc123 --search 1080 --download          # Download the listed assets
        """.strip(),
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "input",
        help="Wistia video ID, media URL or embed URL",
    )

    parser.add_argument(
        "--search",
        help="Only list assets whose name, URL or extension contains this text",
        metavar="TEXT",
    )

    parser.add_argument(
        "--sort",
        choices=SORT_KEYS,
        help="Sort listed assets by this column ('width' sorts by pixel area)",
    )

    parser.add_argument(
        "--desc",
        action="store_true",
        help="Sort in descending order",
    )

    parser.add_argument(
        "--export",
        choices=[f.value for f in ExportFormat],
        help="Export all assets to a file in this format",
    )

    parser.add_argument(
        "--output",
        type=Path,
        default=Path("."),
        help="Directory for the export file (default: current directory)",
        metavar="DIR",
    )

    parser.add_argument(
        "--download",
        action="store_true",
        help="Download every listed asset",
    )

    parser.add_argument(
        "--dest",
        type=Path,
        help="Download directory (default: from configuration)",
        metavar="DIR",
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="Configuration file path",
        metavar="PATH",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )

    parser.add_argument(
        "--no-log-files",
        action="store_true",
        help="Only log to the console",
    )

    return parser


def build_table(collection: AssetCollection) -> Table:
    """Render the visible records as a Rich table."""
    selected = collection.selected_ids
    table = Table(title=f"{len(collection.visible)} of {len(collection)} assets")
    table.add_column("", width=1)
    table.add_column("Name")
    table.add_column("Size", justify="right")
    table.add_column("Dimensions", justify="right")
    table.add_column("URL", overflow="fold")

    for record in collection.visible:
        table.add_row(
            "✓" if record.id in selected else "",
            record.display_name,
            format_size(record.size),
            format_dimensions(record.width, record.height),
            record.url or "N/A",
        )

    return table


def report_error(error: WistiaDLError) -> None:
    """Print a core error and its hint to stderr."""
    err_console.print(f"[bold red]Error:[/bold red] {error}")
    if error.hint:
        err_console.print(f"[yellow]Hint:[/yellow] {error.hint}")


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI application."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except Exception as e:
        err_console.print(f"Failed to load configuration: {e}")
        return EXIT_ERROR

    setup_logging(
        logs_dir=config.logs_dir,
        log_level=args.log_level,
        enable_file_logging=not args.no_log_files,
    )
    logger = logging.getLogger(__name__)
    logger.info(f"WistiaDL v{__version__} starting")

    collection = AssetCollection()
    extractor = AssetExtractor(collection, config)

    try:
        extractor.extract(args.input)

        if args.search:
            collection.search(args.search)
        if args.sort:
            collection.sort(args.sort, "desc" if args.desc else "asc")

        if args.download:
            collection.select_all()

        Console().print(build_table(collection))

        if args.export:
            result = Exporter(config.export_basename).export(collection, args.export)
            path = write_text_file_safe(args.output / result.filename, result.content)
            err_console.print(f"[green]Exported {len(collection)} assets to {path}[/green]")

        if args.download:
            downloader = BulkDownloader(config)
            results = downloader.download_multiple(
                collection.selected_records(),
                args.dest or config.download_dir,
            )
            failed = [result for result in results if not result.success]
            for result in failed:
                err_console.print(f"[red]Failed[/red] {result.asset_id}: {result.error_message}")
            err_console.print(f"Downloaded {len(results) - len(failed)} of {len(results)} assets")

    except WistiaDLError as e:
        logger.debug("Command failed", exc_info=True)
        report_error(e)
        return EXIT_ERROR
    except FileWriteError as e:
        err_console.print(f"[bold red]Error:[/bold red] {e}")
        return EXIT_ERROR
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return EXIT_INTERRUPTED

    return EXIT_OK


def run() -> None:
    """Console-script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()

"""Command-line runner for the studio space search.

Run via: studiospace search -p "L5A 4E6"
Or: python -m studiospace.cli search --max-listings 10 -v
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .collectors import BrowserSessionError, ListingCollector
from .config import Settings, config
from .media import ImageDownloader
from .models.listing import Listing

console = Console()
logger = logging.getLogger(__name__)

EXPORT_FILE = "listings.json"


def positive_int(value: str) -> int:
    """argparse type for counts that must be at least 1."""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def setup_logging(verbose: bool = False) -> None:
    """Configure logging with Rich handler."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )


def print_summary(listings: list[Listing]) -> None:
    """Print a one-row-per-listing table."""
    table = Table(show_header=True, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("Source")
    table.add_column("Address", max_width=35)
    table.add_column("Rent", justify="right")
    table.add_column("Price", justify="right")
    table.add_column("Images", justify="right")
    table.add_column("Description", max_width=45)

    for i, listing in enumerate(listings, start=1):
        table.add_row(
            str(i),
            listing.source,
            listing.address[:35],
            listing.rental_cost or "N/A",
            listing.purchase_cost or "N/A",
            str(len(listing.local_image_paths) or len(listing.image_urls)),
            listing.description[:45],
        )

    console.print(table)


def export_listings(listings: list[Listing], output_dir: Path) -> Path:
    """Write the listings as JSON and return the file path."""
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / EXPORT_FILE
    data = [listing.model_dump(mode="json") for listing in listings]
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
    return path


async def run_search(
    settings: Settings,
    postal_code: str,
    output_dir: Path,
    max_listings: int,
    collector: Optional[ListingCollector] = None,
    downloader: Optional[ImageDownloader] = None,
) -> int:
    """Search, download images and export the results.

    Args:
        settings: Application settings
        postal_code: Postal code to search near
        output_dir: Where listings.json and images/ are written
        max_listings: Listings kept after the search
        collector: Listing collector (built from settings if None)
        downloader: Image downloader (built from settings if None)

    Returns:
        Process exit code (0 success, 1 nothing found or failure)
    """
    collector = collector or ListingCollector(settings=settings)
    downloader = downloader or ImageDownloader(
        timeout=settings.image_download_timeout_seconds,
        user_agent=settings.user_agent,
        min_bytes=settings.min_image_bytes,
    )

    logger.info(f"Searching for photography studio space near {postal_code}...")
    logger.info(f"Output directory: {output_dir.resolve()}")

    try:
        listings = await collector.collect(postal_code)
    except BrowserSessionError as e:
        logger.error(f"Search failed: {e}")
        return 1

    if not listings:
        logger.warning("No listings found. Try broadening your search.")
        return 1

    listings = listings[:max_listings]
    logger.info(f"Processing {len(listings)} listings...")

    async with downloader:
        await downloader.download_all(listings, output_dir)

    export_path = export_listings(listings, output_dir)

    console.print()
    print_summary(listings)
    console.print()
    console.print(f"[bold]Listings:[/bold] {export_path.resolve()}")
    console.print(f"[bold]Images:[/bold] {(output_dir / 'images').resolve()}")
    return 0


def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        prog="studiospace",
        description="StudioSpace - Find photography studio space for rent or sale",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  studiospace search
  studiospace search -p "M5V 2T6" -o out -m 10
  studiospace search -v
        """,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    search = subparsers.add_parser(
        "search", help="Search for photography studio space for rent or sale"
    )
    search.add_argument(
        "-p", "--postal-code",
        default=config.postal_code,
        help="Postal code to search near",
    )
    search.add_argument(
        "-o", "--output",
        type=Path,
        default=config.artifacts_path,
        help="Output directory for the listings and images",
    )
    search.add_argument(
        "-m", "--max-listings",
        type=positive_int,
        default=config.max_listings,
        help="Maximum number of listings to include",
    )
    search.add_argument(
        "--parallel",
        action="store_true",
        help="Search all sources at the same time",
    )
    search.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args(argv)
    setup_logging(verbose=args.verbose)

    settings = config.model_copy(update={
        "artifacts_path": args.output,
        "max_listings": args.max_listings,
        "parallel_sources": args.parallel or config.parallel_sources,
    })

    console.print("[bold]=== Studio Space Finder ===[/bold]")
    try:
        code = asyncio.run(run_search(
            settings,
            postal_code=args.postal_code,
            output_dir=args.output,
            max_listings=args.max_listings,
        ))
        sys.exit(code)
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted[/yellow]")
        sys.exit(130)


if __name__ == "__main__":
    main()

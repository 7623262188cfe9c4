"""
CLI runner for library-archive.

Usage:
    python -m library_archive.run [OPTIONS]

    # List everything in the archive
    python -m library_archive.run --list

    # Look up a single item
    python -m library_archive.run --isbn 978-3-16-148410-0

    # Books by an author, items from a year
    python -m library_archive.run --author "J.R.R. Tolkien"
    python -m library_archive.run --year 1954
"""

import argparse
import logging
import sys
from pathlib import Path

from .archive import CatalogArchive
from .config import ArchiveConfig
from .errors import PersistenceError
from .models import Book, CatalogItem, Magazine

logger = logging.getLogger("library-archive")


def format_item(item: CatalogItem) -> str:
    """One-line description of a catalog item."""
    line = f"{item.isbn} | {item.title} ({item.publication_year})"
    if isinstance(item, Book):
        return f"{line} | book by {item.author}, {item.genre}, {item.num_pages} pages"
    if isinstance(item, Magazine):
        return f"{line} | magazine issue {item.issue_number}, {item.periodicity.value}"
    return line


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="library-archive: query a saved library catalog",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python -m library_archive.run --list
    python -m library_archive.run --archive archive.db --isbn 123-456-789
    python -m library_archive.run --config library_archive.yaml --year 1954
        """,
    )

    parser.add_argument(
        "--config",
        type=Path,
        default=Path("library_archive.yaml"),
        help="Path to config file (default: library_archive.yaml)",
    )
    parser.add_argument(
        "--archive",
        type=Path,
        help="Override archive path from config",
    )
    parser.add_argument("--isbn", type=str, help="Show the first item with this ISBN")
    parser.add_argument("--year", type=int, help="List items published in this year")
    parser.add_argument("--author", type=str, help="List books by this author")
    parser.add_argument("--list", action="store_true", help="List every item")
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    args = parser.parse_args(argv)

    config = ArchiveConfig.from_yaml(args.config)
    if args.archive:
        config.storage.archive_path = args.archive

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.logging.level,
        format=config.logging.format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logger.debug(f"Config loaded from {args.config}: {config.to_dict()}")

    if args.isbn is None and args.year is None and args.author is None and not args.list:
        parser.print_help()
        return 0

    archive = CatalogArchive()
    try:
        archive.load_from_disk(config.storage.archive_path)
    except PersistenceError as e:
        logger.error(str(e))
        return 1

    if args.isbn is not None:
        item = archive.find_by_isbn(args.isbn)
        if item is None:
            print(f"No item found with ISBN {args.isbn}")
        else:
            print(format_item(item))
        return 0

    if args.year is not None:
        results = archive.find_by_publication_year(args.year)
        print(f"Items published in {args.year}: {len(results)}")
    elif args.author is not None:
        results = archive.find_by_author(args.author)
        print(f"Books by {args.author}: {len(results)}")
    else:
        results = archive.items()
        print(f"Items in archive: {len(results)}")

    for item in results:
        print(f"  {format_item(item)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

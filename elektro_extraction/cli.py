"""Command-line front-end for inspecting extraction results.

Usage:
    elektro-extract "YMvK kabel 3x2.5mm² per 100 meter"
    elektro-extract "Gira E2 schakelaar wit" --breadcrumb "Schakelmateriaal > Schakelaars"
    elektro-extract --jsonl products.jsonl

Each product is printed as one JSON object per line, enriched the same way
the spreadsheet sink receives it.
"""
import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

import structlog

from elektro_extraction.config import configure_logging
from elektro_extraction.errors import ExtractionError
from elektro_extraction.services.enrichment.enricher import ProductEnricher, resolve_target_sheet

logger = structlog.get_logger(__name__)


class InputFileError(ExtractionError):
    """Raised when a JSONL product file cannot be read or parsed."""
    pass


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="elektro-extract",
        description="Extract structured attributes from Dutch electrical product text",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        'title',
        nargs='?',
        help='Product title to extract from',
    )
    source.add_argument(
        '--jsonl',
        type=Path,
        metavar='FILE',
        help='File with one product JSON object per line',
    )

    parser.add_argument(
        '--description',
        default='',
        help='Product description (single-product mode)',
    )
    parser.add_argument(
        '--breadcrumb',
        default='',
        help='Category breadcrumb path (single-product mode)',
    )
    parser.add_argument(
        '--sheet',
        action='store_true',
        help='Add the target worksheet name under "target_sheet"',
    )

    return parser


def read_products(path: Path) -> Iterator[Dict[str, Any]]:
    """Yield product dictionaries from a JSONL file, skipping blank lines.

    Raises:
        InputFileError: If the file cannot be read or a line is not a JSON object
    """
    try:
        with path.open(encoding="utf-8") as handle:
            lines = handle.readlines()
    except OSError as e:
        raise InputFileError(f"Cannot read {path}: {e}") from e

    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            product = json.loads(line)
        except json.JSONDecodeError as e:
            raise InputFileError(f"{path}:{line_number}: invalid JSON: {e.msg}") from e
        if not isinstance(product, dict):
            raise InputFileError(f"{path}:{line_number}: expected a JSON object")
        yield product


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    configure_logging()

    if args.jsonl is not None:
        try:
            products = list(read_products(args.jsonl))
        except InputFileError as e:
            logger.error("input_file_error", error=e.message)
            print(f"error: {e.message}", file=sys.stderr)
            return 1
    else:
        products = [{
            "title": args.title,
            "description": args.description,
            "breadcrumb": args.breadcrumb,
        }]

    enricher = ProductEnricher()
    for product in products:
        enriched = enricher.enrich(product)
        if args.sheet:
            enriched["target_sheet"] = resolve_target_sheet(enriched)
        print(json.dumps(enriched, ensure_ascii=False, default=str))

    logger.info("products_extracted", count=len(products))
    return 0


if __name__ == "__main__":
    sys.exit(main())

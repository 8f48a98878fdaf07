"""
Command-line entry point.

Reads SKU strings from a text file (one per line), decodes them and either
prints their canonical form or exports them to CSV.
"""

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from tf2_sku.errors import ParseError
from tf2_sku.exporters.sku_exporter import SkuExporter
from tf2_sku.models.sku import Sku
from tf2_sku.utils.handlers import decode_lenient, decode_strict
from tf2_sku.utils.sku_file_reader import SkuFileReader

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

logger = logging.getLogger(__name__)


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Decode TF2 SKU strings and normalize or export them.")
    parser.add_argument("input", type=Path, help="Text file with one SKU per line")
    parser.add_argument("--strict", action="store_true",
                        help="Reject SKUs with invalid values instead of skipping them")
    parser.add_argument("--output", type=Path, default=None, help="Write a CSV here instead of printing")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
    )

    reader = SkuFileReader(str(args.input))
    skus: List[Sku] = []
    failures = 0

    for line_number, text in reader.read_numbered():
        if not args.strict:
            skus.append(decode_lenient(text))
            continue
        try:
            skus.append(decode_strict(text))
        except ParseError as error:
            failures += 1
            logger.error("Line %d: %r: %s", line_number, text, error)

    logger.info("Decoded %d SKUs from %s (%d failed)", len(skus), args.input, failures)

    if args.output is not None:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        SkuExporter.export_to_csv(skus, str(args.output))
        print(f"Exported {len(skus):,} SKUs to {args.output}")
    else:
        for sku in skus:
            print(sku)

    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())

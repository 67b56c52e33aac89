# generate_stickers.py
import argparse
import logging
import sys

from file_manager import ensure_out_dir, load_entries
from font_manager import FontAsset
from sticker_config import load_settings, parse_workers
from sticker_dispatcher import run
from sticker_errors import StickerError

logger = logging.getLogger("generate_stickers")


def build_parser():
    ap = argparse.ArgumentParser(description="Generate Code128 product stickers from a spreadsheet.")
    ap.add_argument("--input", help="Spreadsheet with barcode/product name rows (default data.xlsx)")
    ap.add_argument("--out", help="Output directory (default out)")
    ap.add_argument("--font", help="Bold TrueType font used for all text")
    ap.add_argument("--workers", help="Number of stickers rendered in parallel (default CPU count)")
    ap.add_argument("--fail-fast", action="store_true", help="Stop starting new stickers after the first failure")
    ap.add_argument("--verbose", action="store_true", help="Debug logging")
    return ap


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        settings = load_settings()
        if args.input:
            settings.input_path = args.input
        if args.out:
            settings.out_dir = args.out
        if args.font:
            settings.font_path = args.font
        if args.workers:
            settings.workers = parse_workers(args.workers)
        logger.debug("%s", settings)

        out_dir = ensure_out_dir(settings.out_dir)
        entries = load_entries(settings.input_path)
        font_asset = FontAsset.load(settings.font_path)
    except (StickerError, OSError) as e:
        logger.error("%s", e)
        return 1

    report = run(
        entries,
        font_asset,
        out_dir,
        workers=settings.workers,
        fail_fast=args.fail_fast,
    )

    if not report.ok:
        for result in report.failed:
            if result.cancelled:
                logger.error("Not generated (cancelled): %s", result.code)
            else:
                logger.error("Failed: %s (%s)", result.code, result.error)
        logger.error("%d of %d stickers failed", len(report.failed), len(report.results))
        return 1

    print("Stickers generated!")
    return 0


if __name__ == "__main__":
    sys.exit(main())

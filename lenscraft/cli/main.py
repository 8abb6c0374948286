#!/usr/bin/env python3
"""
lenscraft command-line entry point.

    lenscraft -i input.jpg -o output.jpg --brightness 1.2 --contrast 10
    lenscraft -i ./input_dir -o ./output_dir --grayscale --blur 2
"""

import argparse
import logging
import sys
from pathlib import Path

from ..config import BATCH_WORKERS, DEFAULT_JPEG_QUALITY, LOG_LEVEL
from ..errors import LenscraftError
from ..models.processing_options import ProcessingOptions
from ..pipeline.batch_processor import process_batch, process_file

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lenscraft",
        description="lenscraft - Image Processing Tool",
        epilog=(
            "Examples:\n"
            "  Single file:    lenscraft -i input.jpg -o output.jpg --brightness 1.2 --contrast 10\n"
            "  Batch process:  lenscraft -i ./input_dir -o ./output_dir --grayscale --blur 2"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--input", "-i", type=Path, required=True, help="Input file or directory")
    parser.add_argument("--output", "-o", type=Path, required=True, help="Output file or directory")
    parser.add_argument("--brightness", type=float, default=1.0, help="Brightness factor (0.0-2.0)")
    parser.add_argument("--contrast", type=float, default=0.0, help="Contrast adjustment (-100 to 100)")
    parser.add_argument("--blur", type=int, default=0, help="Blur radius (0-10)")
    parser.add_argument("--sharpen", type=float, default=0.0, help="Sharpen amount (0.0-1.0)")
    parser.add_argument("--grayscale", action="store_true", help="Convert to grayscale")
    parser.add_argument("--sepia", action="store_true", help="Apply sepia effect")
    parser.add_argument("--edge", action="store_true", help="Apply edge detection")
    parser.add_argument(
        "--quality",
        type=int,
        default=DEFAULT_JPEG_QUALITY,
        help=f"JPEG output quality (0-100, default: {DEFAULT_JPEG_QUALITY})",
    )
    parser.add_argument("--resize", default="", help="Resize image (e.g., 800x600)")
    parser.add_argument(
        "--workers",
        type=int,
        default=BATCH_WORKERS,
        help=f"Files processed in parallel in batch mode (default: {BATCH_WORKERS})",
    )
    parser.add_argument("--recursive", "-r", action="store_true", help="Descend into sub-directories in batch mode")
    parser.add_argument("--log-level", default=LOG_LEVEL, help=f"Logging level (default: {LOG_LEVEL})")
    return parser


def options_from_args(args: argparse.Namespace) -> ProcessingOptions:
    return ProcessingOptions(
        brightness=args.brightness,
        contrast=args.contrast,
        blur=args.blur,
        sharpen=args.sharpen,
        grayscale=args.grayscale,
        sepia=args.sepia,
        edge_detection=args.edge,
        quality=args.quality,
        resize=args.resize,
    )


def main(argv=None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    # --- Centralized Logging Configuration ---
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format='%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s',
        datefmt='%H:%M:%S'
    )

    options = options_from_args(args)

    if not args.input.exists():
        logger.critical(f"Error accessing input: {args.input} does not exist")
        return 1

    if args.input.is_dir():
        print("Starting batch processing...")
        try:
            result = process_batch(
                args.input,
                args.output,
                options,
                workers=args.workers,
                recursive=args.recursive,
            )
        except OSError as err:
            logger.critical(f"Batch processing failed: {err}")
            return 1

        if not result.ok:
            print(f"Batch processing finished with {len(result.failed)} failure(s).")
            return 1
        print("Batch processing completed successfully!")
        return 0

    print("Processing single file...")
    try:
        process_file(args.input, args.output, options)
    except (LenscraftError, OSError) as err:
        logger.critical(f"Processing failed: {err}")
        return 1
    print("File processed successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())

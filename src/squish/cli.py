"""Command-line entry point for squish."""

import argparse
import sys
from collections.abc import Sequence

from loguru import logger

from .common.config import SquishConfig
from .common.errors import SquishError
from .common.schemas import ResizeRequest
from .pipeline.runner import run_pipeline
from .utils.clipboard import Clipboard, SystemClipboard
from .utils.log import configure_logging

DESCRIPTION = "squish lets you resize images via the command line"

MAX_BLUR_STRENGTH = 255

EXIT_FAILURE = 1


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: '{value}'") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be a non-negative integer, got {number}")
    return number


def _blur_strength(value: str) -> int:
    number = _non_negative_int(value)
    if number > MAX_BLUR_STRENGTH:
        raise argparse.ArgumentTypeError(f"must be between 0 and {MAX_BLUR_STRENGTH}, got {number}")
    return number


def build_parser(config: SquishConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="squish", description=DESCRIPTION)
    _ = parser.add_argument(
        "source",
        metavar="INPUT",
        help=f'Local file path, or "{config.clipboard_sentinel}" for system clipboard',
    )
    _ = parser.add_argument(
        "-w",
        "--width",
        metavar="INTEGER",
        type=_non_negative_int,
        default=config.default_resize_width,
        help=f"Width of resized image (default: {config.default_resize_width})",
    )
    _ = parser.add_argument(
        "-o",
        "--output-file",
        metavar="FILE",
        dest="output_file",
        help="Destination of resized output file",
    )
    _ = parser.add_argument(
        "-c",
        "--copy-to-clipboard",
        action="store_true",
        help="Whether to copy resized image to clipboard (only supported for PNG images)",
    )
    _ = parser.add_argument(
        "-b",
        "--blur-strength",
        metavar="INTEGER",
        type=_blur_strength,
        default=0,
        help="Blur strength, 0-255 (default: 0)",
    )
    _ = parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Whether to print updates",
    )
    _ = parser.add_argument(
        "-m",
        "--print-markdown-address",
        action="store_true",
        help="Whether to print address of output file in markdown format",
    )
    return parser


def main(argv: Sequence[str] | None = None, clipboard: Clipboard | None = None) -> int:
    """Parse arguments, run the pipeline and report.

    Returns:
        Process exit code (argparse exits with 2 by itself on bad arguments)
    """
    config = SquishConfig.from_env()
    args = build_parser(config).parse_args(argv)

    configure_logging(verbose=args.verbose, level=config.log_level)

    request = ResizeRequest(
        width=args.width,
        blur_strength=args.blur_strength,
        output_file=args.output_file,
        copy_to_clipboard=args.copy_to_clipboard,
    )

    try:
        outcome = run_pipeline(
            args.source,
            request,
            config=config,
            clipboard=clipboard if clipboard is not None else SystemClipboard(),
        )
    except SquishError as exc:
        logger.opt(exception=exc).debug("Pipeline aborted")
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    if args.print_markdown_address and outcome.written_to is not None:
        print(f"![image]({args.output_file})")

    return 0


def run() -> None:
    sys.exit(main())

"""Main module for the application."""

import argparse
import logging
import re
import sys

from conv.errors import ConvolutionError
from conv.kernels import FILTER_NAMES, kernel_type_from_name
from conv.threaded import Threaded
from loader.service import Loader

DEFAULT_THREADS = 4
DEFAULT_OUTPUT = "output.png"
LOG_FORMAT = "%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s"

logger = logging.getLogger(__name__)


def parse_thread_count(value: str) -> int:
    """Read a thread count the permissive way, never failing.

    Only the leading integer is used ("3x" is 3); anything else counts as 0.
    The result is at least 1.

    Args:
        value (str): Thread count as typed on the command line.

    Returns:
        int: Number of threads to request.
    """
    match = re.match(r"\s*[+-]?\d+", value)
    count = int(match.group()) if match else 0
    return max(1, count)


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser.

    Returns:
        argparse.ArgumentParser: Parser for filename, filter and threads.
    """
    parser = argparse.ArgumentParser(
        prog="convolve",
        description="Apply a 3x3 convolution filter to an image using threads.",
    )
    parser.add_argument("filename", help="source image (jpg, png, bmp, tga, ...)")
    parser.add_argument(
        "filter",
        help=f"one of ({', '.join(FILTER_NAMES)}); anything else copies the image",
    )
    parser.add_argument(
        "threads",
        nargs="?",
        default=str(DEFAULT_THREADS),
        help=f"number of worker threads (default {DEFAULT_THREADS})",
    )
    parser.add_argument(
        "-o", "--output",
        default=DEFAULT_OUTPUT,
        help=f"output file, format taken from the extension (default {DEFAULT_OUTPUT})",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Load an image, convolve it on threads and save the result.

    Args:
        argv (list[str] | None): Arguments, sys.argv when None.

    Returns:
        int: 0 on success, 1 if the image could not be loaded,
            convolved or saved.
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
    )

    kernel_type = kernel_type_from_name(args.filter)
    num_threads = parse_thread_count(args.threads)

    try:
        image = Loader.load_image(args.filename)
        convolved_image = Threaded(kernel_type).run(image, num_threads=num_threads)
        Loader.save_image(args.output, convolved_image)
    except ConvolutionError as err:
        logger.error("%s", err)
        return 1

    logger.info("Saved %s.", args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())

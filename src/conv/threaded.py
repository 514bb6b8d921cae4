"""Module for convolution operations."""

import logging
import time

from concurrent.futures import ThreadPoolExecutor, as_completed
from conv.abstract import Conv2D
from conv.image import RasterImage

logger = logging.getLogger(__name__)


def clamp_thread_count(num_threads: int, height: int) -> int:
    """Clamp a requested thread count to [1, height]."""
    return max(1, min(num_threads, height))


def partition_rows(height: int, num_threads: int) -> list[tuple[int, int]]:
    """Split rows [0, height) into contiguous, near-equal ranges.

    Args:
        height (int): Number of image rows.
        num_threads (int): Requested number of ranges, clamped to [1, height].

    Returns:
        list[tuple[int, int]]: Half-open (start_row, end_row) ranges whose
            sizes differ by at most one row.
    """
    count = clamp_thread_count(num_threads, height)
    return [
        (t * height // count, (t + 1) * height // count)
        for t in range(count)
    ]


class Threaded(Conv2D):
    """Class for 2D convolution operations split by rows across threads."""

    def run(self, image: RasterImage, num_threads: int) -> RasterImage:
        """Run convolution operation on the given image.

        Each thread owns one row range of the output, so the shared
        buffers need no locking. The output is returned once every
        thread has finished.

        Args:
            image (RasterImage): Image to apply convolution on.
            num_threads (int): Number of threads to use.

        Returns:
            RasterImage: Convolved image.
        """
        ranges = partition_rows(image.height, num_threads)
        output = image.blank_like()

        logger.debug(
            "Convolving %dx%dx%d image with %s on %d threads.",
            image.width, image.height, image.channel_count,
            self.kernel_type, len(ranges),
        )

        start_time = time.time()

        with ThreadPoolExecutor(max_workers=len(ranges)) as executor:
            futures = [
                executor.submit(self.process_rows, image, output, start, end)
                for start, end in ranges
            ]

            for future in as_completed(futures):
                future.result()

        end_time = time.time()

        logger.info(
            "Threaded Convolution took %.6f seconds.", end_time - start_time
        )
        return output

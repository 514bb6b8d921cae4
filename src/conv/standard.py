"""Module for convolution operations."""

import logging
import time

from conv.abstract import Conv2D
from conv.image import RasterImage

logger = logging.getLogger(__name__)


class Standard(Conv2D):
    """Class for single-threaded 2D convolution operations."""

    def run(self, image: RasterImage) -> RasterImage:
        """Run convolution operation on the given image.

        Args:
            image (RasterImage): Image to apply convolution on.

        Returns:
            RasterImage: Convolved image.
        """
        output = image.blank_like()

        start_time = time.time()
        self.process_rows(image, output, 0, image.height)
        end_time = time.time()

        logger.info(
            "Standard Convolution took %.6f seconds.", end_time - start_time
        )
        return output

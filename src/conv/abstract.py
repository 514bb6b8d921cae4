"""Abstract base classes for convolution operations."""

import numpy as np
from abc import ABC, abstractmethod

from conv.image import RasterImage
from conv.kernels import KernelType, get_kernel

# Decimal places kept before narrowing, absorbs float error in sums like 9 * (1/9).
SUM_PRECISION = 6


def narrow_to_byte(value: float) -> int:
    """Narrow a convolution sum to an unsigned 8-bit sample.

    The sum is truncated toward zero and wrapped modulo 256, not clamped,
    so 300 becomes 44 and -3 becomes 253.

    Args:
        value (float): Real-valued kernel sum.

    Returns:
        int: Sample value in [0, 255].
    """
    return int(round(value, SUM_PRECISION)) % 256


def clamped_neighbors(index: int, size: int) -> list[int]:
    """Return [index - 1, index, index + 1] clamped to [0, size)."""
    return [max(index - 1, 0), index, min(index + 1, size - 1)]


class Conv2D(ABC):
    """Abstract base class for 2D convolution operations."""

    kernel: np.ndarray

    def __init__(self, kernel_type: KernelType) -> None:
        """Initialize Conv2D class.

        Args:
            kernel_type (KernelType): Filter whose kernel will be used.
        """
        self.kernel_type = kernel_type
        self.kernel = get_kernel(kernel_type)

    def sample(self, image: RasterImage, x: int, y: int, channel: int) -> int:
        """Compute one output sample from the 3x3 neighborhood of (x, y).

        Neighbors outside the image are clamped to the nearest edge pixel.

        Args:
            image (RasterImage): Source image, only read.
            x (int): Column of the pixel.
            y (int): Row of the pixel.
            channel (int): Channel being computed.

        Returns:
            int: The new value of the sample.
        """
        rows = clamped_neighbors(y, image.height)
        cols = clamped_neighbors(x, image.width)
        return self.apply_kernel(image.pixels[rows][:, cols, channel])

    def apply_kernel(self, window: np.ndarray) -> int:
        """Weight a 3x3 single-channel window by the kernel.

        Args:
            window (np.ndarray): Source samples, indexed [row][column].

        Returns:
            int: The kernel sum narrowed to a byte.
        """
        return narrow_to_byte(float(np.sum(window * self.kernel)))

    def process_rows(
        self,
        source: RasterImage,
        destination: RasterImage,
        start_row: int,
        end_row: int,
    ) -> None:
        """Convolve rows [start_row, end_row) of source into destination.

        Only the samples of those rows are written in destination.
        """
        pixels = source.pixels
        output = destination.pixels
        for y in range(start_row, end_row):
            band = pixels[clamped_neighbors(y, source.height)]
            for x in range(source.width):
                window = band[:, clamped_neighbors(x, source.width)]
                for channel in range(source.channel_count):
                    output[y, x, channel] = self.apply_kernel(window[:, :, channel])

    @abstractmethod
    def run(self, image: RasterImage) -> RasterImage:
        """Run convolution operation on the given image.

        Args:
            image (RasterImage): Image to apply convolution on.

        Returns:
            RasterImage: Convolved image.
        """
        pass

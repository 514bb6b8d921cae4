"""Module for the raster image model."""

from dataclasses import dataclass

import numpy as np

from conv.errors import AllocationError


@dataclass(frozen=True, eq=False)
class RasterImage:
    """Flat, row-major 8-bit raster with interleaved channels."""

    width: int
    height: int
    channel_count: int
    buffer: np.ndarray

    def __post_init__(self) -> None:
        """Check the dimensions against the buffer.

        Raises:
            ValueError: If the size, channel count or buffer is invalid.
        """
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Invalid image size {self.width}x{self.height}.")
        if not 1 <= self.channel_count <= 4:
            raise ValueError(f"Invalid channel count {self.channel_count}.")
        if self.buffer.ndim != 1 or self.buffer.dtype != np.uint8:
            raise ValueError("Pixel buffer must be a flat uint8 array.")
        expected = self.width * self.height * self.channel_count
        if self.buffer.size != expected:
            raise ValueError(
                f"Pixel buffer holds {self.buffer.size} samples, expected {expected}."
            )

    @classmethod
    def from_array(cls, array: np.ndarray) -> "RasterImage":
        """Build an image from a (height, width) or (height, width, channels) array.

        Args:
            array (np.ndarray): Pixel data, copied into a new flat buffer.

        Returns:
            RasterImage: The image.
        """
        array = np.asarray(array, dtype=np.uint8)
        if array.ndim == 2:
            array = array[:, :, np.newaxis]
        height, width, channel_count = array.shape
        return cls(width, height, channel_count, array.reshape(-1).copy())

    def blank_like(self) -> "RasterImage":
        """Allocate a zeroed image with the same dimensions and channel count.

        Raises:
            AllocationError: If the buffer cannot be allocated.
        """
        try:
            buffer = np.zeros_like(self.buffer)
        except MemoryError as err:
            raise AllocationError(
                f"Cannot allocate {self.buffer.size} bytes for destination image."
            ) from err
        return RasterImage(self.width, self.height, self.channel_count, buffer)

    def index(self, x: int, y: int, channel: int) -> int:
        """Offset of sample (x, y, channel) in the flat buffer."""
        return (y * self.width + x) * self.channel_count + channel

    @property
    def pixels(self) -> np.ndarray:
        """(height, width, channel_count) view over the buffer."""
        return self.buffer.reshape(self.height, self.width, self.channel_count)

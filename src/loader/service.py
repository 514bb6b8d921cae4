"""Module for loading and saving images."""

import logging

import numpy as np
from PIL import Image

from conv.errors import ImageLoadError, ImageSaveError
from conv.image import RasterImage

logger = logging.getLogger(__name__)


class Loader:
    """Class for loading and saving images."""

    channel_counts = {"L": 1, "LA": 2, "RGB": 3, "RGBA": 4}
    converted_modes = {
        "1": "L",
        "CMYK": "RGB",
        "YCbCr": "RGB",
        "LAB": "RGB",
        "HSV": "RGB",
    }

    @classmethod
    def load_image(cls, image_path: str) -> RasterImage:
        """Load an image from the given path.

        Args:
            image_path (str): Path to the image file.

        Raises:
            ImageLoadError: If the file is missing, unreadable or unsupported.
        """
        try:
            with Image.open(image_path) as image:
                image = cls.convert_to_supported_mode(image)
                pixels = np.array(image)
        except (OSError, ValueError, MemoryError, Image.DecompressionBombError) as err:
            raise ImageLoadError(f"Error loading file {image_path}: {err}") from err

        logger.debug("Loaded %s with shape %s.", image_path, pixels.shape)
        return RasterImage.from_array(pixels)

    @classmethod
    def convert_to_supported_mode(cls, image: Image.Image) -> Image.Image:
        """Convert the image to a mode with 1 to 4 8-bit channels if necessary.

        Args:
            image (Image.Image): The decoded image.
        """
        if image.mode in cls.channel_counts:
            return image
        if image.mode in ("P", "PA"):
            has_alpha = image.mode == "PA" or "transparency" in image.info
            return image.convert("RGBA" if has_alpha else "RGB")
        if image.mode.startswith("I") or image.mode == "F":
            return cls.scale_to_8_bit(image)
        if image.mode in cls.converted_modes:
            return image.convert(cls.converted_modes[image.mode])
        raise ValueError(f"unsupported image mode {image.mode}")

    @classmethod
    def scale_to_8_bit(cls, image: Image.Image) -> Image.Image:
        """Scale a 16-bit or float single-channel image down to mode L."""
        pixels = np.array(image, dtype=np.float64)
        if image.mode.startswith("I;16"):
            pixels = pixels / 257.0
        return Image.fromarray(np.clip(pixels, 0, 255).astype(np.uint8))

    @classmethod
    def save_image(cls, image_path: str, image: RasterImage) -> None:
        """Save an image to the given path, format picked from the extension.

        Args:
            image_path (str): Destination path.
            image (RasterImage): The image to encode.

        Raises:
            ImageSaveError: If the image cannot be encoded or written.
        """
        pixels = image.pixels
        if image.channel_count == 1:
            pixels = pixels[:, :, 0]
        try:
            Image.fromarray(pixels).save(image_path)
        except (OSError, ValueError, KeyError) as err:
            raise ImageSaveError(f"Error saving file {image_path}: {err}") from err

        logger.debug("Saved %s.", image_path)

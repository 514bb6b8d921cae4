import numpy as np
import pytest

from conv.abstract import narrow_to_byte
from conv.image import RasterImage
from conv.kernels import KernelType, get_kernel
from conv.standard import Standard


def _scenario_image() -> RasterImage:
    return RasterImage.from_array(
        np.array([[10, 20, 30], [40, 50, 60], [70, 80, 90]], dtype=np.uint8)
    )


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0.0, 0),
        (23.666, 23),
        (255.9, 255),
        (256.0, 0),
        (300.0, 44),
        (-3.0, 253),
        (-0.5, 0),
        (49.99999999999999, 50),
    ],
)
def test_narrow_to_byte_truncates_and_wraps(value: float, expected: int) -> None:
    assert narrow_to_byte(value) == expected


def test_box_blur_scenario() -> None:
    result = Standard(KernelType.BLUR).run(_scenario_image())

    assert result.pixels[1, 1, 0] == 50
    assert result.pixels[0, 0, 0] == 23
    assert result.pixels[2, 2, 0] == 76


def test_sample_clamps_neighbors_at_the_corner() -> None:
    conv = Standard(KernelType.BLUR)
    image = _scenario_image()

    # clamped neighborhood of (0, 0) is {10,10,20,10,10,20,40,40,50}
    assert conv.sample(image, 0, 0, 0) == 23
    assert conv.sample(image, 1, 1, 0) == 50


@pytest.mark.parametrize("kernel_type", list(KernelType))
def test_single_pixel_uses_only_itself(kernel_type: KernelType) -> None:
    image = RasterImage.from_array(np.array([[[100, 7, 200, 255]]], dtype=np.uint8))

    result = Standard(kernel_type).run(image)

    weight = get_kernel(kernel_type).sum()
    expected = [narrow_to_byte(v * weight) for v in (100, 7, 200, 255)]
    assert result.buffer.tolist() == expected


def test_sharpen_overflow_wraps() -> None:
    array = np.zeros((3, 3), dtype=np.uint8)
    array[1, 1] = 100
    conv = Standard(KernelType.SHARPEN)

    assert conv.sample(RasterImage.from_array(array), 1, 1, 0) == 500 % 256


def test_edge_underflow_wraps() -> None:
    array = np.zeros((3, 3), dtype=np.uint8)
    array[1, 1] = 100
    conv = Standard(KernelType.EDGE)

    assert conv.sample(RasterImage.from_array(array), 1, 0, 0) == 156


def test_channels_are_convolved_independently() -> None:
    array = np.zeros((2, 2, 3), dtype=np.uint8)
    array[:, :, 0] = 90
    array[:, :, 2] = 18
    image = RasterImage.from_array(array)

    result = Standard(KernelType.GAUSS_BLUR).run(image)

    assert (result.pixels[:, :, 0] == 90).all()
    assert (result.pixels[:, :, 1] == 0).all()
    assert (result.pixels[:, :, 2] == 18).all()


def test_process_rows_only_writes_its_range() -> None:
    source = RasterImage.from_array(np.full((3, 2, 2), 7, dtype=np.uint8))
    destination = source.blank_like()

    Standard(KernelType.IDENTITY).process_rows(source, destination, 1, 2)

    assert (destination.pixels[0] == 0).all()
    assert (destination.pixels[1] == 7).all()
    assert (destination.pixels[2] == 0).all()


def test_run_does_not_mutate_source() -> None:
    image = _scenario_image()
    before = image.buffer.copy()

    Standard(KernelType.EMBOSS).run(image)

    np.testing.assert_array_equal(image.buffer, before)


@pytest.mark.parametrize("kernel_type", list(KernelType))
def test_process_rows_matches_sample(kernel_type: KernelType) -> None:
    rng = np.random.default_rng(3)
    source = RasterImage.from_array(rng.integers(0, 256, size=(4, 5, 3), dtype=np.uint8))
    destination = source.blank_like()
    conv = Standard(kernel_type)

    conv.process_rows(source, destination, 0, source.height)

    for y in range(source.height):
        for x in range(source.width):
            for channel in range(source.channel_count):
                assert destination.pixels[y, x, channel] == conv.sample(source, x, y, channel)

"""Module for the fixed 3x3 kernel table."""

import logging
from enum import Enum

import numpy as np

logger = logging.getLogger(__name__)


class KernelType(Enum):
    """Filters available for convolution."""

    EDGE = "edge"
    SHARPEN = "sharpen"
    BLUR = "blur"
    GAUSS_BLUR = "gauss"
    EMBOSS = "emboss"
    IDENTITY = "identity"


def _frozen(rows: list[list]) -> np.ndarray:
    """Build a read-only float kernel.

    Args:
        rows (list[list]): The 3x3 coefficients.

    Returns:
        np.ndarray: Kernel that cannot be written to.
    """
    matrix = np.array(rows, dtype=np.float64)
    matrix.setflags(write=False)
    return matrix


KERNELS = {
    KernelType.EDGE: _frozen([
        [0, -1, 0],
        [-1, 4, -1],
        [0, -1, 0],
    ]),
    KernelType.SHARPEN: _frozen([
        [0, -1, 0],
        [-1, 5, -1],
        [0, -1, 0],
    ]),
    KernelType.BLUR: _frozen([
        [1/9, 1/9, 1/9],
        [1/9, 1/9, 1/9],
        [1/9, 1/9, 1/9],
    ]),
    KernelType.GAUSS_BLUR: _frozen([
        [1/16, 1/8, 1/16],
        [1/8, 1/4, 1/8],
        [1/16, 1/8, 1/16],
    ]),
    KernelType.EMBOSS: _frozen([
        [-2, -1, 0],
        [-1, 1, 1],
        [0, 1, 2],
    ]),
    KernelType.IDENTITY: _frozen([
        [0, 0, 0],
        [0, 1, 0],
        [0, 0, 0],
    ]),
}

FILTER_NAMES = tuple(kernel_type.value for kernel_type in KernelType)


def get_kernel(selector) -> np.ndarray:
    """Return the read-only 3x3 matrix for a filter.

    Args:
        selector (KernelType): Filter to look up. Anything that is not a
            known KernelType falls back to the identity kernel.

    Returns:
        np.ndarray: The kernel coefficients.
    """
    if isinstance(selector, KernelType):
        return KERNELS[selector]
    return KERNELS[KernelType.IDENTITY]


def kernel_type_from_name(name: str) -> KernelType:
    """Map a filter name such as "gauss" to its KernelType.

    Unrecognized names resolve to KernelType.IDENTITY.
    """
    normalized = name.strip().lower()
    try:
        return KernelType(normalized)
    except ValueError:
        logger.debug("Unknown filter %r, using identity.", name)
        return KernelType.IDENTITY

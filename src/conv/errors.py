"""Exceptions raised by the convolution pipeline."""


class ConvolutionError(Exception):
    """Base class for errors that abort a convolution pass."""


class ImageLoadError(ConvolutionError):
    """The source image could not be read or decoded."""


class AllocationError(ConvolutionError):
    """The destination buffer could not be allocated."""


class ImageSaveError(ConvolutionError):
    """The convolved image could not be encoded or written."""

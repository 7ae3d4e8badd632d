"""Per-channel blur and deblur pipeline."""

import cv2
import numpy as np

from models.filter_mode import (
    ConvolutionBlur,
    Direction,
    FilterMode,
    SpectralBlur,
    WienerDeconvolution,
)
from engines.channel_processor import check_image, split_channels, merge_channels
from engines.kernel_builder import build_oriented_kernel, build_frequency_kernel
from engines.spectrum import to_complex_plane, forward, inverse, extract_real_plane
from engines.combiner import multiply, deconvolve
from utils.exceptions import InvalidParameter
from utils.logging import get_logger

logger = get_logger(__name__)

_MODES = (ConvolutionBlur, SpectralBlur, WienerDeconvolution)


def validate(image: np.ndarray, mode: FilterMode) -> None:
    """
    Check image and kernel extent once, before any transform work.

    size >= 1 is already enforced when the mode dataclass is built.
    """
    if not isinstance(mode, _MODES):
        raise InvalidParameter(f"Unsupported filter mode: {mode!r}")
    check_image(image)
    ny, nx = image.shape[:2]
    extent = nx if mode.direction is Direction.HORIZONTAL else ny
    if mode.size > extent:
        raise InvalidParameter(
            f"Filter size {mode.size} exceeds image extent {extent} "
            f"along {mode.direction.value} axis"
        )


def _convolve_plane(plane: np.ndarray, mode: ConvolutionBlur) -> np.ndarray:
    kernel = build_oriented_kernel(mode.direction, mode.size)
    return cv2.filter2D(plane, cv2.CV_64F, kernel, borderType=cv2.BORDER_REPLICATE)


def _spectral_plane(plane: np.ndarray, mode: FilterMode) -> np.ndarray:
    ny, nx = plane.shape
    kernel_spectrum = forward(build_frequency_kernel(mode.direction, mode.size, nx, ny))
    image_spectrum = forward(to_complex_plane(plane))

    if isinstance(mode, SpectralBlur):
        result = multiply(image_spectrum, kernel_spectrum)
    else:
        result = deconvolve(image_spectrum, kernel_spectrum, mode.k)

    return extract_real_plane(inverse(result, scale=True))


def filter_plane(plane: np.ndarray, mode: FilterMode) -> np.ndarray:
    """Filter a single float plane; no validation beyond the kernel builders'."""
    if isinstance(mode, ConvolutionBlur):
        return _convolve_plane(plane, mode)
    return _spectral_plane(plane, mode)


def apply_filter(image: np.ndarray, mode: FilterMode) -> np.ndarray:
    """
    Apply `mode` to every channel of `image`.

    Each channel is widened to float64, filtered on its own and written
    back in the input dtype (integer types rounded and clipped). The input
    array is left untouched; output has the same shape and dtype.

    Spectral modes use circular convolution with an origin-anchored box, so
    a pixel is averaged with the size-1 pixels before it and the blur wraps
    around the image border. The convolution mode uses a centred box with
    replicated borders instead.
    """
    validate(image, mode)
    ny, nx = image.shape[:2]
    logger.debug("%s on %dx%d %s image", mode, nx, ny, image.dtype)

    planes = [filter_plane(plane, mode) for plane in split_channels(image)]
    return merge_channels(planes, image)

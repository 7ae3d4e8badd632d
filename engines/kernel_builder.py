"""Directional box kernels, spatial and frequency-ready."""

import numpy as np

from utils.exceptions import InvalidParameter
from models.filter_mode import Direction


def _check_size(size: int) -> None:
    if size < 1:
        raise InvalidParameter(f"Kernel size must be >= 1, got {size}")


def build_spatial_kernel(size: int) -> np.ndarray:
    """Box kernel of `size` taps, each 1/size."""
    _check_size(size)
    return np.full(size, 1.0 / size, dtype=np.float64)


def build_oriented_kernel(direction: Direction, size: int) -> np.ndarray:
    """Spatial kernel shaped (1, size) or (size, 1) for 2D convolution."""
    kernel = build_spatial_kernel(size)
    if direction is Direction.HORIZONTAL:
        return kernel.reshape(1, size)
    return kernel.reshape(size, 1)


def build_frequency_kernel(direction: Direction, size: int, nx: int, ny: int) -> np.ndarray:
    """
    Image-sized complex kernel ready for the forward FFT.

    The box is anchored at the image origin, not centred: HORIZONTAL fills
    row-major indices 0..size-1, VERTICAL fills column 0 of rows 0..size-1.
    Circular convolution with this kernel averages each pixel with the
    size-1 pixels before it along the axis.
    """
    _check_size(size)
    extent = nx if direction is Direction.HORIZONTAL else ny
    if size > extent:
        raise InvalidParameter(
            f"Kernel size {size} exceeds image extent {extent} along {direction.value} axis"
        )

    kernel = np.zeros((ny, nx), dtype=np.complex128)
    if direction is Direction.HORIZONTAL:
        kernel[0, :size] = 1.0 / size
    else:
        kernel[:size, 0] = 1.0 / size
    return kernel

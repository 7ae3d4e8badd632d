"""Complex 2D FFT over image planes."""

import numpy as np
from scipy.fft import fft2, ifft2

from utils.exceptions import InvalidParameter


def to_complex_plane(samples: np.ndarray) -> np.ndarray:
    """Real plane -> complex plane with zero imaginary part."""
    plane = np.asarray(samples)
    if plane.ndim != 2:
        raise InvalidParameter(f"Expected a 2D plane, got shape {plane.shape}")
    return plane.astype(np.complex128)


def forward(spectrum: np.ndarray) -> np.ndarray:
    """Unnormalized forward 2D FFT over (rows, cols)."""
    return fft2(spectrum, axes=(0, 1), norm='backward')


def inverse(spectrum: np.ndarray, scale: bool = True) -> np.ndarray:
    """Inverse 2D FFT; scale=True divides by nx*ny so forward/inverse round-trips."""
    return ifft2(spectrum, axes=(0, 1), norm='backward' if scale else 'forward')


def extract_real_plane(spectrum: np.ndarray) -> np.ndarray:
    """Real part only; imaginary residue of a real round trip is dropped."""
    return np.ascontiguousarray(spectrum.real)


def as_interleaved(spectrum: np.ndarray) -> np.ndarray:
    """Flat (re, im, re, im, ...) view of length 2*nx*ny."""
    return np.ascontiguousarray(spectrum).view(spectrum.real.dtype).reshape(-1)

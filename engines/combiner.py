"""Pointwise complex arithmetic on spectra."""

import numpy as np

from utils.exceptions import InvalidParameter, ShapeMismatch
from utils.logging import get_logger

logger = get_logger(__name__)


def _check_shapes(a: np.ndarray, b: np.ndarray) -> None:
    if a.shape != b.shape:
        raise ShapeMismatch(f"Spectra differ in shape: {a.shape} vs {b.shape}")


def multiply(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Pointwise product; spatially a circular convolution."""
    _check_shapes(a, b)
    return a * b


def wiener_factor(b: np.ndarray, k: float) -> np.ndarray:
    """
    Wiener gain conj(b) / (|b|^2 + k).

    Written as re_b*|b|^2 / ((|b|^2 + k) * |b|^2) the gain is 0/0 at a
    spectral null; the |b|^2 terms cancel, so the simplified form is used.
    The FFT leaves a kernel's spectral nulls at rounding level (~1e-33)
    rather than exactly zero, so any bin whose power is within machine
    epsilon of the peak power counts as a null. With k == 0 (or k below
    that tolerance) nulls get a zero gain: the frequency is dropped instead
    of being amplified to ~1e16 or turned into NaN.
    """
    if not k >= 0:
        raise InvalidParameter(f"Regularization k must be >= 0, got {k}")

    power = b.real ** 2 + b.imag ** 2
    tol = np.finfo(power.dtype).eps * power.max(initial=0.0)
    denominator = power + k
    nonzero = denominator > tol

    factor = np.zeros_like(b)
    np.divide(np.conj(b), denominator, out=factor, where=nonzero)

    nulls = int(nonzero.size - np.count_nonzero(nonzero))
    if nulls:
        logger.debug("Zero gain at %d spectral null(s) (k=%g)", nulls, k)
    return factor


def deconvolve(a: np.ndarray, b: np.ndarray, k: float) -> np.ndarray:
    """Regularized division a / b via the Wiener factor of b."""
    _check_shapes(a, b)
    return a * wiener_factor(b, k)

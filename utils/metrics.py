"""Metrics: PSNR, SSIM, runtime."""

import time
import numpy as np
from skimage.metrics import peak_signal_noise_ratio, structural_similarity
from typing import Dict, Optional


def _data_range(image: np.ndarray) -> float:
    if np.issubdtype(image.dtype, np.integer):
        info = np.iinfo(image.dtype)
        return float(info.max - info.min)
    return 1.0


def compute_psnr_ssim(
    reference: np.ndarray,
    restored: np.ndarray,
    data_range: Optional[float] = None
) -> Dict[str, float]:
    """
    PSNR and SSIM of a restored image against its reference.

    Integer images use the full dtype range; float images are assumed to be
    in [0, 1] unless `data_range` says otherwise. Images smaller than the
    default 7x7 SSIM window report SSIM as NaN.
    """
    if reference.shape != restored.shape:
        raise ValueError(f"Shape mismatch: {reference.shape} vs {restored.shape}")
    if data_range is None:
        data_range = _data_range(reference)

    ref = reference.astype(np.float64)
    out = restored.astype(np.float64)
    psnr = peak_signal_noise_ratio(ref, out, data_range=data_range)

    if min(ref.shape[:2]) >= 7:
        channel_axis = 2 if ref.ndim == 3 else None
        ssim = structural_similarity(ref, out, channel_axis=channel_axis, data_range=data_range)
    else:
        ssim = float('nan')

    return {'psnr': float(psnr), 'ssim': float(ssim)}


class Timer:
    """Accumulates wall time per label."""

    def __init__(self):
        self.times_ms: Dict[str, float] = {}

    def measure(self, label: str, func, *args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        self.times_ms[label] = self.times_ms.get(label, 0.0) + (time.perf_counter() - start) * 1000.0
        return result

    @property
    def total_ms(self) -> float:
        return sum(self.times_ms.values())

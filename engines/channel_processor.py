"""Channel handling: widen to float planes, merge back to source precision."""

import numpy as np
from typing import List

from utils.exceptions import InvalidParameter


def check_image(image: np.ndarray) -> None:
    """Image must be (ny, nx) or (ny, nx, C) with at least one sample."""
    if image.ndim not in (2, 3):
        raise InvalidParameter(f"Expected (ny, nx) or (ny, nx, C) image, got shape {image.shape}")
    if image.size == 0:
        raise InvalidParameter(f"Image is empty: shape {image.shape}")
    if not (np.issubdtype(image.dtype, np.integer) or np.issubdtype(image.dtype, np.floating)):
        raise InvalidParameter(f"Unsupported sample type: {image.dtype}")


def split_channels(image: np.ndarray) -> List[np.ndarray]:
    """Split into float64 planes, in channel order."""
    if image.ndim == 2:
        return [image.astype(np.float64)]
    return [image[:, :, c].astype(np.float64) for c in range(image.shape[2])]


def to_source_precision(plane: np.ndarray, dtype: np.dtype) -> np.ndarray:
    """Integer types are rounded and clipped to their range; floats are cast as-is."""
    dtype = np.dtype(dtype)
    if np.issubdtype(dtype, np.integer):
        info = np.iinfo(dtype)
        return np.clip(np.rint(plane), info.min, info.max).astype(dtype)
    return plane.astype(dtype)


def merge_channels(planes: List[np.ndarray], template: np.ndarray) -> np.ndarray:
    """Reassemble planes into an array shaped and typed like `template`."""
    if template.ndim == 2:
        return to_source_precision(planes[0], template.dtype)
    result = np.empty(template.shape, dtype=template.dtype)
    for c, plane in enumerate(planes):
        result[:, :, c] = to_source_precision(plane, template.dtype)
    return result

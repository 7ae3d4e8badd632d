"""Shared utilities."""

from .constants import DEFAULT_KERNEL_SIZE, WIENER_K_SWEEP, METHOD_LABELS
from .exceptions import FilterError, InvalidParameter, ShapeMismatch
from .logging import get_logger, set_verbose
from .metrics import compute_psnr_ssim, Timer
from .test_images import (
    generate_impulse,
    generate_constant,
    generate_checkerboard,
    generate_gradient,
    generate_text_edges,
    generate_demo_image,
)
from .image_io import load_image, save_image

__all__ = [
    'DEFAULT_KERNEL_SIZE',
    'WIENER_K_SWEEP',
    'METHOD_LABELS',
    'FilterError',
    'InvalidParameter',
    'ShapeMismatch',
    'get_logger',
    'set_verbose',
    'compute_psnr_ssim',
    'Timer',
    'generate_impulse',
    'generate_constant',
    'generate_checkerboard',
    'generate_gradient',
    'generate_text_edges',
    'generate_demo_image',
    'load_image',
    'save_image',
]

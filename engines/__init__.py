"""DSP engines - pure computation, no I/O."""

from .kernel_builder import build_spatial_kernel, build_oriented_kernel, build_frequency_kernel
from .spectrum import to_complex_plane, forward, inverse, extract_real_plane, as_interleaved
from .combiner import multiply, deconvolve, wiener_factor
from .channel_processor import split_channels, merge_channels
from .pipeline import apply_filter, filter_plane
from .sweep import WienerSweep, run_sweep, geometric_sweep

__all__ = [
    'build_spatial_kernel',
    'build_oriented_kernel',
    'build_frequency_kernel',
    'to_complex_plane',
    'forward',
    'inverse',
    'extract_real_plane',
    'as_interleaved',
    'multiply',
    'deconvolve',
    'wiener_factor',
    'split_channels',
    'merge_channels',
    'apply_filter',
    'filter_plane',
    'WienerSweep',
    'run_sweep',
    'geometric_sweep',
]

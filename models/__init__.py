"""Data models for filter parameters and results."""

from .filter_mode import (
    Direction,
    ConvolutionBlur,
    SpectralBlur,
    WienerDeconvolution,
    FilterMode,
)
from .filter_config import FilterConfig, Method
from .sweep_result import SweepEntry

__all__ = [
    'Direction',
    'ConvolutionBlur',
    'SpectralBlur',
    'WienerDeconvolution',
    'FilterMode',
    'FilterConfig',
    'Method',
    'SweepEntry',
]

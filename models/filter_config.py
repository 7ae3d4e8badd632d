"""Filter parameters as entered by the user."""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from utils.exceptions import InvalidParameter
from models.filter_mode import (
    ConvolutionBlur,
    Direction,
    FilterMode,
    SpectralBlur,
    WienerDeconvolution,
)
from utils.constants import DEFAULT_KERNEL_SIZE, METHOD_LABELS, WIENER_K_SWEEP


class Method(Enum):
    CONVOLUTION = 'convolution'
    SPECTRAL = 'spectral'
    WIENER = 'wiener'

    @property
    def label(self) -> str:
        return METHOD_LABELS[self.value]

    @classmethod
    def parse(cls, name: str) -> 'Method':
        """Accept the short name or the dialog label ("Frequency multiplication")."""
        key = name.strip().lower()
        for method in cls:
            if key in (method.value, method.label.lower()):
                return method
        raise InvalidParameter(f"Unknown filter method: {name!r}")


@dataclass
class FilterConfig:
    """Direction, method and kernel size; k values only matter for Wiener."""

    direction: Direction = Direction.HORIZONTAL
    method: Method = Method.CONVOLUTION
    size: int = DEFAULT_KERNEL_SIZE
    k_values: Tuple[float, ...] = WIENER_K_SWEEP

    def __post_init__(self):
        if isinstance(self.direction, str):
            self.direction = Direction.parse(self.direction)
        if isinstance(self.method, str):
            self.method = Method.parse(self.method)
        if self.size < 1:
            raise InvalidParameter(f"Filter size must be >= 1, got {self.size}")
        self.k_values = tuple(float(k) for k in self.k_values)
        if not self.k_values:
            raise InvalidParameter("At least one regularization value is required")
        if any(not k >= 0 for k in self.k_values):
            raise InvalidParameter(f"Regularization values must be >= 0, got {self.k_values}")

    def to_mode(self, k: float = 0.0) -> FilterMode:
        """Resolve the method once into a concrete filter mode."""
        if self.method is Method.CONVOLUTION:
            return ConvolutionBlur(self.direction, self.size)
        if self.method is Method.SPECTRAL:
            return SpectralBlur(self.direction, self.size)
        return WienerDeconvolution(self.direction, k, self.size)

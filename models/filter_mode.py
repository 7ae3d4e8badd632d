"""Blur direction and the closed set of filter modes."""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from utils.constants import DEFAULT_KERNEL_SIZE
from utils.exceptions import InvalidParameter


class Direction(Enum):
    """Axis the box kernel runs along."""

    HORIZONTAL = 'horizontal'
    VERTICAL = 'vertical'

    @classmethod
    def parse(cls, name: str) -> 'Direction':
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise InvalidParameter(f"Unknown blur direction: {name!r}") from None


def _check_size(size: int) -> None:
    if size < 1:
        raise InvalidParameter(f"Filter size must be >= 1, got {size}")


@dataclass(frozen=True)
class ConvolutionBlur:
    """Spatial-domain box blur."""

    direction: Direction
    size: int

    def __post_init__(self):
        _check_size(self.size)


@dataclass(frozen=True)
class SpectralBlur:
    """Box blur by spectrum multiplication."""

    direction: Direction
    size: int

    def __post_init__(self):
        _check_size(self.size)


@dataclass(frozen=True)
class WienerDeconvolution:
    """Regularized inverse of a box blur; k=0 is the plain inverse filter."""

    direction: Direction
    k: float
    size: int = DEFAULT_KERNEL_SIZE

    def __post_init__(self):
        _check_size(self.size)
        if not self.k >= 0:
            raise InvalidParameter(f"Regularization k must be >= 0, got {self.k}")


FilterMode = Union[ConvolutionBlur, SpectralBlur, WienerDeconvolution]

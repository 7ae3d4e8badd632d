"""Wiener deconvolution over a sequence of regularization values."""

import numpy as np
from typing import Iterator, Sequence, Tuple

from models.filter_mode import Direction, WienerDeconvolution
from models.sweep_result import SweepEntry
from engines.pipeline import apply_filter, validate
from utils.constants import DEFAULT_KERNEL_SIZE, WIENER_K_SWEEP
from utils.exceptions import InvalidParameter
from utils.logging import get_logger

logger = get_logger(__name__)


def geometric_sweep(
    start: float = 0.001,
    stop: float = 1.0,
    factor: float = 10.0,
    include_zero: bool = True
) -> Tuple[float, ...]:
    """k values start, start*factor, ... up to stop inclusive, optionally led by 0."""
    if start <= 0 or factor <= 1 or stop < start:
        raise InvalidParameter(
            f"Invalid sweep: start={start}, stop={stop}, factor={factor}"
        )
    values = [0.0] if include_zero else []
    n = 0
    # Relative slack so float drift (0.001 * 10**3 > 1.0) keeps the upper bound
    while start * factor ** n <= stop * (1 + 1e-9):
        values.append(float(start * factor ** n))
        n += 1
    return tuple(values)


class WienerSweep:
    """
    Lazy, restartable sweep. Every iteration deconvolves the same image once
    per k value, in order, yielding `SweepEntry(k, image)`.
    """

    def __init__(
        self,
        image: np.ndarray,
        direction: Direction,
        size: int = DEFAULT_KERNEL_SIZE,
        k_values: Sequence[float] = WIENER_K_SWEEP
    ):
        self.image = image
        self.direction = direction
        self.size = size
        self.k_values = tuple(float(k) for k in k_values)
        if not self.k_values:
            raise InvalidParameter("At least one regularization value is required")
        # Modes validate size and k; the image is validated once here
        self._modes = [WienerDeconvolution(direction, k, size) for k in self.k_values]
        validate(image, self._modes[0])

    def __len__(self) -> int:
        return len(self.k_values)

    def __iter__(self) -> Iterator[SweepEntry]:
        for mode in self._modes:
            yield self._run_mode(mode)

    def run(self, k: float) -> SweepEntry:
        """Deconvolve with a single k value."""
        return self._run_mode(WienerDeconvolution(self.direction, k, self.size))

    def _run_mode(self, mode: WienerDeconvolution) -> SweepEntry:
        logger.debug("Wiener sweep: k=%g, size=%d, %s", mode.k, mode.size, mode.direction.value)
        return SweepEntry(mode.k, apply_filter(self.image, mode))


def run_sweep(
    image: np.ndarray,
    direction: Direction,
    size: int = DEFAULT_KERNEL_SIZE,
    k_values: Sequence[float] = WIENER_K_SWEEP
) -> WienerSweep:
    """Validate inputs and return the sweep; no filtering happens until iteration."""
    return WienerSweep(image, direction, size, k_values)

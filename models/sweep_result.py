"""One result of a regularization sweep."""

from typing import NamedTuple

import numpy as np


class SweepEntry(NamedTuple):
    """(k, image) pair produced by the Wiener sweep."""

    k: float
    image: np.ndarray

    @property
    def label(self) -> str:
        return f"Result (k = {self.k:.3f})"

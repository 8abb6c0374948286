from __future__ import annotations
from dataclasses import dataclass
import numpy as np


@dataclass(frozen=True)
class Kernel:
    """
    Square (2k+1)x(2k+1) weight matrix for the convolution engine.
    Built per filter call; never stored on an Image.
    """
    weights: np.ndarray

    def __post_init__(self):
        weights = np.asarray(self.weights, dtype=np.float64)
        if weights.ndim != 2 or weights.shape[0] != weights.shape[1]:
            raise ValueError(f"Kernel must be square, got shape {weights.shape}")
        if weights.shape[0] % 2 == 0:
            raise ValueError(f"Kernel size must be odd, got {weights.shape[0]}")
        object.__setattr__(self, "weights", weights)

    @property
    def size(self) -> int:
        return self.weights.shape[0]

    @property
    def offset(self) -> int:
        return self.size // 2

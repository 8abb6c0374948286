from __future__ import annotations
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Pixel:
    """
    Immutable RGBA value, 8 bits per channel.
    Filters replace pixels wholesale, they never patch a single channel.
    """
    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self):
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise TypeError(f"Channel {name}={value!r} must be an integer")
            if not 0 <= value <= 255:
                raise ValueError(f"Channel {name}={value} outside [0, 255]")

    def as_tuple(self) -> tuple[int, int, int, int]:
        return self.r, self.g, self.b, self.a

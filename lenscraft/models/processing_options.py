from __future__ import annotations
from dataclasses import dataclass
import logging
import re

from ..config import DEFAULT_JPEG_QUALITY

logger = logging.getLogger(__name__)

# Leading integer of a dimension, e.g. " 800" or "600px"
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_dimension(text: str) -> int | None:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else None


@dataclass(frozen=True)
class ProcessingOptions:
    """
    Value-object holding every requested operation for one run.
    Ranges in the comments are documented, not enforced.
    """
    brightness: float = 1.0        # [0.0 , 2.0], 1.0 = unchanged
    contrast: float = 0.0          # [-100 , 100], 0 = unchanged
    blur: int = 0                  # radius [0 , 10]
    sharpen: float = 0.0           # [0.0 , 1.0]
    grayscale: bool = False
    sepia: bool = False
    edge_detection: bool = False
    quality: int = DEFAULT_JPEG_QUALITY  # JPEG only [0 , 100]
    resize: str = ""               # "<width>x<height>"

    @property
    def resize_dimensions(self) -> tuple[int, int] | None:
        """
        Parse ``resize`` into (width, height).
        Malformed input yields None: resize is then skipped, not an error.
        """
        if not self.resize:
            return None

        parts = self.resize.split("x")
        if len(parts) != 2:
            logger.warning(f"Ignoring resize '{self.resize}': expected <width>x<height>")
            return None

        width, height = (parse_dimension(p) for p in parts)
        if width is None or height is None or width <= 0 or height <= 0:
            logger.warning(f"Ignoring resize '{self.resize}': dimensions must be positive integers")
            return None
        return width, height

from __future__ import annotations
import logging

import numpy as np

from ..models.image import Image
from .image_service import ImageService

logger = logging.getLogger(__name__)

# ITU-R BT.601 luma, in thousandths so truncation is exact
LUMA_WEIGHTS = (299, 587, 114)

# Rows produce R', G', B' from (R, G, B)
SEPIA_MATRIX = (
    (0.393, 0.769, 0.189),
    (0.349, 0.686, 0.168),
    (0.272, 0.534, 0.131),
)


def clamp_channels(values: np.ndarray) -> np.ndarray:
    """Saturate to [0, 255] and truncate toward zero into uint8."""
    return np.clip(values, 0.0, 255.0).astype(np.uint8)


class ColorService:
    """
    Per-pixel colour remaps. Each output pixel depends only on the same
    input pixel; alpha is always carried through untouched.
    """

    def __init__(self, image_service: ImageService | None = None):
        self.image_service = image_service or ImageService()

    # ─── Internal helpers ──────────────────────────────────────────
    @staticmethod
    def _rgb(img: Image) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        rgb = img.pixels[..., :3].astype(np.float64)
        return rgb[..., 0], rgb[..., 1], rgb[..., 2]

    def _replace_rgb(self, img: Image, channels: list[np.ndarray]) -> None:
        new_pixels = np.empty_like(img.pixels)
        for i, channel in enumerate(channels):
            new_pixels[..., i] = clamp_channels(channel)
        new_pixels[..., 3] = img.pixels[..., 3]
        self.image_service.update_pixels(img, new_pixels)

    # ─── Public API ────────────────────────────────────────────────
    def grayscale(self, img: Image) -> None:
        """R = G = B = floor(0.299R + 0.587G + 0.114B)."""
        rgb = img.pixels[..., :3].astype(np.int32)
        wr, wg, wb = LUMA_WEIGHTS
        gray = (rgb[..., 0] * wr + rgb[..., 1] * wg + rgb[..., 2] * wb) // 1000
        self._replace_rgb(img, [gray, gray, gray])

    def sepia(self, img: Image) -> None:
        r, g, b = self._rgb(img)
        self._replace_rgb(img, [r * wr + g * wg + b * wb for wr, wg, wb in SEPIA_MATRIX])

    def brightness(self, img: Image, factor: float) -> None:
        """Scale R, G, B by ``factor``; out-of-range results saturate."""
        if factor == 1.0:
            return
        r, g, b = self._rgb(img)
        self._replace_rgb(img, [r * factor, g * factor, b * factor])

    def contrast(self, img: Image, delta: float) -> None:
        """
        Stretch channels around mid-grey.
        ``delta`` in [-100, 100] maps to a factor of ((100 + delta) / 100) ** 2.
        """
        if delta == 0:
            return
        factor = (100.0 + delta) / 100.0
        factor *= factor

        def stretch(c: np.ndarray) -> np.ndarray:
            return ((c / 255.0 - 0.5) * factor + 0.5) * 255

        r, g, b = self._rgb(img)
        self._replace_rgb(img, [stretch(r), stretch(g), stretch(b)])

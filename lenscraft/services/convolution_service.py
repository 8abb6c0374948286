from __future__ import annotations
import logging
import math

import numpy as np

from ..models.image import Image
from ..models.kernel import Kernel
from .color_service import ColorService, clamp_channels
from .image_service import ImageService

logger = logging.getLogger(__name__)

SHARPEN_KERNEL = (
    (0, -1, 0),
    (-1, 5, -1),
    (0, -1, 0),
)

EDGE_KERNEL = (
    (-1, -1, -1),
    (-1, 8, -1),
    (-1, -1, -1),
)


def gaussian_kernel(radius: int) -> Kernel:
    """
    Normalised (2r+1)x(2r+1) Gaussian with sigma = radius / 2.
    """
    if radius <= 0:
        raise ValueError(f"Gaussian radius must be positive, got {radius}")

    sigma = radius / 2
    size = 2 * radius + 1
    weights = np.empty((size, size), dtype=np.float64)
    # Sequential row-major total, not a pairwise sum
    total = 0.0
    for y in range(-radius, radius + 1):
        for x in range(-radius, radius + 1):
            w = math.exp(-((x * x + y * y) / (2 * sigma * sigma)))
            weights[y + radius, x + radius] = w
            total += w

    return Kernel(weights / total)


class ConvolutionService:
    """
    Weighted-neighbourhood filters.

    *   Pixels closer than ``kernel.offset`` to any edge are copied unchanged:
        no clamping, wrapping or mirroring of the border.
    *   Only R, G, B are convolved; alpha comes from the source pixel.
    *   Results land in a fresh grid, the input is never read and written at once.
    """

    def __init__(
        self,
        image_service: ImageService | None = None,
        color_service: ColorService | None = None,
    ):
        self.image_service = image_service or ImageService()
        self.color_service = color_service or ColorService(self.image_service)

    # ─── Core engine ───────────────────────────────────────────────
    @staticmethod
    def convolve(pixels: np.ndarray, kernel: Kernel, amount: float) -> np.ndarray:
        """
        Return a new (H, W, 4) grid: interior pixels blended as
        ``orig * (1 - amount) + sum(neighbour * weight) * amount``.
        """
        result = pixels.copy()
        height, width = pixels.shape[:2]
        offset = kernel.offset
        inner_h = height - 2 * offset
        inner_w = width - 2 * offset
        if inner_h <= 0 or inner_w <= 0:
            return result

        src = pixels[..., :3].astype(np.float64)
        acc = np.zeros((inner_h, inner_w, 3), dtype=np.float64)

        # Row-major over the kernel, matching a per-pixel accumulation order
        for ky in range(kernel.size):
            for kx in range(kernel.size):
                acc += src[ky:ky + inner_h, kx:kx + inner_w] * kernel.weights[ky, kx]

        original = src[offset:offset + inner_h, offset:offset + inner_w]
        blended = original * (1 - amount) + acc * amount
        result[offset:offset + inner_h, offset:offset + inner_w, :3] = clamp_channels(blended)
        return result

    def apply_kernel(self, img: Image, kernel: Kernel, amount: float) -> None:
        logger.debug(f"Applying {kernel.size}x{kernel.size} kernel, amount={amount}")
        new_pixels = self.convolve(img.pixels, kernel, amount)
        self.image_service.update_pixels(img, new_pixels)

    # ─── Filters ───────────────────────────────────────────────────
    def sharpen(self, img: Image, amount: float) -> None:
        self.apply_kernel(img, Kernel(np.array(SHARPEN_KERNEL, dtype=np.float64)), amount)

    def edge_detection(self, img: Image) -> None:
        """Desaturate, then apply the 8-neighbour Laplacian at full strength."""
        self.color_service.grayscale(img)
        self.apply_kernel(img, Kernel(np.array(EDGE_KERNEL, dtype=np.float64)), 1.0)

    def blur(self, img: Image, radius: int) -> None:
        if radius <= 0:
            return
        self.apply_kernel(img, gaussian_kernel(radius), 1.0)

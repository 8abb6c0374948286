from __future__ import annotations
import logging

import numpy as np

from ..models.image import Image
from .image_service import ImageService

logger = logging.getLogger(__name__)


class GeometryService:
    def __init__(self, image_service: ImageService | None = None):
        self.image_service = image_service or ImageService()

    @staticmethod
    def source_indices(old_size: int, new_size: int) -> np.ndarray:
        """Nearest-neighbour source index for every destination index."""
        ratio = float(old_size) / float(new_size)
        return (np.arange(new_size, dtype=np.float64) * ratio).astype(np.intp)

    def resize(self, img: Image, new_width: int, new_height: int) -> None:
        """
        Nearest-neighbour resample to ``new_width`` x ``new_height``.
        Non-positive targets are a no-op. The snapshot keeps its old size.
        """
        if new_width <= 0 or new_height <= 0:
            logger.debug(f"Skipping resize to {new_width}x{new_height}")
            return
        if img.width == 0 or img.height == 0:
            logger.warning("Cannot resample an empty image, leaving it unchanged")
            return

        xs = self.source_indices(img.width, new_width)
        ys = self.source_indices(img.height, new_height)

        # Fancy indexing allocates a fresh grid
        new_pixels = np.ascontiguousarray(img.pixels[ys[:, None], xs[None, :]])
        logger.debug(f"Resized {img.width}x{img.height} -> {new_width}x{new_height}")
        self.image_service.update_pixels(img, new_pixels)

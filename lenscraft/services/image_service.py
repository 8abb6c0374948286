from __future__ import annotations
from pathlib import Path
from typing import Iterable, Iterator, Union

import numpy as np

from ..config import DEFAULT_JPEG_QUALITY
from ..models.image import Image
from ..models.pixel import Pixel
from ..repositories.image_repository import ImageRepository


class ImageService:
    """I/O and pixel-grid helpers. No filter logic here."""
    def __init__(self, image_repository: ImageRepository | None = None):
        self.image_repository = image_repository or ImageRepository()

    def create_image(self, pixels: np.ndarray, path: Union[str, Path] = None) -> Image:
        return self.image_repository.create_image(pixels, path)

    def load(self, path: str | Path) -> Image:
        """Load a single image from disk into an Image object (with snapshot)."""
        return self.image_repository.load(path)

    def save(self, image: Image, quality: int = DEFAULT_JPEG_QUALITY) -> None:
        """
        Business-level method to save the image to its path.
        """
        self.image_repository.save(image, quality=quality)

    def iter_image_paths(
        self,
        folder: Union[str, Path],
        *,
        recursive: bool = False,
        exts: Iterable[str] | None = None,
    ) -> Iterator[Path]:
        return self.image_repository.iter_paths(folder, recursive=recursive, exts=exts)

    def get_image_dimensions(self, img: Image) -> tuple[int, int]:
        return self.image_repository.retrieve_image_dimensions(img)

    def get_pixel(self, img: Image, x: int, y: int) -> Pixel:
        return self.image_repository.get_pixel(img, x, y)

    def set_pixel(self, img: Image, x: int, y: int, pixel: Pixel) -> None:
        self.image_repository.set_pixel(img, x, y, pixel)

    def update_pixels(self, image: Image, new_pixels: np.ndarray) -> None:
        """
        Business-level method to replace the current image pixels.
        """
        self.image_repository.set_pixels(image, new_pixels)

    def clone(self, image: Image) -> Image:
        return self.image_repository.clone(image)

    def preserve_original_state(self, image: Image) -> None:
        """
        Preserve the current image state, if no snapshot was taken yet.
        """
        self.image_repository.save_original_pixels(image)

    def reset(self, image: Image, *, restore_dimensions: bool = False) -> None:
        """
        Restore the pixels captured at load time. Not part of the standard
        pipeline; callers invoke it explicitly (e.g. to retry with new options).
        """
        self.image_repository.reset(image, restore_dimensions=restore_dimensions)

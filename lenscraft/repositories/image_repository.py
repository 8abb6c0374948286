from __future__ import annotations
from pathlib import Path
from typing import Union, Iterable, Iterator
import logging

import numpy as np
import cv2
from PIL import Image as PILImage

from ..config import VALID_IMAGE_EXTENSIONS, DEFAULT_JPEG_QUALITY
from ..errors import (
    ImageLoadError,
    ImageSaveError,
    SnapshotMismatchError,
    SnapshotMissingError,
    UnsupportedFormatError,
)
from ..models.image import Image
from ..models.pixel import Pixel

logger = logging.getLogger(__name__)

# cv2 channel layout -> RGBA conversion code
_TO_RGBA = {
    1: cv2.COLOR_GRAY2RGBA,
    3: cv2.COLOR_BGR2RGBA,
    4: cv2.COLOR_BGRA2RGBA,
}


class ImageRepository:
    """
    Handles file I/O and pixel updates for Image entities.
    """
    def __init__(self, valid_exts: Iterable[str] | None = None):
        self.VALID_EXTS = {e.lower() for e in (valid_exts or VALID_IMAGE_EXTENSIONS)}

    # ─── Pixel grid ───────────────────────────────────────────────────
    @staticmethod
    def create_image(
        pixels: np.ndarray,
        path: Union[str, Path] = None,
        *,
        snapshot: bool = True,
    ) -> Image:
        pixels = np.asarray(pixels)
        if pixels.ndim != 3 or pixels.shape[2] != 4:
            raise ValueError(f"Expected (H, W, 4) RGBA pixels, got shape {pixels.shape}")
        if pixels.dtype != np.uint8:
            raise ValueError(f"Expected uint8 pixels, got {pixels.dtype}")

        pixels = np.ascontiguousarray(pixels).copy()
        original = pixels.copy() if snapshot else None
        return Image(
            pixels=pixels,
            path=Path(path) if path is not None else None,
            original_pixels=original,
        )

    @staticmethod
    def retrieve_image_dimensions(img: Image) -> tuple[int, int]:
        """Returns (width, height)."""
        return img.width, img.height

    @staticmethod
    def _check_bounds(img: Image, x: int, y: int) -> None:
        if not (0 <= x < img.width and 0 <= y < img.height):
            raise IndexError(
                f"Pixel ({x}, {y}) out of bounds for {img.width}x{img.height} image"
            )

    @classmethod
    def get_pixel(cls, img: Image, x: int, y: int) -> Pixel:
        cls._check_bounds(img, x, y)
        r, g, b, a = (int(c) for c in img.pixels[y, x])
        return Pixel(r, g, b, a)

    @classmethod
    def set_pixel(cls, img: Image, x: int, y: int, pixel: Pixel) -> None:
        cls._check_bounds(img, x, y)
        img.pixels[y, x] = pixel.as_tuple()

    @staticmethod
    def set_pixels(image: Image, new_pixels: np.ndarray) -> None:
        image.pixels = new_pixels

    @staticmethod
    def clone(image: Image) -> Image:
        """Deep copy of the live grid. The clone carries no snapshot."""
        return Image(pixels=image.pixels.copy(), path=image.path)

    @staticmethod
    def save_original_pixels(image: Image) -> None:
        """Capture the current pixels as the snapshot, unless one exists."""
        if image.original_pixels is None:
            image.original_pixels = image.pixels.copy()

    @staticmethod
    def reset(image: Image, *, restore_dimensions: bool = False) -> None:
        """
        Copy the snapshot back into the live grid.

        A resize leaves the snapshot at the old size; resetting then raises
        SnapshotMismatchError unless ``restore_dimensions`` is set, in which
        case the live grid is replaced by a full copy of the snapshot.
        """
        original = image.original_pixels
        if original is None:
            raise SnapshotMissingError("Image has no original snapshot to reset to")

        if original.shape != image.pixels.shape:
            if not restore_dimensions:
                raise SnapshotMismatchError(
                    f"Cannot reset {image.width}x{image.height} image to "
                    f"{original.shape[1]}x{original.shape[0]} snapshot"
                )
            image.pixels = original.copy()
            return

        np.copyto(image.pixels, original)

    # ─── Codec boundary ───────────────────────────────────────────────
    def check_extension(self, path: Union[str, Path]) -> None:
        path = Path(path)
        if path.suffix.lower() not in self.VALID_EXTS:
            raise UnsupportedFormatError(
                f"Unsupported image format '{path.suffix}': {path}"
            )

    def load(self, path: Union[str, Path]) -> Image:
        path = Path(path)
        self.check_extension(path)

        if not path.is_file():
            raise ImageLoadError(f"Image not found: {path}")

        arr = cv2.imread(str(path), cv2.IMREAD_UNCHANGED)
        if arr is None:
            raise ImageLoadError(f"Image unreadable or corrupt: {path}")

        if arr.dtype == np.uint16:
            arr = (arr >> 8).astype(np.uint8)
        elif arr.dtype != np.uint8:
            raise ImageLoadError(f"Unsupported pixel depth {arr.dtype}: {path}")

        channels = 1 if arr.ndim == 2 else arr.shape[2]
        code = _TO_RGBA.get(channels)
        if code is None:
            raise ImageLoadError(f"Unsupported channel count {channels}: {path}")

        rgba = cv2.cvtColor(arr, code)
        logger.debug(f"Loaded {path} ({rgba.shape[1]}x{rgba.shape[0]}, {channels} ch)")
        return self.create_image(rgba, path)

    @staticmethod
    def save(image: Image, quality: int = DEFAULT_JPEG_QUALITY) -> None:
        """
        Encode ``image`` to ``image.path``. PNG keeps alpha; JPEG (and any
        unrecognised extension) drops it and honours ``quality``.
        """
        if image.path is None:
            raise ImageSaveError("Image has no destination path")

        path = Path(image.path)
        try:
            pil_img = PILImage.fromarray(np.ascontiguousarray(image.pixels))
            if path.suffix.lower() == ".png":
                pil_img.save(path, format="PNG")
            else:
                quality = min(max(int(quality), 0), 100)
                pil_img.convert("RGB").save(path, format="JPEG", quality=quality)
        except (OSError, ValueError) as err:
            raise ImageSaveError(f"Failed to write {path}: {err}") from err
        logger.debug(f"Saved {path}")

    # ─── Directory scan ───────────────────────────────────────────────
    def iter_paths(
        self,
        folder: Union[str, Path],
        *,
        recursive: bool = False,
        exts: Iterable[str] | None = None,
    ) -> Iterator[Path]:
        """
        Yield image file paths one at a time, in sorted order.
        Decoding is left to the caller so a bad file fails on its own.
        """
        folder = Path(folder)
        if not folder.is_dir():
            raise NotADirectoryError(folder)

        allowed = {e.lower() for e in (exts or self.VALID_EXTS)}
        pattern = "**/*" if recursive else "*"

        for p in sorted(folder.glob(pattern)):
            if not p.is_file():
                continue
            if p.suffix.lower() not in allowed:
                logger.debug(f"Skipping due to extension: {p}")
                continue
            yield p

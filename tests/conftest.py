"""
Pytest fixtures for lenscraft tests
"""

import numpy as np
import pytest
from PIL import Image as PILImage

from lenscraft.repositories.image_repository import ImageRepository
from lenscraft.services.color_service import ColorService
from lenscraft.services.convolution_service import ConvolutionService
from lenscraft.services.geometry_service import GeometryService
from lenscraft.services.image_service import ImageService


@pytest.fixture
def image_service() -> ImageService:
    return ImageService(ImageRepository(valid_exts={".jpg", ".jpeg", ".png"}))


@pytest.fixture
def color_service(image_service) -> ColorService:
    return ColorService(image_service)


@pytest.fixture
def convolution_service(image_service, color_service) -> ConvolutionService:
    return ConvolutionService(image_service, color_service)


@pytest.fixture
def geometry_service(image_service) -> GeometryService:
    return GeometryService(image_service)


@pytest.fixture
def solid_pixels():
    """
    Factory for a (height, width, 4) grid filled with a single RGBA value.
    """
    def make(width: int, height: int, rgba=(100, 150, 200, 255)) -> np.ndarray:
        pixels = np.empty((height, width, 4), dtype=np.uint8)
        pixels[:] = rgba
        return pixels
    return make


@pytest.fixture
def random_pixels():
    """
    Factory for a seeded random RGBA grid.
    """
    def make(width: int, height: int, seed: int = 0) -> np.ndarray:
        rng = np.random.default_rng(seed)
        return rng.integers(0, 256, size=(height, width, 4), dtype=np.uint8)
    return make


@pytest.fixture
def gradient_pixels():
    """
    The synthetic test card: R = x, G = y, B = x + y (all mod 255), opaque.
    """
    def make(width: int = 100, height: int = 100) -> np.ndarray:
        ys, xs = np.mgrid[0:height, 0:width]
        pixels = np.empty((height, width, 4), dtype=np.uint8)
        pixels[..., 0] = xs % 255
        pixels[..., 1] = ys % 255
        pixels[..., 2] = (xs + ys) % 255
        pixels[..., 3] = 255
        return pixels
    return make


@pytest.fixture
def write_png(tmp_path):
    """
    Write a (H, W, C) uint8 array as PNG under tmp_path and return the path.
    """
    def write(name: str, pixels: np.ndarray):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        PILImage.fromarray(pixels).save(path, format="PNG")
        return path
    return write

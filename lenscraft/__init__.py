"""
lenscraft: load an image, run a fixed chain of colour, convolution and
resize filters over its RGBA pixel grid, and write it back out.
"""

from .errors import (
    ImageLoadError,
    ImageSaveError,
    LenscraftError,
    SnapshotMismatchError,
    SnapshotMissingError,
    UnsupportedFormatError,
)
from .models import Image, Kernel, Pixel, ProcessingOptions
from .pipeline.batch_processor import BatchResult, process_batch, process_file
from .pipeline.image_processor import process_image

__version__ = "1.0.0"

__all__ = [
    "BatchResult",
    "Image",
    "ImageLoadError",
    "ImageSaveError",
    "Kernel",
    "LenscraftError",
    "Pixel",
    "ProcessingOptions",
    "SnapshotMismatchError",
    "SnapshotMissingError",
    "UnsupportedFormatError",
    "process_batch",
    "process_file",
    "process_image",
]

"""
Image Processor Pipeline
Applies a ProcessingOptions configuration to one in-memory Image.
The step order is fixed: the filters do not commute, so changing it
changes the output.
"""

import logging

from ..models.image import Image
from ..models.processing_options import ProcessingOptions
from ..services.color_service import ColorService
from ..services.convolution_service import ConvolutionService
from ..services.geometry_service import GeometryService

logger = logging.getLogger(__name__)


def process_image(
    img: Image,
    options: ProcessingOptions,
    *,
    color_service: ColorService = ColorService(),
    convolution_service: ConvolutionService = ConvolutionService(),
    geometry_service: GeometryService = GeometryService(),
) -> Image:
    """
    Run every requested step on ``img`` in place and return it.

    Order:
        1. brightness   (skipped at 1.0)
        2. contrast     (skipped at 0)
        3. grayscale
        4. sepia
        5. edge detection (re-applies grayscale on its own)
        6. sharpen      (skipped at 0)
        7. blur         (skipped at radius <= 0)
        8. resize       (skipped when absent or malformed)

    Args:
        img: Image to modify; its snapshot is left alone
        options: Requested operations and parameters

    Returns:
        Image: the same object, for chaining
    """
    if options.brightness != 1.0:
        logger.debug(f"Brightness x{options.brightness}")
        color_service.brightness(img, options.brightness)

    if options.contrast != 0:
        logger.debug(f"Contrast {options.contrast:+}")
        color_service.contrast(img, options.contrast)

    if options.grayscale:
        logger.debug("Grayscale")
        color_service.grayscale(img)

    if options.sepia:
        logger.debug("Sepia")
        color_service.sepia(img)

    if options.edge_detection:
        logger.debug("Edge detection")
        convolution_service.edge_detection(img)

    if options.sharpen != 0:
        logger.debug(f"Sharpen amount={options.sharpen}")
        convolution_service.sharpen(img, options.sharpen)

    if options.blur > 0:
        logger.debug(f"Blur radius={options.blur}")
        convolution_service.blur(img, options.blur)

    dimensions = options.resize_dimensions
    if dimensions is not None:
        geometry_service.resize(img, *dimensions)

    return img

from .pixel import Pixel
from .image import Image
from .kernel import Kernel
from .processing_options import ProcessingOptions

__all__ = ["Pixel", "Image", "Kernel", "ProcessingOptions"]

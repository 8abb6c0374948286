import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

VALID_IMAGE_EXTENSIONS = {
    ext.strip().lower()
    for ext in os.getenv("VALID_IMAGE_EXTENSIONS", ".jpg,.jpeg,.png").split(",")
    if ext.strip()
}
DEFAULT_JPEG_QUALITY = int(os.getenv("DEFAULT_JPEG_QUALITY", "90"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
BATCH_WORKERS = int(os.getenv("BATCH_WORKERS", "1"))

"""Image I/O using OpenCV."""

import cv2
import numpy as np

from models.raster_image import RasterImage


def load_image(path: str) -> RasterImage:
    """Load image as RGBA. Files without alpha get an opaque alpha channel."""
    img = cv2.imread(path, cv2.IMREAD_UNCHANGED)
    if img is None:
        raise ValueError(f"Could not load image from {path}")
    if img.dtype != np.uint8:
        raise ValueError(f"Only 8-bit images are supported, got {img.dtype} from {path}")
    if img.ndim == 2:
        rgba = cv2.cvtColor(img, cv2.COLOR_GRAY2RGBA)
    elif img.shape[2] == 4:
        rgba = cv2.cvtColor(img, cv2.COLOR_BGRA2RGBA)
    else:
        rgba = cv2.cvtColor(img, cv2.COLOR_BGR2RGBA)
    return RasterImage.from_array(rgba)


def save_image(image: RasterImage, path: str) -> None:
    """Save RGBA image."""
    if not cv2.imwrite(path, cv2.cvtColor(image.to_array(), cv2.COLOR_RGBA2BGRA)):
        raise ValueError(f"Could not write image to {path}")

# renderer/image.py
import logging
import os
import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)

def save_image(pixels: np.ndarray, output_path: str) -> str:
    """
    Save an (height, width, 3) uint8 image. The file format follows the
    extension (PNG when there is none).

    Returns the path actually written.
    """
    if pixels.dtype != np.uint8 or pixels.ndim != 3 or pixels.shape[2] != 3:
        raise ValueError(f"expected (h, w, 3) uint8 pixels, got {pixels.dtype} {pixels.shape}")
    root, ext = os.path.splitext(output_path)
    if not ext:
        output_path = root + ".png"
    directory = os.path.dirname(output_path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    Image.fromarray(pixels).save(output_path)
    logger.info("Image saved to %s", output_path)
    return output_path

# renderer/image_output.py
import logging
import os
import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)

def to_image_array(frame: np.ndarray) -> np.ndarray:
    """
    Converts a (width, height, 3) frame with row 0 at the bottom into a
    (height, width, 3) uint8 array with row 0 at the top, as image files expect.
    """
    output = (frame * 255).clip(0, 255).astype("uint8")
    return np.ascontiguousarray(output.transpose(1, 0, 2)[::-1])

def save_image(frame: np.ndarray, path: str) -> str:
    """
    Writes the frame to `path`; the format follows the file extension.
    """
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    Image.fromarray(to_image_array(frame)).save(path)
    logger.info("Wrote %s", path)
    return path

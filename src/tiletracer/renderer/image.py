# renderer/image.py
import logging
import os
import numpy as np
from PIL import Image as PILImage
from .tone_mapping import unpack_pixels

logger = logging.getLogger(__name__)

class Image:
    """
    Packed-RGBA frame buffer. Row 0 is the bottom of the picture, matching
    film coordinates where y grows upwards.
    """
    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width), dtype=np.uint32)

    def region(self, x_min: int, x_max: int, y_min: int, y_max: int) -> np.ndarray:
        """
        Writable view of the half-open rectangle [x_min, x_max) x [y_min, y_max).
        Views of non-overlapping rectangles never share memory, so each render
        thread can own its tile without locking.
        """
        return self.pixels[y_min:y_max, x_min:x_max]

    def to_rgb(self) -> np.ndarray:
        """(height, width, 3) uint8 RGB array with the top row first."""
        return unpack_pixels(self.pixels)[::-1]

    def __repr__(self) -> str:
        return f"Image({self.width}x{self.height})"

def write_ppm(path: str, image: Image) -> None:
    """
    Write a plain-text (P3) PPM: one "r g b" line per pixel, top row first.
    """
    rgb = image.to_rgb()
    with open(path, "w", encoding="ascii") as f:
        f.write(f"P3\n{image.width} {image.height}\n255\n")
        for row in rgb:
            f.write("".join(f"{px[0]} {px[1]} {px[2]}\n" for px in row))
    logger.info("Wrote %s", path)

def save_image(path: str, image: Image) -> None:
    """
    Save the image, choosing the encoder from the file suffix. PPM goes
    through write_ppm; every other format is handed to Pillow.
    """
    if os.path.splitext(path)[1].lower() == ".ppm":
        write_ppm(path, image)
        return
    PILImage.fromarray(np.ascontiguousarray(image.to_rgb())).save(path)
    logger.info("Wrote %s", path)

# renderer/tone_mapping.py
import math
import numpy as np
from numba import njit

@njit
def correct_gamma(r, g, b):
    """
    Approximate gamma-2 encoding: square root of each linear channel.
    """
    return math.sqrt(r), math.sqrt(g), math.sqrt(b)

@njit
def pack_rgba(r, g, b):
    """
    Quantize a display color to 8 bits per channel, packed as 0xRRGGBBAA with
    alpha left at zero. Channels are clamped to [0, 1] first so bright
    emitters cannot spill into the neighbouring byte.
    """
    r = min(max(r, 0.0), 1.0)
    g = min(max(g, 0.0), 1.0)
    b = min(max(b, 0.0), 1.0)
    ri = int(r * 255.99)
    gi = int(g * 255.99)
    bi = int(b * 255.99)
    return (ri << 24) | (gi << 16) | (bi << 8)

@njit
def unpack_pixels(pixels):
    """
    Expand a (height, width) array of packed RGBA values into a
    (height, width, 3) uint8 RGB array, keeping the row order.
    """
    height, width = pixels.shape
    output = np.empty((height, width, 3), dtype=np.uint8)
    for y in range(height):
        for x in range(width):
            col = np.int64(pixels[y, x])
            output[y, x, 0] = (col >> 24) & 0xFF
            output[y, x, 1] = (col >> 16) & 0xFF
            output[y, x, 2] = (col >> 8) & 0xFF
    return output

def color_to_pixel(color) -> int:
    """Gamma-correct an averaged linear color and pack it for the image buffer."""
    r, g, b = correct_gamma(float(color.x), float(color.y), float(color.z))
    return pack_rgba(r, g, b)

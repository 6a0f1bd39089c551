# materials/textures.py
import math
from typing import Optional, Union
import numpy as np
from tiletracer.core.utils import clamp
from tiletracer.core.vector import Vector3, Color

# Returned by image textures without pixel data, so missing bitmaps stand out.
DEBUG_COLOR = Color(0.0, 1.0, 1.0)

class Texture:
    """Base class for all textures."""
    def value(self, u: float, v: float, p: Vector3) -> Color:
        """Color at surface coordinates (u, v) and world-space point p."""
        raise NotImplementedError("value() must be implemented by texture subclasses.")

class SolidTexture(Texture):
    """A solid color texture."""
    def __init__(self, color: Color):
        self.color = color

    def value(self, u: float, v: float, p: Vector3) -> Color:
        return self.color

def as_texture(source: Union[Color, Texture]) -> Texture:
    """Wraps a plain color into a SolidTexture; textures pass through."""
    if isinstance(source, Vector3):
        return SolidTexture(source)
    return source

class CheckerTexture(Texture):
    """
    A 3D checker pattern driven by the world-space point, not by UV.
    Cells flip wherever sin(10x)·sin(10y)·sin(10z) changes sign.
    """
    def __init__(self, odd: Union[Color, Texture], even: Union[Color, Texture]):
        self.odd = as_texture(odd)
        self.even = as_texture(even)

    def value(self, u: float, v: float, p: Vector3) -> Color:
        sines = math.sin(10.0 * p.x) * math.sin(10.0 * p.y) * math.sin(10.0 * p.z)
        if sines < 0:
            return self.odd.value(u, v, p)
        return self.even.value(u, v, p)

class ImageTexture(Texture):
    """
    A texture backed by a decoded bitmap.

    ``data`` is a (height, width, 3) uint8 array with the first row at the
    top of the picture, or None when decoding failed.
    """
    def __init__(self, data: Optional[np.ndarray]):
        self.data = data
        if data is None:
            self.width = self.height = 0
        else:
            self.height, self.width = data.shape[0], data.shape[1]

    def value(self, u: float, v: float, p: Vector3) -> Color:
        if self.data is None:
            return DEBUG_COLOR

        u = clamp(u, 0.0, 1.0)
        v = 1.0 - clamp(v, 0.0, 1.0)  # Flip V to image row order

        # Nearest sample, with u or v == 1.0 landing on the last texel
        i = min(int(u * self.width), self.width - 1)
        j = min(int(v * self.height), self.height - 1)

        pixel = self.data[j, i]
        return Color(float(pixel[0]) / 255.0, float(pixel[1]) / 255.0, float(pixel[2]) / 255.0)

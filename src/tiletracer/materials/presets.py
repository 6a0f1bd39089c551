# materials/presets.py
from tiletracer.core.vector import Color
from tiletracer.materials.metal import Metal
from tiletracer.materials.lambertian import Lambertian
from tiletracer.materials.dielectric import Dielectric
from tiletracer.materials.diffuse_light import DiffuseLight
from tiletracer.materials.textures import CheckerTexture

class MetalPresets:
    """Predefined metal materials."""

    @staticmethod
    def gold() -> Metal:
        return Metal(Color(1.0, 0.78, 0.34), fuzz=0.1)

    @staticmethod
    def silver() -> Metal:
        return Metal(Color(0.95, 0.93, 0.88), fuzz=0.05)

    @staticmethod
    def copper() -> Metal:
        return Metal(Color(0.95, 0.64, 0.54), fuzz=0.1)

    @staticmethod
    def brushed_brass() -> Metal:
        return Metal(Color(0.8, 0.6, 0.2), fuzz=0.7)

    @staticmethod
    def blue_mirror() -> Metal:
        return Metal(Color(0.2, 0.25, 0.7), fuzz=0.0)

class DielectricPresets:
    """Predefined dielectric materials with realistic refractive indices."""

    @staticmethod
    def glass() -> Dielectric:
        return Dielectric(1.52)

    @staticmethod
    def water() -> Dielectric:
        return Dielectric(1.33)

    @staticmethod
    def diamond() -> Dielectric:
        return Dielectric(2.42)

    @staticmethod
    def dense_flint() -> Dielectric:
        return Dielectric(1.7)

class LightPresets:
    """Predefined light sources with different colors and intensities."""

    @staticmethod
    def warm_light(intensity: float = 1.0) -> DiffuseLight:
        return DiffuseLight(Color(1.0, 0.95, 0.9) * intensity)

    @staticmethod
    def daylight(intensity: float = 1.0) -> DiffuseLight:
        return DiffuseLight(Color(1.0, 1.0, 1.0) * intensity)

class ColorPresets:
    """Common color presets for materials."""

    RED = Color(1.0, 0.0, 0.0)
    CLAY = Color(0.7, 0.3, 0.3)
    SLATE = Color(0.52, 0.59, 0.68)
    WHITE = Color(0.9, 0.9, 0.9)
    GRAY = Color(0.5, 0.5, 0.5)
    DARK_GREEN = Color(0.2, 0.3, 0.1)
    SKY = Color(0.5, 0.7, 1.0)

    @staticmethod
    def matte(color: Color) -> Lambertian:
        """Create a matte material with the given color."""
        return Lambertian(color)

class TexturePresets:
    """Predefined texture presets."""

    @staticmethod
    def checkerboard(odd: Color = None, even: Color = None) -> CheckerTexture:
        """Create a checkerboard texture with default or custom colors."""
        if odd is None:
            odd = ColorPresets.DARK_GREEN
        if even is None:
            even = ColorPresets.WHITE
        return CheckerTexture(odd, even)

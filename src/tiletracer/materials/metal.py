# materials/metal.py
import random
from typing import Tuple
from tiletracer.core.ray import Ray
from tiletracer.core.vector import Color
from tiletracer.core.utils import reflect, random_unit_vector
from tiletracer.geometry.hittable import HitRecord
from tiletracer.materials.material import Material

class Metal(Material):
    """
    Mirror-like material. ``fuzz`` (capped at 1) blurs the reflection;
    the albedo is a fixed color rather than a texture.
    """
    def __init__(self, albedo: Color, fuzz: float = 0.0):
        self.albedo = albedo
        self.fuzz = min(fuzz, 1)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng=random) -> Tuple[Ray, Color]:
        reflected = reflect(ray_in.direction.normalize(), rec.normal)
        scattered = Ray(rec.p, reflected + random_unit_vector(rng) * self.fuzz)
        return scattered, self.albedo

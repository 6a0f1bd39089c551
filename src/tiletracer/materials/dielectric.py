# materials/dielectric.py
import math
import random
from typing import Tuple
from tiletracer.core.ray import Ray
from tiletracer.core.vector import Color
from tiletracer.core.utils import reflect, refract, schlick
from tiletracer.geometry.hittable import HitRecord
from tiletracer.materials.material import Material

WHITE = Color(1.0, 1.0, 1.0)

class Dielectric(Material):
    """
    Clear refractive material such as glass or water.

    By default a ray refracts unless Snell's law has no solution, in which
    case it reflects. With ``fresnel=True`` the ray additionally reflects with
    the probability given by Schlick's approximation.
    """
    def __init__(self, ref_idx: float, fresnel: bool = False):
        self.ref_idx = ref_idx
        self.fresnel = fresnel

    def scatter(self, ray_in: Ray, rec: HitRecord, rng=random) -> Tuple[Ray, Color]:
        # Determine if we're entering or exiting the material
        refraction_ratio = 1.0 / self.ref_idx if rec.front_face else self.ref_idx

        unit_direction = ray_in.direction.normalize()
        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(1.0 - cos_theta * cos_theta)

        cannot_refract = refraction_ratio * sin_theta > 1.0
        if self.fresnel and not cannot_refract:
            cannot_refract = schlick(cos_theta, refraction_ratio) > rng.random()

        if cannot_refract:
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, refraction_ratio)

        return Ray(rec.p, direction), WHITE

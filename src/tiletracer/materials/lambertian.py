# materials/lambertian.py
import random
from typing import Tuple, Union
from tiletracer.core.ray import Ray
from tiletracer.core.vector import Color
from tiletracer.core.utils import random_unit_vector
from tiletracer.geometry.hittable import HitRecord
from tiletracer.materials.material import Material
from tiletracer.materials.textures import Texture, as_texture

class Lambertian(Material):
    """
    Lambertian diffuse material with optional texture support.
    """

    def __init__(self, albedo: Union[Color, Texture]):
        self.texture = as_texture(albedo)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng=random) -> Tuple[Ray, Color]:
        """
        Scatter a ray according to a Lambertian reflection model.
        Returns (scattered_ray, attenuation).
        """
        # Offsetting the normal by a random unit vector gives a cosine-weighted lobe.
        scatter_direction = rec.normal + random_unit_vector(rng)

        # If scatter_direction is degenerate (very small), just use the normal.
        if scatter_direction.near_zero():
            scatter_direction = rec.normal

        scattered = Ray(rec.p, scatter_direction)
        attenuation = self.texture.value(rec.u, rec.v, rec.p)
        return scattered, attenuation

# materials/material.py
import random
from typing import Optional, Tuple
from tiletracer.core.ray import Ray
from tiletracer.core.vector import Vector3, Color
from tiletracer.geometry.hittable import HitRecord

BLACK = Color(0.0, 0.0, 0.0)

class Material:
    """
    Abstract material class. Subclasses must implement scatter().
    """
    def scatter(self, ray_in: Ray, rec: HitRecord, rng=random) -> Optional[Tuple[Ray, Color]]:
        """
        Computes the scattered ray and attenuation.
        Returns a tuple (scattered_ray, attenuation) or None if the ray is absorbed.
        Stochastic materials draw their samples from ``rng``.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def emitted(self, u: float, v: float, p: Vector3) -> Color:
        """
        Radiance emitted by the surface. Only lights emit anything.
        """
        return BLACK

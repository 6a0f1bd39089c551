# geometry/sphere.py
import math
from typing import Optional
from tiletracer.core.vector import Vector3
from tiletracer.core.ray import Ray
from tiletracer.geometry.hittable import Hittable, HitRecord

class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.
    """
    def __init__(self, center: Vector3, radius: float, material):
        self.center = center
        self.radius = radius
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        oc = ray.origin - self.center
        a = ray.direction.dot(ray.direction)
        half_b = oc.dot(ray.direction)
        c = oc.dot(oc) - self.radius * self.radius
        discriminant = half_b * half_b - a * c

        # Tangent rays are treated as misses.
        if discriminant <= 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # Find the nearest root that lies in the acceptable range
        root = (-half_b - sqrt_disc) / a
        if root <= t_min or root >= t_max:
            root = (-half_b + sqrt_disc) / a
            if root <= t_min or root >= t_max:
                return None

        rec = HitRecord()
        rec.t = root
        rec.p = ray.at(rec.t)
        outward_normal = (rec.p - self.center) / self.radius
        rec.set_face_normal(ray, outward_normal)
        rec.material = self.material
        rec.u, rec.v = sphere_uv(rec.normal)
        return rec

    def __repr__(self) -> str:
        return f"Sphere({self.center!r}, {self.radius})"

def sphere_uv(n: Vector3):
    """
    Maps a unit direction to (u, v) in [0, 1]: u goes around the y axis
    starting from -x, v runs from y = -1 to y = +1.
    """
    theta = math.acos(max(-1.0, min(1.0, -n.y)))
    phi = math.atan2(-n.z, n.x) + math.pi
    return phi / (2 * math.pi), theta / math.pi

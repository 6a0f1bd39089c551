# geometry/plane.py
from typing import Optional
from tiletracer.core.vector import Vector3
from tiletracer.core.ray import Ray
from tiletracer.geometry.hittable import Hittable, HitRecord

class Plane(Hittable):
    """
    An infinite plane of points p with dot(normal, p) + offset == 0.
    The normal is expected to be unit length.
    """
    def __init__(self, normal: Vector3, offset: float, material):
        self.normal = normal
        self.offset = offset
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        denom = self.normal.dot(ray.direction)
        if denom == 0:
            return None

        t = (-self.offset - self.normal.dot(ray.origin)) / denom
        if t <= t_min or t >= t_max:
            return None

        rec = HitRecord()
        rec.t = t
        rec.p = ray.at(t)
        rec.set_face_normal(ray, self.normal)
        rec.material = self.material
        return rec

    def __repr__(self) -> str:
        return f"Plane({self.normal!r}, {self.offset})"

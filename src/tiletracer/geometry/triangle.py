# geometry/triangle.py
from typing import Optional
from tiletracer.core.vector import Vector3
from tiletracer.core.ray import Ray
from tiletracer.geometry.hittable import Hittable, HitRecord

class Triangle(Hittable):
    """
    A single flat triangle. Vertices must be wound consistently; the outward
    normal is cross(b - a, c - a). Triangles carry no texture coordinates.
    """
    def __init__(self, a: Vector3, b: Vector3, c: Vector3, material):
        self.a = a
        self.b = b
        self.c = c
        self.material = material
        self.normal = (b - a).cross(c - a).normalize()

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        n = self.normal

        # Intersect the supporting plane first
        denom = n.dot(ray.direction)
        if denom == 0:
            return None

        t = (n.dot(self.a) - n.dot(ray.origin)) / denom
        if t <= t_min or t >= t_max:
            return None

        # The point must lie on the inner side of all three edges
        q = ray.at(t)
        a, b, c = self.a, self.b, self.c
        if (b - a).cross(q - a).dot(n) < 0:
            return None
        if (q - a).cross(c - a).dot(n) < 0:
            return None
        if (c - b).cross(q - b).dot(n) < 0:
            return None

        rec = HitRecord()
        rec.t = t
        rec.p = q
        rec.set_face_normal(ray, n)
        rec.material = self.material
        return rec

    def __repr__(self) -> str:
        return f"Triangle({self.a!r}, {self.b!r}, {self.c!r})"

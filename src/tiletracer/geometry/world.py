# geometry/world.py
from typing import Optional, List
from tiletracer.config import EPSILON
from tiletracer.core.ray import Ray
from tiletracer.core.vector import Color
from tiletracer.geometry.hittable import Hittable, HitRecord

class World(Hittable):
    """
    An ordered list of Hittable objects plus the radiance seen by rays that
    escape the scene. Lookups are a plain linear scan; insertion order only
    decides ties between hits at exactly the same distance.
    """
    def __init__(self, background: Color = None):
        self.background = background if background is not None else Color(0.0, 0.0, 0.0)
        self.objects: List[Hittable] = []

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def clear(self):
        self.objects.clear()

    def __len__(self) -> int:
        return len(self.objects)

    def hit(self, ray: Ray, t_min: float = EPSILON, t_max: float = float("inf")) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

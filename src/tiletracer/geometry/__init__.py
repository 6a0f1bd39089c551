from tiletracer.geometry.hittable import Hittable, HitRecord
from tiletracer.geometry.plane import Plane
from tiletracer.geometry.sphere import Sphere
from tiletracer.geometry.triangle import Triangle
from tiletracer.geometry.world import World

__all__ = ["Hittable", "HitRecord", "Plane", "Sphere", "Triangle", "World"]

# geometry/hittable.py
from typing import Optional
from tiletracer.core.vector import Vector3
from tiletracer.core.ray import Ray

class HitRecord:
    """
    Records details of a ray-object intersection.

    Only meaningful when returned from a successful ``hit`` call; ``u`` and
    ``v`` stay at zero for surfaces without a parameterization.
    """
    __slots__ = ("p", "normal", "t", "front_face", "material", "u", "v")

    def __init__(self, p: Vector3 = None, normal: Vector3 = None,
                 t: float = 0, front_face: bool = True, material=None,
                 u: float = 0.0, v: float = 0.0):
        self.p = p              # Intersection point
        self.normal = normal    # Surface normal at intersection, facing the ray
        self.t = t              # Ray parameter at intersection
        self.front_face = front_face  # Whether the ray came from the outward side
        self.material = material
        self.u = u
        self.v = v

    def set_face_normal(self, ray: Ray, outward_normal: Vector3):
        """
        Ensures that the normal always points against the ray.
        """
        # Grazing rays (dot == 0) count as outside.
        self.front_face = ray.direction.dot(outward_normal) <= 0
        self.normal = outward_normal if self.front_face else -outward_normal

class Hittable:
    """
    Abstract class for objects that can be hit by a ray.

    Implementations accept only hits with ``t_min < t < t_max``. Degenerate
    shapes (zero radius, zero-area triangles) and zero-length ray directions
    are not validated; the result for them is undefined.
    """
    material = None

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        raise NotImplementedError("hit() must be implemented by subclasses.")

# camera/camera.py
import math
import random
from tiletracer.core.vector import Vector3, Point3
from tiletracer.core.ray import Ray
from tiletracer.core.utils import degrees_to_radians, random_in_unit_disk

class Camera:
    """
    A thin-lens camera looking from ``look_from`` towards ``look_at``.

    The focus plane passes through ``look_at``; an ``aperture`` of zero gives
    a pinhole camera with no defocus blur. The camera is not modified after
    construction, so one instance can be shared by every render thread.
    """
    def __init__(self, look_from: Point3, look_at: Point3, up: Vector3,
                 vfov: float, aspect_ratio: float, aperture: float = 0.0):
        self.origin = look_from
        self.vfov = vfov
        self.aspect_ratio = aspect_ratio
        self.lens_radius = aperture / 2.0

        # Compute viewport dimensions based on fov
        viewport_height = 2.0 * math.tan(degrees_to_radians(vfov) / 2.0)
        viewport_width = aspect_ratio * viewport_height

        # Orthonormal basis; w points backwards, away from the scene
        self.w = (look_from - look_at).normalize()
        self.u = up.cross(self.w).normalize()
        self.v = self.w.cross(self.u)

        # Scale by focus distance
        self.focus_dist = (look_from - look_at).length()
        self.horizontal = self.u * viewport_width * self.focus_dist
        self.vertical = self.v * viewport_height * self.focus_dist

        self.lower_left = (self.origin -
                           self.horizontal * 0.5 -
                           self.vertical * 0.5 -
                           self.w * self.focus_dist)

    def get_ray(self, s: float, t: float, rng=random) -> Ray:
        """
        Generates a ray through film coordinates (s, t) in [0, 1], with
        (0, 0) at the bottom-left corner. The direction is unit length.
        """
        rd = random_in_unit_disk(rng) * self.lens_radius
        offset = self.u * rd.x + self.v * rd.y

        ray_origin = self.origin + offset
        ray_direction = (self.lower_left +
                         self.horizontal * s +
                         self.vertical * t -
                         ray_origin)
        return Ray(ray_origin, ray_direction.normalize())

    def __repr__(self) -> str:
        return f"Camera(origin={self.origin!r}, vfov={self.vfov}, lens_radius={self.lens_radius})"

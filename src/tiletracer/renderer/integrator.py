# renderer/integrator.py
import random

from tiletracer.config import EPSILON
from tiletracer.core.ray import Ray
from tiletracer.core.vector import Color
from tiletracer.geometry.world import World

BLACK = Color(0.0, 0.0, 0.0)
INFINITY = float("inf")

def trace(world: World, ray: Ray, depth: int, rng=random) -> Color:
    """
    One-sample Monte Carlo estimate of the radiance arriving along ``ray``.

    Each bounce follows a single scattered ray; noise is only reduced by the
    caller averaging many samples per pixel. ``depth`` caps the number of
    bounces and a path that runs out of depth contributes nothing. Every
    random decision along the path is drawn from ``rng``.
    """
    if depth <= 0:
        return BLACK

    rec = world.hit(ray, EPSILON, INFINITY)
    if rec is None:
        return world.background

    emitted = rec.material.emitted(rec.u, rec.v, rec.p)
    scatter = rec.material.scatter(ray, rec, rng)
    if scatter is None:
        return emitted

    scattered, attenuation = scatter
    return emitted + attenuation * trace(world, scattered, depth - 1, rng)

"""Pytest configuration and shared fixtures."""

import random
import sys
from pathlib import Path

import pytest

# Allow running the suite from a checkout without installing the package
src_root = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_root))

from tiletracer.camera.camera import Camera
from tiletracer.core.vector import Vector3, Point3, Color
from tiletracer.geometry import Sphere, World
from tiletracer.materials.lambertian import Lambertian


@pytest.fixture(autouse=True)
def seeded_random():
    """Make every stochastic test reproducible."""
    random.seed(1234)
    yield


@pytest.fixture
def matte():
    return Lambertian(Color(0.5, 0.5, 0.5))


@pytest.fixture
def unit_sphere_world(matte):
    """A unit sphere at the origin under a sky-blue background."""
    world = World(background=Color(0.5, 0.7, 1.0))
    world.add(Sphere(Point3(0.0, 0.0, 0.0), 1.0, matte))
    return world


@pytest.fixture
def pinhole_camera():
    """Camera five units up the +z axis looking at the origin, no defocus."""
    return Camera(Point3(0.0, 0.0, 5.0), Point3(0.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0),
                  vfov=45.0, aspect_ratio=1.0, aperture=0.0)

import pytest

from tiletracer.camera.camera import Camera
from tiletracer.core.vector import Vector3, Point3


def test_basis_is_orthonormal():
    camera = Camera(Point3(3.0, 2.0, 4.0), Point3(0.0, 0.5, -1.0), Vector3(0.0, 1.0, 0.0),
                    vfov=60.0, aspect_ratio=1.5)
    for axis in (camera.u, camera.v, camera.w):
        assert axis.length() == pytest.approx(1.0)
    assert camera.u.dot(camera.v) == pytest.approx(0.0, abs=1e-12)
    assert camera.u.dot(camera.w) == pytest.approx(0.0, abs=1e-12)
    assert camera.v.dot(camera.w) == pytest.approx(0.0, abs=1e-12)


def test_viewport_scales_with_focus_distance():
    camera = Camera(Point3(0.0, 0.0, 5.0), Point3(0.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0),
                    vfov=90.0, aspect_ratio=2.0)
    # tan(45 deg) = 1 -> viewport 4 x 2 at unit distance, times 5
    assert camera.horizontal.length() == pytest.approx(20.0)
    assert camera.vertical.length() == pytest.approx(10.0)
    assert camera.lower_left.x == pytest.approx(-10.0)
    assert camera.lower_left.y == pytest.approx(-5.0)
    assert camera.lower_left.z == pytest.approx(0.0)


def test_center_ray_points_at_target(pinhole_camera):
    ray = pinhole_camera.get_ray(0.5, 0.5)
    assert ray.origin == Point3(0.0, 0.0, 5.0)
    assert ray.direction.x == pytest.approx(0.0)
    assert ray.direction.y == pytest.approx(0.0)
    assert ray.direction.z == pytest.approx(-1.0)


def test_corner_rays(pinhole_camera):
    bottom_left = pinhole_camera.get_ray(0.0, 0.0).direction
    top_right = pinhole_camera.get_ray(1.0, 1.0).direction
    assert bottom_left.x < 0 and bottom_left.y < 0
    assert top_right.x > 0 and top_right.y > 0
    assert bottom_left.length() == pytest.approx(1.0)


def test_defocus_rays_converge_on_focus_plane():
    look_from = Point3(0.0, 0.0, 5.0)
    camera = Camera(look_from, Point3(0.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0),
                    vfov=45.0, aspect_ratio=1.0, aperture=0.5)
    origins = set()
    for _ in range(50):
        ray = camera.get_ray(0.5, 0.5)
        offset = ray.origin - look_from
        assert offset.z == pytest.approx(0.0)
        assert offset.length() < camera.lens_radius
        origins.add((ray.origin.x, ray.origin.y))

        # Every ray through the film center crosses the look-at point
        focus_point = ray.at((Point3(0.0, 0.0, 0.0) - ray.origin).length())
        assert focus_point.x == pytest.approx(0.0, abs=1e-9)
        assert focus_point.y == pytest.approx(0.0, abs=1e-9)
        assert focus_point.z == pytest.approx(0.0, abs=1e-9)
    assert len(origins) > 1

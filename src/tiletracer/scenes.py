"""Ready-made scenes for the command line renderer."""

from typing import Callable, Dict, Optional, Tuple

from tiletracer.camera.camera import Camera
from tiletracer.core.vector import Vector3, Point3, Color
from tiletracer.geometry import Plane, Sphere, Triangle, World
from tiletracer.materials.diffuse_light import DiffuseLight
from tiletracer.materials.lambertian import Lambertian
from tiletracer.materials.metal import Metal
from tiletracer.materials.presets import (
    ColorPresets, DielectricPresets, LightPresets, MetalPresets, TexturePresets,
)
from tiletracer.materials.texture_loader import load_texture
from tiletracer.materials.textures import ImageTexture

UP = Vector3(0.0, 1.0, 0.0)


def default_scene(aspect_ratio: float) -> Tuple[World, Camera]:
    """Matte, metal and glass spheres on a slate ground under a blue sky."""
    world = World(background=ColorPresets.SKY)

    material_center = Lambertian(ColorPresets.CLAY)
    material_left = MetalPresets.brushed_brass()
    material_right = Metal(Color(0.8, 0.6, 0.2), fuzz=0.3)
    material_ground = Lambertian(ColorPresets.SLATE)
    material_from_behind = Lambertian(ColorPresets.RED)

    world.add(Sphere(Point3(0.0, 0.5, -1.0), 0.5, material_center))
    world.add(Sphere(Point3(-2.0, 0.5, 0.0), 0.5, material_left))
    world.add(Sphere(Point3(1.0, 0.5, 0.7), 0.5, material_right))
    world.add(Plane(Vector3(0.0, 1.0, 0.0), 0.0, material_ground))
    world.add(Sphere(Point3(2.5, 2.0, -3.0), 2.0, DielectricPresets.dense_flint()))
    world.add(Sphere(Point3(3.0, 0.5, -12.0), 0.5, material_from_behind))
    world.add(Sphere(Point3(7.0, 0.5, -20.0), 0.5, material_from_behind))
    world.add(Sphere(Point3(9.0, 0.5, -13.0), 0.5, material_from_behind))
    world.add(Sphere(Point3(-2.5, 2.0, -3.0), 2.0, MetalPresets.blue_mirror()))

    camera = Camera(Point3(0.0, 0.5, 1.5), Point3(0.0, 0.5, -1.0), UP,
                    vfov=90.0, aspect_ratio=aspect_ratio, aperture=0.2)
    return world, camera


def checker_scene(aspect_ratio: float) -> Tuple[World, Camera]:
    """A dim room lit by a glowing sphere over a checkered floor and a triangle."""
    world = World(background=Color(0.05, 0.05, 0.08))

    world.add(Plane(Vector3(0.0, 1.0, 0.0), 0.0, Lambertian(TexturePresets.checkerboard())))
    world.add(Triangle(Point3(-1.5, 0.0, -2.5), Point3(1.5, 0.0, -2.5), Point3(0.0, 2.2, -2.5),
                       Lambertian(ColorPresets.CLAY)))
    world.add(Sphere(Point3(0.0, 3.5, -1.0), 1.0, LightPresets.warm_light(4.0)))
    world.add(Sphere(Point3(-1.6, 0.6, -1.0), 0.6, DielectricPresets.glass()))
    world.add(Sphere(Point3(1.6, 0.6, -1.0), 0.6, MetalPresets.silver()))

    camera = Camera(Point3(0.0, 1.2, 3.0), Point3(0.0, 0.8, -1.0), UP,
                    vfov=60.0, aspect_ratio=aspect_ratio, aperture=0.0)
    return world, camera


def textured_scene(aspect_ratio: float, texture_path: Optional[str] = None) -> Tuple[World, Camera]:
    """
    An image-textured globe next to a light panel. Without a texture path the
    globe shows the debug color of an empty image texture.
    """
    world = World(background=Color(0.7, 0.8, 1.0))

    if texture_path:
        texture = load_texture(texture_path)
    else:
        texture = ImageTexture(None)

    world.add(Sphere(Point3(0.0, 1.0, 0.0), 1.0, Lambertian(texture)))
    world.add(Plane(Vector3(0.0, 1.0, 0.0), 0.0, Lambertian(ColorPresets.GRAY)))
    world.add(Triangle(Point3(2.0, 0.0, -1.0), Point3(2.0, 0.0, 1.0), Point3(2.0, 2.5, 0.0),
                       DiffuseLight(Color(2.0, 2.0, 2.0))))

    camera = Camera(Point3(0.0, 1.5, 4.0), Point3(0.0, 1.0, 0.0), UP,
                    vfov=40.0, aspect_ratio=aspect_ratio, aperture=0.05)
    return world, camera


SCENES: Dict[str, Callable[..., Tuple[World, Camera]]] = {
    "default": default_scene,
    "checker": checker_scene,
    "textured": textured_scene,
}

# scenes/demo.py
"""
Ready-made scenes. Each builder returns a Scene holding the finished World
and the viewpoint it is meant to be seen from.
"""
import logging
from typing import Callable, Dict, NamedTuple

from camera.camera import Camera
from core.vector import Point3, Vector3
from geometry.sphere import Sphere
from geometry.world import HittableList, World
from materials.presets import ColorPresets, DielectricPresets, MetalPresets

logger = logging.getLogger(__name__)

class Scene(NamedTuple):
    world: World
    look_from: Point3
    look_at: Point3
    vup: Vector3 = Vector3(0.0, 1.0, 0.0)
    vfov: float = 90.0
    aperture: float = 0.0
    focus_dist: float = 1.0

    def make_camera(self, aspect_ratio: float) -> Camera:
        return Camera(self.look_from, self.look_at, self.vup, self.vfov,
                      aspect_ratio, self.aperture, self.focus_dist)

def three_spheres_scene(rng=None) -> Scene:
    """
    Ground plane sphere with a diffuse, a glass and a metal sphere in a row.
    """
    objects = HittableList()
    objects.add(Sphere(Point3(0.0, -100.5, -1.0), 100.0, ColorPresets.matte(ColorPresets.GROUND)))
    objects.add(Sphere(Point3(0.0, 0.0, -1.0), 0.5, ColorPresets.matte(ColorPresets.BLUE)))
    objects.add(Sphere(Point3(-1.0, 0.0, -1.0), 0.5, DielectricPresets.glass()))
    objects.add(Sphere(Point3(1.0, 0.0, -1.0), 0.5, MetalPresets.brass()))

    look_from = Point3(3.0, 3.0, 2.0)
    look_at = Point3(0.0, 0.0, -1.0)
    return Scene(objects.build(), look_from, look_at, vfov=20.0, aperture=0.5,
                 focus_dist=(look_from - look_at).length())

def random_spheres_scene(rng) -> Scene:
    """
    Large field of small random spheres around three big feature spheres.
    Scene layout depends on rng, so a seeded source gives a fixed scene.
    """
    objects = HittableList()
    objects.add(Sphere(Point3(0.0, -1000.0, 0.0), 1000.0, ColorPresets.matte(ColorPresets.GRAY)))

    landmark = Point3(4.0, 0.2, 0.0)
    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.uniform(0.0, 1.0)
            center = Point3(a + 0.9 * rng.uniform(0.0, 1.0), 0.2, b + 0.9 * rng.uniform(0.0, 1.0))
            if (center - landmark).length() <= 0.9:
                continue

            if choose_mat < 0.8:
                material = ColorPresets.random_matte(rng)
            elif choose_mat < 0.95:
                material = MetalPresets.random_metal(rng)
            else:
                material = DielectricPresets.glass()
            objects.add(Sphere(center, 0.2, material))

    objects.add(Sphere(Point3(0.0, 1.0, 0.0), 1.0, DielectricPresets.glass()))
    objects.add(Sphere(Point3(-4.0, 1.0, 0.0), 1.0, ColorPresets.matte(ColorPresets.BROWN)))
    objects.add(Sphere(Point3(4.0, 1.0, 0.0), 1.0, MetalPresets.mirror()))
    logger.debug("Random scene built with %d spheres", len(objects))

    return Scene(objects.build(), Point3(13.0, 2.0, 3.0), Point3(0.0, 0.0, 0.0),
                 vfov=20.0, aperture=0.1, focus_dist=10.0)

SCENES: Dict[str, Callable[..., Scene]] = {
    "three_spheres": three_spheres_scene,
    "random": random_spheres_scene,
}

def build_scene(name: str, rng) -> Scene:
    if name not in SCENES:
        valid = ", ".join(sorted(SCENES))
        raise ValueError(f"Unknown scene '{name}' (expected one of {valid})")
    return SCENES[name](rng)

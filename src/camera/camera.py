# camera/camera.py
import math
from core.vector import Point3, Vector3
from core.ray import Ray
from core.utils import random_in_unit_disk

class Camera:
    """
    Thin-lens perspective camera positioned with look-from / look-at.

    All geometry is derived once in the constructor; new_ray() only reads it.
    """
    def __init__(self, look_from: Point3, look_at: Point3, vup: Vector3,
                 vfov: float, aspect_ratio: float,
                 aperture: float = 0.0, focus_dist: float = 1.0):
        self.vfov = vfov                  # Vertical field of view in degrees
        self.aspect_ratio = aspect_ratio
        self.aperture = aperture          # Lens diameter
        self.focus_dist = focus_dist      # Distance to the plane in focus
        self.lens_radius = aperture / 2.0

        theta = math.radians(vfov)
        h = math.tan(theta / 2)
        viewport_height = 2.0 * h
        viewport_width = aspect_ratio * viewport_height

        # w points backwards (from the target to the eye), u right, v up.
        self.w = (look_from - look_at).normalize()
        self.u = vup.cross(self.w).normalize()
        self.v = self.w.cross(self.u)

        self.origin = look_from
        self.horizontal = self.u * (viewport_width * focus_dist)
        self.vertical = self.v * (viewport_height * focus_dist)
        self.lower_left_corner = (self.origin -
                                  self.horizontal * 0.5 -
                                  self.vertical * 0.5 -
                                  self.w * focus_dist)

    def new_ray(self, s: float, t: float, rng) -> Ray:
        """
        Generates a ray through viewport coordinates (s, t), where (0, 0) is
        the lower-left corner. The origin is jittered across the lens.
        """
        rd = random_in_unit_disk(rng) * self.lens_radius
        offset = self.u * rd.x + self.v * rd.y

        ray_origin = self.origin + offset
        ray_direction = (self.lower_left_corner +
                         self.horizontal * s +
                         self.vertical * t -
                         ray_origin)
        return Ray(ray_origin, ray_direction)

    def __repr__(self) -> str:
        return (f"Camera(origin={self.origin!r}, vfov={self.vfov}, "
                f"aspect_ratio={self.aspect_ratio}, aperture={self.aperture}, "
                f"focus_dist={self.focus_dist})")

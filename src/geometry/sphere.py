# geometry/sphere.py
import math
from typing import Optional
from core.vector import Point3
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord

class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.
    """
    __slots__ = ("center", "radius", "material")

    def __init__(self, center: Point3, radius: float, material):
        self.center = center
        self.radius = radius
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        oc = ray.origin - self.center
        a = ray.direction.length_squared()
        half_b = oc.dot(ray.direction)
        c = oc.length_squared() - self.radius * self.radius
        discriminant = half_b * half_b - a * c

        if discriminant <= 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # The near root comes first so the closer intersection wins when
        # both are in range.
        for root in ((-half_b - sqrt_disc) / a, (-half_b + sqrt_disc) / a):
            if t_min < root < t_max:
                p = ray.at(root)
                outward_normal = (p - self.center) / self.radius
                return HitRecord.from_outward_normal(
                    ray, p, root, outward_normal, self.material)
        return None

    def __repr__(self) -> str:
        return (f"Sphere(center={self.center!r}, radius={self.radius}, "
                f"material={self.material!r})")

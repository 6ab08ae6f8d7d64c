# materials/metal.py
from dataclasses import dataclass
from typing import Optional
from core.color import Color
from core.ray import Ray
from core.utils import reflect, random_in_unit_sphere
from geometry.hittable import HitRecord
from materials.material import Material, ScatterResult

@dataclass(frozen=True)
class Metal(Material):
    """
    Metal material with reflective properties.

    fuzz in [0, 1] scales a random perturbation of the mirror direction;
    0 is a perfect mirror.
    """
    albedo: Color
    fuzz: float = 0.0

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[ScatterResult]:
        reflected = reflect(ray_in.direction.normalize(), rec.normal)
        direction = reflected + random_in_unit_sphere(rng) * self.fuzz

        if direction.dot(rec.normal) > 0:
            return ScatterResult(Ray(rec.p, direction), self.albedo)

        return None  # Fuzzed into the surface: absorbed.

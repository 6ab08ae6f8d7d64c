# materials/lambertian.py
from dataclasses import dataclass
from core.color import Color
from core.ray import Ray
from core.utils import random_in_hemisphere
from geometry.hittable import HitRecord
from materials.material import Material, ScatterResult

@dataclass(frozen=True)
class Lambertian(Material):
    """
    Lambertian diffuse material. Always scatters.
    """
    albedo: Color

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> ScatterResult:
        # Offset the normal by a random direction from the same hemisphere.
        scatter_direction = rec.normal + random_in_hemisphere(rng, rec.normal)
        return ScatterResult(Ray(rec.p, scatter_direction), self.albedo)

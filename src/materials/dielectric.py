# materials/dielectric.py
import math
from dataclasses import dataclass
from core.color import WHITE
from core.ray import Ray
from core.utils import reflect, refract, schlick
from geometry.hittable import HitRecord
from materials.material import Material, ScatterResult

@dataclass(frozen=True)
class Dielectric(Material):
    """
    Clear refractive material (glass, water, ...). Never absorbs and adds no
    color; each hit either reflects or refracts.
    """
    ref_idx: float

    def refraction_ratio(self, front_face: bool) -> float:
        # Entering the material from outside vs. leaving it.
        return 1.0 / self.ref_idx if front_face else self.ref_idx

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> ScatterResult:
        ni_over_nt = self.refraction_ratio(rec.front_face)
        unit_direction = ray_in.direction.normalize()

        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(1.0 - cos_theta * cos_theta)

        cannot_refract = ni_over_nt * sin_theta > 1.0
        if cannot_refract or rng.uniform(0.0, 1.0) < schlick(cos_theta, ni_over_nt):
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, ni_over_nt)

        return ScatterResult(Ray(rec.p, direction), WHITE)

# materials/material.py
from typing import NamedTuple, Optional
from core.color import Color
from core.ray import Ray
from geometry.hittable import HitRecord

class ScatterResult(NamedTuple):
    """A scattered ray and the color it is attenuated by."""
    scattered: Ray
    attenuation: Color

class Material:
    """
    Abstract material class. Subclasses must implement scatter().

    The set of materials is closed: Lambertian, Metal and Dielectric.
    """
    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[ScatterResult]:
        """
        Computes the scattered ray and attenuation.
        Returns a ScatterResult, or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

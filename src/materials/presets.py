# materials/presets.py
from core.color import Color
from materials.metal import Metal
from materials.lambertian import Lambertian
from materials.dielectric import Dielectric

class MetalPresets:
    """Named metals used by the demo scenes."""

    @staticmethod
    def brass() -> Metal:
        return Metal(Color(0.8, 0.6, 0.2), fuzz=0.0)

    @staticmethod
    def mirror() -> Metal:
        return Metal(Color(0.7, 0.6, 0.5), fuzz=0.0)

    @staticmethod
    def random_metal(rng) -> Metal:
        """Bright tinted metal with up to 0.5 fuzz."""
        albedo = Color(rng.uniform(0.5, 1.0), rng.uniform(0.5, 1.0), rng.uniform(0.5, 1.0))
        return Metal(albedo, fuzz=rng.uniform(0.0, 0.5))

class DielectricPresets:
    @staticmethod
    def glass() -> Dielectric:
        return Dielectric(1.5)

class ColorPresets:
    """Albedos shared between scenes."""

    GROUND = Color(0.8, 0.8, 0.0)
    GRAY = Color(0.5, 0.5, 0.5)
    BLUE = Color(0.1, 0.2, 0.5)
    BROWN = Color(0.4, 0.2, 0.1)

    @staticmethod
    def matte(color: Color) -> Lambertian:
        return Lambertian(color)

    @staticmethod
    def random_matte(rng) -> Lambertian:
        """Product of two random colors, biased towards darker albedos."""
        a = Color(rng.uniform(0.0, 1.0), rng.uniform(0.0, 1.0), rng.uniform(0.0, 1.0))
        b = Color(rng.uniform(0.0, 1.0), rng.uniform(0.0, 1.0), rng.uniform(0.0, 1.0))
        return Lambertian(a * b)

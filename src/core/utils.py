# core/utils.py
"""
Sampling and optics helpers.

Every sampling function takes the random source explicitly. Any object with
a ``uniform(lo, hi)`` method returning a float in [lo, hi) will do, which
includes ``random.Random`` and ``numpy.random.Generator``.
"""
import math
from core.vector import Vector3

def random_in_unit_sphere(rng) -> Vector3:
    """
    Returns a random point inside a unit sphere.
    """
    while True:
        p = Vector3(rng.uniform(-1, 1),
                    rng.uniform(-1, 1),
                    rng.uniform(-1, 1))
        if p.dot(p) < 1.0:
            return p

def random_unit_vector(rng) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).

    Draws an azimuth and a height; this always costs exactly two samples.
    """
    a = rng.uniform(0.0, 2.0 * math.pi)
    z = rng.uniform(-1.0, 1.0)
    r = math.sqrt(1.0 - z * z)
    return Vector3(r * math.cos(a), r * math.sin(a), z)

def random_in_hemisphere(rng, normal: Vector3) -> Vector3:
    """
    Returns a random unit vector in the hemisphere around normal.
    """
    on_sphere = random_unit_vector(rng)
    if on_sphere.dot(normal) > 0.0:
        return on_sphere
    return -on_sphere

def random_in_unit_disk(rng) -> Vector3:
    """Random point in the unit disk (z = 0), used for the camera lens."""
    while True:
        p = Vector3(rng.uniform(-1, 1),
                    rng.uniform(-1, 1),
                    0.0)
        if p.dot(p) < 1.0:
            return p

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)

def refract(uv: Vector3, n: Vector3, etai_over_etat: float) -> Vector3:
    """
    Refracts the unit vector uv through a surface with unit normal n using
    Snell's law, split into parts perpendicular and parallel to n.
    """
    cos_theta = min(-uv.dot(n), 1.0)
    r_out_perp = (uv + n * cos_theta) * etai_over_etat
    r_out_parallel = n * -math.sqrt(abs(1.0 - r_out_perp.length_squared()))
    return r_out_perp + r_out_parallel

def schlick(cosine: float, ref_idx: float) -> float:
    """Schlick's approximation of Fresnel reflectance."""
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow(1.0 - cosine, 5)

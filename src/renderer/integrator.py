# renderer/integrator.py
"""
Color integrator: follows a camera ray through the scene, multiplying the
attenuation of every bounce, until the ray reaches the sky, is absorbed or
runs out of depth.
"""
from core.color import BLACK, SKY_BLUE, WHITE, Color
from core.ray import Ray
from geometry.hittable import Hittable

# Ignore hits this close to the ray origin (avoids shadow acne).
T_MIN = 0.001
T_MAX = float("inf")

def background(ray: Ray) -> Color:
    """
    Vertical white-to-blue sky gradient.
    """
    unit_direction = ray.direction.normalize()
    t = 0.5 * (unit_direction.y + 1.0)
    return WHITE * (1.0 - t) + SKY_BLUE * t

def ray_color(ray: Ray, world: Hittable, depth: int, rng) -> Color:
    """
    Returns the color seen along the ray.

    Equivalent to recursing ``attenuation * ray_color(scattered, depth - 1)``
    at every bounce, written as a loop so deep paths do not grow the stack.
    """
    throughput = WHITE
    while depth > 0:
        rec = world.hit(ray, T_MIN, T_MAX)
        if rec is None:
            return throughput * background(ray)

        scatter_result = rec.material.scatter(ray, rec, rng)
        if scatter_result is None:
            return BLACK

        ray, attenuation = scatter_result
        throughput = throughput * attenuation
        depth -= 1

    return BLACK  # Exceeded recursion depth.

# geometry/hittable.py
from typing import Optional
from core.vector import Point3, Vector3
from core.ray import Ray

class HitRecord:
    """
    Records details of a ray-object intersection.

    The normal always points against the incoming ray; front_face tells
    whether the outward normal already did so or had to be flipped.
    """
    __slots__ = ("p", "normal", "t", "front_face", "material")

    def __init__(self, p: Point3, normal: Vector3, t: float,
                 front_face: bool, material):
        self.p = p              # Intersection point
        self.normal = normal    # Unit normal, facing the ray
        self.t = t              # Ray parameter at intersection
        self.front_face = front_face
        self.material = material

    @classmethod
    def from_outward_normal(cls, ray: Ray, p: Point3, t: float,
                            outward_normal: Vector3, material) -> "HitRecord":
        """
        Builds a record whose normal is oriented against the ray.
        """
        front_face = ray.direction.dot(outward_normal) < 0
        normal = outward_normal if front_face else -outward_normal
        return cls(p, normal, t, front_face, material)

    def __repr__(self) -> str:
        return (f"HitRecord(p={self.p!r}, normal={self.normal!r}, t={self.t}, "
                f"front_face={self.front_face}, material={self.material!r})")

class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        raise NotImplementedError("hit() must be implemented by subclasses.")

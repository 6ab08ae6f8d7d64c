# geometry/world.py
from typing import Iterable, Iterator, List, Optional, Tuple
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord

class World(Hittable):
    """
    Immutable snapshot of the scene used while rendering. Objects are kept
    in insertion order and scanned linearly.
    """
    __slots__ = ("_objects",)

    def __init__(self, objects: Iterable[Hittable] = ()):
        self._objects: Tuple[Hittable, ...] = tuple(objects)

    @property
    def objects(self) -> Tuple[Hittable, ...]:
        return self._objects

    def __len__(self) -> int:
        return len(self._objects)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self._objects)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = t_max
        for obj in self._objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

    def __repr__(self) -> str:
        return f"World({len(self._objects)} objects)"

class HittableList:
    """
    Collects objects while a scene is being built. Call build() to get the
    World that the renderer reads from.
    """
    def __init__(self):
        self.objects: List[Hittable] = []

    def add(self, obj: Hittable) -> "HittableList":
        self.objects.append(obj)
        return self

    def extend(self, objs: Iterable[Hittable]) -> "HittableList":
        self.objects.extend(objs)
        return self

    def clear(self):
        self.objects.clear()

    def __len__(self) -> int:
        return len(self.objects)

    def build(self) -> World:
        return World(self.objects)

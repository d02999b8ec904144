# geometry/world.py
from typing import Iterator, List, Optional

from pathtracer.core.ray import Ray
from pathtracer.geometry.hittable import HitRecord, Hittable


class HittableList(Hittable):
    """
    An ordered list of Hittable objects queried for the closest hit.
    Built once before rendering and only read afterwards, so worker
    threads can share it without locking.
    """
    def __init__(self, objects: Optional[List[Hittable]] = None):
        self.objects: List[Hittable] = list(objects) if objects else []

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self.objects)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            # Shrinking t_max means a later object only wins if strictly closer.
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

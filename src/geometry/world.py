# src/geometry/world.py
from typing import Optional, List
from geometry.hittable import Hittable, HitRecord
from core.interval import Interval
from core.ray import Ray

class HittableList(Hittable):
    """
    A list of Hittable objects, scanned linearly for the closest hit.
    """
    def __init__(self):
        self.objects: List[Hittable] = []

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def clear(self):
        self.objects.clear()

    def __len__(self) -> int:
        return len(self.objects)

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = ray_t.max
        for obj in self.objects:
            rec = obj.hit(ray, Interval(ray_t.min, closest_so_far))
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

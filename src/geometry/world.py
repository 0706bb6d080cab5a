# src/geometry/world.py
from geometry.hittable import Hittable, HitRecord
from geometry.bvh import build_bvh
from core.aabb import AABB
from typing import Optional, List
from core.ray import Ray

class HittableList(Hittable):
    """
    A flat list of Hittable objects, scanned linearly.

    Used directly for small scenes and as the input to build_bvh().
    """
    def __init__(self, objects: Optional[List[Hittable]] = None):
        self.objects: List[Hittable] = list(objects) if objects else []

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def extend(self, objs):
        self.objects.extend(objs)

    def clear(self):
        self.objects.clear()

    def __len__(self) -> int:
        return len(self.objects)

    def build_bvh(self, rng=None) -> Hittable:
        """
        Returns a BVH root over the current objects (the list is left as is).
        """
        return build_bvh(self.objects, rng)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

    def bounding_box(self) -> Optional[AABB]:
        if not self.objects:
            return None
        out = None
        for obj in self.objects:
            box = obj.bounding_box()
            if box is None:
                return None
            out = box if out is None else AABB.surrounding_box(out, box)
        return out

# src/core/aabb.py
import math
from core.vector import Vector3

class AABB:
    """
    Closed axis-aligned box between two corner points.

    Zero-thickness boxes are allowed (a flat slab along one axis).
    """
    __slots__ = ("minimum", "maximum")

    def __init__(self, minimum: Vector3, maximum: Vector3):
        self.minimum = minimum
        self.maximum = maximum

    def hit(self, ray, t_min: float, t_max: float) -> bool:
        # Slab method: for each axis, find intersection intervals.
        for a in range(3):
            d = ray.direction[a]
            # A zero component means the ray runs parallel to the slab. IEEE
            # rules then decide: +-inf for an outside origin, NaN (never
            # narrowing the interval) for an origin on the slab plane.
            invD = 1.0 / d if d != 0.0 else math.copysign(math.inf, d)
            o = ray.origin[a]
            t0 = (self.minimum[a] - o) * invD
            t1 = (self.maximum[a] - o) * invD
            if invD < 0:
                t0, t1 = t1, t0
            t_min = t0 if t0 > t_min else t_min
            t_max = t1 if t1 < t_max else t_max
            if t_max <= t_min:
                return False
        return True

    def axis_min(self, axis: int) -> float:
        return self.minimum[axis]

    def extent(self) -> Vector3:
        return self.maximum - self.minimum

    def longest_axis(self) -> int:
        d = self.extent()
        if d.x >= d.y and d.x >= d.z:
            return 0
        return 1 if d.y >= d.z else 2

    def contains(self, point: Vector3) -> bool:
        return all(self.minimum[a] <= point[a] <= self.maximum[a] for a in range(3))

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        small = Vector3(
            min(box0.minimum.x, box1.minimum.x),
            min(box0.minimum.y, box1.minimum.y),
            min(box0.minimum.z, box1.minimum.z)
        )
        big = Vector3(
            max(box0.maximum.x, box1.maximum.x),
            max(box0.maximum.y, box1.maximum.y),
            max(box0.maximum.z, box1.maximum.z)
        )
        return AABB(small, big)

    union = surrounding_box

    def __repr__(self) -> str:
        return f"AABB({self.minimum!r}, {self.maximum!r})"

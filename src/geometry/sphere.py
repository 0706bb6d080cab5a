# geometry/sphere.py
import math
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from core.uv import UV
from geometry.hittable import Hittable, HitRecord
from core.aabb import AABB

class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.

    A negative radius keeps the same surface but turns the outward normal
    inwards, which is how hollow glass shells are modelled. The material
    is shared by reference and may be None for geometry-only queries.
    """
    def __init__(self, center: Vector3, radius: float, material = None):
        self.center = center
        self.radius = radius
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        # A point sphere or a zero-length ray has no usable surface hit
        if self.radius == 0:
            return None
        oc = ray.origin - self.center
        a = ray.direction.length_squared()
        if a == 0:
            return None
        half_b = oc.dot(ray.direction)
        c = oc.length_squared() - self.radius * self.radius
        discriminant = half_b * half_b - a * c

        if discriminant < 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # Find the nearest root that lies in the acceptable range
        root = (-half_b - sqrt_disc) / a
        if root <= t_min or root >= t_max:
            root = (-half_b + sqrt_disc) / a
            if root <= t_min or root >= t_max:
                return None

        rec = HitRecord()
        rec.t = root
        rec.p = ray.at(rec.t)
        outward_normal = (rec.p - self.center) / self.radius
        rec.set_face_normal(ray, outward_normal)
        rec.uv = sphere_uv((rec.p - self.center) / abs(self.radius))
        rec.material = self.material
        return rec

    def bounding_box(self) -> AABB:
        # The bounding box of a sphere is center +- |radius|
        r = abs(self.radius)
        offset = Vector3(r, r, r)
        return AABB(self.center - offset, self.center + offset)

    def __repr__(self) -> str:
        return f"Sphere({self.center!r}, {self.radius})"

def sphere_uv(n: Vector3) -> UV:
    """
    Maps a point on the unit sphere to (u, v).

    u is the angle around the y axis measured from x = -1, v the angle
    from y = -1 up to y = +1, both normalised to [0, 1].
    """
    theta = math.acos(max(-1.0, min(1.0, -n.y)))
    phi = math.atan2(-n.z, n.x) + math.pi
    return UV(phi / (2 * math.pi), theta / math.pi)

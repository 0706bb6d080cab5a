from geometry.hittable import Hittable, HitRecord
from geometry.sphere import Sphere
from geometry.bvh import BVHNode, BVHBuildError, build_bvh
from geometry.world import HittableList

__all__ = [
    "Hittable",
    "HitRecord",
    "Sphere",
    "BVHNode",
    "BVHBuildError",
    "build_bvh",
    "HittableList",
]

# src/geometry/bvh.py
import logging
from typing import List, Optional
from core.aabb import AABB
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord

logger = logging.getLogger(__name__)

class BVHBuildError(ValueError):
    """
    Raised when a BVH cannot be built, e.g. an object has no bounding box.
    """

class BVHNode(Hittable):
    """
    Internal node of a bounding volume hierarchy.

    A node owns its two children and the union of their boxes. `right` is
    None only when a single object was handed to build_bvh; a missing child
    never produces a hit.
    """
    __slots__ = ("left", "right", "box")

    def __init__(self, left: Hittable, right: Optional[Hittable], box: AABB):
        self.left = left
        self.right = right
        self.box = box

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        if not self.box.hit(ray, t_min, t_max):
            return None

        hit_left = self.left.hit(ray, t_min, t_max) if self.left is not None else None

        # Anything found on the right must be closer than the left hit to count
        if hit_left is not None:
            t_max = hit_left.t

        hit_right = self.right.hit(ray, t_min, t_max) if self.right is not None else None

        return hit_right if hit_right is not None else hit_left

    def bounding_box(self) -> AABB:
        return self.box

    def children(self):
        return [c for c in (self.left, self.right) if c is not None]

def build_bvh(objects: List[Hittable], rng=None) -> Hittable:
    """
    Builds a BVH over `objects` and returns its root node.

    With an `rng` the split axis is drawn uniformly at random at every level;
    without one the longest axis of the node's bounds is used, which makes
    the tree a pure function of the input order.

    Raises BVHBuildError if `objects` is empty or any object is unbounded.
    The input list is not modified.
    """
    if len(objects) == 0:
        raise BVHBuildError("cannot build a BVH over an empty object list")

    boxed = []
    for obj in objects:
        box = obj.bounding_box()
        if box is None:
            raise BVHBuildError(f"object {obj!r} has no bounding box")
        boxed.append((obj, box))

    if len(boxed) == 1:
        obj, box = boxed[0]
        root = BVHNode(obj, None, box)
    else:
        root, _ = _build(boxed, rng)

    logger.debug("BVH built over %d objects: %d nodes, depth %d",
                 len(objects), node_count(root), depth(root))
    return root

def _build(boxed, rng):
    """
    Returns (node, box) for a non-empty list of (object, box) pairs.
    """
    if len(boxed) == 1:
        # A single object is its own leaf, no wrapper node.
        return boxed[0]

    axis = _choose_axis(boxed, rng)
    key = lambda item: item[1].axis_min(axis)

    if len(boxed) == 2:
        a, b = boxed
        left, right = (a, b) if key(a) <= key(b) else (b, a)
    else:
        # Stable sort: ties keep their input order.
        ordered = sorted(boxed, key=key)
        mid = len(ordered) // 2
        left = _build(ordered[:mid], rng)
        right = _build(ordered[mid:], rng)

    box = AABB.surrounding_box(left[1], right[1])
    return BVHNode(left[0], right[0], box), box

def _choose_axis(boxed, rng) -> int:
    if rng is not None:
        return rng.randint(0, 2)
    bounds = boxed[0][1]
    for _, box in boxed[1:]:
        bounds = AABB.surrounding_box(bounds, box)
    return bounds.longest_axis()

def node_count(node) -> int:
    if not isinstance(node, BVHNode):
        return 0
    return 1 + sum(node_count(c) for c in node.children())

def depth(node) -> int:
    if not isinstance(node, BVHNode):
        return 0
    return 1 + max(depth(c) for c in node.children())

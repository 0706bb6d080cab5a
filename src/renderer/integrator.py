# renderer/integrator.py
"""
Recursive path integrator.

trace() is a one-sample Monte Carlo estimate of the radiance arriving along
a ray. It has no side effects beyond drawing from the rng it is given, so it
can run concurrently over one shared, immutable scene.
"""
import math
from core.ray import Ray
from core.vector import Vector3

BLACK = Vector3(0.0, 0.0, 0.0)

# Offset that keeps scattered rays from re-hitting their own surface
T_MIN = 0.001

class SkyBackground:
    """
    Vertical gradient between `bottom` and `top` driven by the ray's unit y.
    """
    def __init__(self, bottom: Vector3 = None, top: Vector3 = None):
        self.bottom = bottom if bottom is not None else Vector3(1.0, 1.0, 1.0)
        self.top = top if top is not None else Vector3(0.5, 0.7, 1.0)

    def __call__(self, ray: Ray) -> Vector3:
        unit_direction = ray.direction.normalize()
        t = 0.5 * (unit_direction.y + 1.0)
        return self.bottom * (1.0 - t) + self.top * t

class SolidBackground:
    """Same color in every direction, e.g. black for scenes lit by lights."""
    def __init__(self, color: Vector3):
        self.color = color

    def __call__(self, ray: Ray) -> Vector3:
        return self.color

SKY = SkyBackground()

def trace(ray: Ray, world, rng, max_depth: int, background=SKY,
          debug_normals: bool = False) -> Vector3:
    """
    Returns the color carried back along `ray`.

    Args:
        ray: The ray to follow.
        world: Any Hittable (a BVH root or a flat HittableList).
        rng: Per-task random generator consumed by the materials.
        max_depth: Remaining bounces; at 0 the path contributes black.
        background: Callable mapping a missed ray to a color.
        debug_normals: Shade hits without a material by their normal
            instead of treating them as absorbing.
    """
    if max_depth <= 0:
        return BLACK

    rec = world.hit(ray, T_MIN, math.inf)
    if rec is None:
        return background(ray)

    material = rec.material
    if material is None:
        if debug_normals:
            return (rec.normal + Vector3(1.0, 1.0, 1.0)) * 0.5
        return BLACK

    scattered = material.scatter(ray, rec, rng)
    if scattered is None:
        return material.emitted(rec.uv.u, rec.uv.v, rec.p)

    scattered_ray, attenuation = scattered
    return attenuation * trace(scattered_ray, world, rng, max_depth - 1,
                               background, debug_normals)

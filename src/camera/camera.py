# camera/camera.py
import math
from core.vector import Vector3
from core.ray import Ray
from core.utils import random_in_unit_disk

class Camera:
    """
    Thin-lens camera looking from `look_from` towards `look_at`.

    vfov is the vertical field of view in degrees. With a zero aperture the
    camera is a pinhole; otherwise rays start on a lens disk of radius
    aperture / 2 and converge on the plane at focus_dist.
    """
    def __init__(self, look_from: Vector3, look_at: Vector3, vup: Vector3 = None,
                 vfov: float = 40.0, aspect_ratio: float = 16.0 / 9.0,
                 aperture: float = 0.0, focus_dist: float = 10.0):
        self.look_from = look_from
        self.look_at = look_at
        self.vup = vup if vup is not None else Vector3(0, 1, 0)
        self.vfov = vfov
        self.aspect_ratio = aspect_ratio
        self.aperture = aperture  # Lens aperture for depth of field
        self.focus_dist = focus_dist  # Distance to focus plane
        self.lens_radius = aperture / 2.0
        self.update_camera()

    def update_camera(self):
        """Updates the camera's basis vectors and viewport."""
        theta = math.radians(self.vfov)
        viewport_height = 2.0 * math.tan(theta / 2)
        viewport_width = self.aspect_ratio * viewport_height

        self.w = (self.look_from - self.look_at).normalize()
        self.u = self.vup.cross(self.w).normalize()
        self.v = self.w.cross(self.u)

        # Scale by focus distance
        self.origin = self.look_from
        self.horizontal = self.u * viewport_width * self.focus_dist
        self.vertical = self.v * viewport_height * self.focus_dist
        self.lower_left_corner = (self.origin -
                                  self.horizontal * 0.5 -
                                  self.vertical * 0.5 -
                                  self.w * self.focus_dist)

    def get_ray(self, s: float, t: float, rng) -> Ray:
        """
        Ray through image-plane coordinate (s, t), both in [0, 1] from the
        lower-left corner.
        """
        if self.lens_radius <= 0:
            direction = (self.lower_left_corner +
                         self.horizontal * s +
                         self.vertical * t -
                         self.origin)
            return Ray(self.origin, direction)

        # Generate random point on lens
        rd = random_in_unit_disk(rng) * self.lens_radius
        offset = self.u * rd.x + self.v * rd.y

        ray_origin = self.origin + offset
        ray_direction = (self.lower_left_corner +
                         self.horizontal * s +
                         self.vertical * t -
                         ray_origin)
        return Ray(ray_origin, ray_direction)

"""Unit tests for Camera."""

import math

import pytest

from core.vector import Vector3
from camera.camera import Camera


@pytest.fixture
def pinhole():
    # 90 degree vertical fov, 2:1 viewport at distance 1: corners at (+-2, +-1, -1)
    return Camera(Vector3(0, 0, 0), Vector3(0, 0, -1), vfov=90.0, aspect_ratio=2.0,
                  aperture=0.0, focus_dist=1.0)


class TestPinhole:
    def test_basis_is_orthonormal(self, pinhole):
        assert pinhole.u.isclose(Vector3(1, 0, 0))
        assert pinhole.v.isclose(Vector3(0, 1, 0))
        assert pinhole.w.isclose(Vector3(0, 0, 1))

    def test_center_ray(self, pinhole, rng):
        ray = pinhole.get_ray(0.5, 0.5, rng)
        assert ray.origin == Vector3(0, 0, 0)
        assert ray.direction.isclose(Vector3(0, 0, -1))

    def test_corner_rays(self, pinhole, rng):
        assert pinhole.get_ray(0.0, 0.0, rng).direction.isclose(Vector3(-2, -1, -1))
        assert pinhole.get_ray(1.0, 1.0, rng).direction.isclose(Vector3(2, 1, -1))

    def test_pinhole_draws_no_randomness(self, pinhole, scripted_rng):
        rng = scripted_rng(0.3)
        pinhole.get_ray(0.2, 0.8, rng)
        assert rng.calls == 0

    def test_vfov_sets_viewport(self):
        cam = Camera(Vector3(0, 0, 0), Vector3(0, 0, -1), vfov=60.0, aspect_ratio=1.0,
                     focus_dist=1.0)
        assert cam.vertical.length() == pytest.approx(2.0 * math.tan(math.radians(30)))
        assert cam.horizontal.length() == pytest.approx(cam.vertical.length())


class TestThinLens:
    def test_rays_converge_on_focus_plane(self, rng):
        cam = Camera(Vector3(0, 0, 0), Vector3(0, 0, -1), vfov=40.0, aspect_ratio=1.5,
                     aperture=2.0, focus_dist=5.0)
        focus_point = Vector3(0, 0, -5)
        origins = set()
        for _ in range(50):
            ray = cam.get_ray(0.5, 0.5, rng)
            assert ray.at(1.0).isclose(focus_point)
            # Origins stay on the lens disk around look_from
            assert (ray.origin - cam.origin).length() < cam.lens_radius
            assert ray.origin.z == pytest.approx(0.0)
            origins.add(ray.origin.to_tuple())
        assert len(origins) > 1

    def test_lens_radius(self):
        cam = Camera(Vector3(13, 2, 3), Vector3(0, 0, 0), aperture=0.1)
        assert cam.lens_radius == pytest.approx(0.05)

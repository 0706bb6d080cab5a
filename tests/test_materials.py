"""Unit tests for the materials.

Tests cover:
- Lambertian scattering and its degenerate-direction fallback
- Metal reflection, fuzz clamping and absorption
- Dielectric refraction, total internal reflection and Schlick reflection
- Emission from DiffuseLight
- Presets
"""

import math
import random

import pytest

from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import HitRecord
from materials.dielectric import Dielectric
from materials.diffuse_light import DiffuseLight
from materials.lambertian import Lambertian
from materials.material import Material
from materials.metal import Metal
from materials.presets import ColorPresets, DielectricPresets, LightPresets, MetalPresets
from materials.textures import CheckerTexture, SolidTexture


def floor_hit(front_face=True, material=None):
    """A hit at the origin on a floor facing +y."""
    return HitRecord(p=Vector3(0, 0, 0), normal=Vector3(0, 1, 0), t=1.0,
                     front_face=front_face, material=material)


class TestMaterialBase:
    def test_scatter_is_abstract(self, rng):
        with pytest.raises(NotImplementedError):
            Material().scatter(Ray(Vector3(0, 1, 0), Vector3(0, -1, 0)), floor_hit(), rng)

    def test_default_emission_is_black(self):
        assert Material().emitted(0.5, 0.5, Vector3(1, 2, 3)) == Vector3(0, 0, 0)


class TestLambertian:
    """Tests for Lambertian.scatter()."""

    def test_scatters_into_upper_hemisphere(self, rng):
        material = Lambertian(Vector3(0.3, 0.6, 0.9))
        rec = floor_hit()
        ray = Ray(Vector3(0, 1, 1), Vector3(0, -1, -1))
        for _ in range(200):
            scattered, attenuation = material.scatter(ray, rec, rng)
            assert scattered.origin == rec.p
            # normal + unit vector never points below the surface
            assert scattered.direction.dot(rec.normal) >= 0.0
            assert attenuation == Vector3(0.3, 0.6, 0.9)

    def test_degenerate_direction_falls_back_to_normal(self, monkeypatch, rng):
        rec = floor_hit()
        monkeypatch.setattr("materials.lambertian.random_unit_vector", lambda _rng: -rec.normal)
        scattered, _ = Lambertian(Vector3(0.5, 0.5, 0.5)).scatter(
            Ray(Vector3(0, 1, 0), Vector3(0, -1, 0)), rec, rng)
        assert scattered.direction == rec.normal
        assert not any(math.isnan(c) for c in scattered.direction)

    def test_texture_albedo(self, rng):
        checker = CheckerTexture(Vector3(1, 0, 0), Vector3(0, 0, 1), scale=1.0)
        rec = HitRecord(p=Vector3(1, 1, 1), normal=Vector3(0, 1, 0), t=1.0)
        _, attenuation = Lambertian(checker).scatter(Ray(Vector3(1, 2, 1), Vector3(0, -1, 0)), rec, rng)
        assert attenuation == Vector3(0, 0, 1)

    def test_solid_color_wrapped_in_texture(self):
        assert isinstance(Lambertian(Vector3(1, 1, 1)).texture, SolidTexture)


class TestMetal:
    """Tests for Metal.scatter()."""

    def test_perfect_mirror(self, rng):
        material = Metal(Vector3(0.8, 0.7, 0.6))
        ray = Ray(Vector3(-1, 1, 0), Vector3(1, -1, 0))
        scattered, attenuation = material.scatter(ray, floor_hit(), rng)
        d = scattered.direction
        assert d.isclose(Vector3(1, 1, 0).normalize())
        assert attenuation == Vector3(0.8, 0.7, 0.6)

    def test_mirror_consumes_no_randomness(self, scripted_rng):
        rng = scripted_rng(0.5)
        Metal(Vector3(1, 1, 1)).scatter(Ray(Vector3(-1, 1, 0), Vector3(1, -1, 0)), floor_hit(), rng)
        assert rng.calls == 0

    @pytest.mark.parametrize("fuzz, expected", [(-0.5, 0.0), (0.3, 0.3), (2.0, 1.0)])
    def test_fuzz_clamped(self, fuzz, expected):
        assert Metal(Vector3(1, 1, 1), fuzz).fuzz == expected

    def test_fuzzed_reflection_into_surface_is_absorbed(self, scripted_rng):
        # Grazing ray; the fuzz sample (0, -0.9, 0) pushes the reflection below the floor
        rng = scripted_rng(0.5, 0.05, 0.5)
        ray = Ray(Vector3(-1, 0.1, 0), Vector3(1, -0.1, 0))
        assert Metal(Vector3(1, 1, 1), fuzz=1.0).scatter(ray, floor_hit(), rng) is None

    def test_fuzzed_reflections_stay_forward_or_absorb(self, rng):
        material = MetalPresets.brushed()
        ray = Ray(Vector3(-1, 1, 0), Vector3(1, -1, 0))
        for _ in range(200):
            result = material.scatter(ray, floor_hit(), rng)
            if result is not None:
                assert result[0].direction.dot(Vector3(0, 1, 0)) > 0


class TestDielectric:
    """Tests for Dielectric.scatter()."""

    def test_normal_incidence_refracts_straight_through(self, scripted_rng):
        rec = HitRecord(p=Vector3(0, 0, 0), normal=Vector3(0, 0, 1), t=1.0, front_face=True)
        ray = Ray(Vector3(0, 0, 1), Vector3(0, 0, -1))
        scattered, attenuation = Dielectric(1.5).scatter(ray, rec, scripted_rng(0.99))
        assert scattered.direction.isclose(Vector3(0, 0, -1))
        assert attenuation == Vector3(1, 1, 1)

    def test_schlick_reflection_when_draw_is_low(self, scripted_rng):
        rec = HitRecord(p=Vector3(0, 0, 0), normal=Vector3(0, 0, 1), t=1.0, front_face=True)
        ray = Ray(Vector3(0, 0, 1), Vector3(0, 0, -1))
        # Reflectance at normal incidence is 0.04, any draw below it reflects
        scattered, _ = Dielectric(1.5).scatter(ray, rec, scripted_rng(0.0))
        assert scattered.direction.isclose(Vector3(0, 0, 1))

    def test_total_internal_reflection(self, scripted_rng):
        theta = math.radians(60)
        ray = Ray(Vector3(0, 0, 0), Vector3(math.sin(theta), -math.cos(theta), 0))
        # Leaving glass: 1.5 * sin(60) > 1, so the ray cannot refract
        rec = floor_hit(front_face=False)
        scattered, attenuation = Dielectric(1.5).scatter(ray, rec, scripted_rng(0.99))
        assert scattered.direction.y > 0
        assert scattered.direction.isclose(Vector3(math.sin(theta), math.cos(theta), 0))
        assert attenuation == Vector3(1, 1, 1)

    def test_always_scatters(self, rng):
        material = DielectricPresets.glass()
        for _ in range(100):
            d = Vector3(rng.uniform(-1, 1), -rng.uniform(0.01, 1), rng.uniform(-1, 1))
            for front_face in (True, False):
                result = material.scatter(Ray(Vector3(0, 1, 0), d), floor_hit(front_face), rng)
                assert result is not None
                assert abs(result[0].direction.length() - 1.0) < 1e-9

    def test_presets(self):
        assert DielectricPresets.glass().ref_idx == 1.5
        assert DielectricPresets.water().ref_idx == 1.33
        assert DielectricPresets.diamond().ref_idx == 2.42


class TestDiffuseLight:
    """Tests for DiffuseLight."""

    def test_never_scatters(self, rng):
        light = DiffuseLight(Vector3(4, 4, 4))
        assert light.scatter(Ray(Vector3(0, 1, 0), Vector3(0, -1, 0)), floor_hit(), rng) is None

    def test_emits_its_color(self):
        light = DiffuseLight(Vector3(2, 3, 4))
        assert light.emitted(0.1, 0.9, Vector3(5, 5, 5)) == Vector3(2, 3, 4)

    def test_light_presets_scale(self):
        assert LightPresets.white(4.0).emitted(0, 0, Vector3(0, 0, 0)) == Vector3(4, 4, 4)
        warm = LightPresets.warm().emitted(0, 0, Vector3(0, 0, 0))
        assert warm.x >= warm.y >= warm.z


class TestPresets:
    def test_matte_and_mirror(self, rng):
        matte = ColorPresets.matte(ColorPresets.BROWN)
        assert isinstance(matte, Lambertian)
        assert MetalPresets.mirror().fuzz == 0.0
        for preset in (MetalPresets.gold, MetalPresets.brushed):
            assert 0.0 < preset().fuzz <= 1.0

    def test_random_presets_are_seeded(self):
        a = ColorPresets.random_matte(random.Random(3)).texture.sample(None, None)
        b = ColorPresets.random_matte(random.Random(3)).texture.sample(None, None)
        assert a == b
        assert max(a.x, a.y, a.z) <= 1.0
        metal = MetalPresets.random_metal(random.Random(3))
        assert 0.0 <= metal.fuzz <= 0.5

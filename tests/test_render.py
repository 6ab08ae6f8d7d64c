"""Tests for the sampling loop, render settings and built-in scenes."""

import random

import numpy as np
import pytest

from camera.camera import Camera
from core.vector import Point3, Vector3
from geometry.world import World
from renderer.render import Renderer
from renderer.settings import QUALITY_LEVELS, RenderSettings
from scenes.demo import SCENES, build_scene, random_spheres_scene, three_spheres_scene


def _sky_camera(aspect_ratio):
    return Camera(Point3(0.0, 0.0, 0.0), Point3(0.0, 0.0, -1.0),
                  Vector3(0.0, 1.0, 0.0), 90.0, aspect_ratio)


class TestRenderer:
    """Tests for Renderer.render on small images."""

    def test_output_shape_and_dtype(self, rng):
        settings = RenderSettings(image_width=8, aspect_ratio=2.0, samples_per_pixel=2, max_depth=5)
        pixels = Renderer(settings).render(World(), _sky_camera(2.0), rng)
        assert pixels.shape == (4, 8, 3)
        assert pixels.dtype == np.uint8

    def test_sky_gets_bluer_towards_top_row(self, rng):
        settings = RenderSettings(image_width=6, aspect_ratio=1.0, samples_per_pixel=4, max_depth=5)
        pixels = Renderer(settings).render(World(), _sky_camera(1.0), rng)
        top_red = pixels[0, :, 0].astype(int)
        bottom_red = pixels[-1, :, 0].astype(int)
        assert (top_red < bottom_red).all()
        assert (pixels[:, :, 2] == 255).all()

    def test_same_seed_same_image(self):
        settings = RenderSettings(image_width=8, aspect_ratio=2.0, samples_per_pixel=2, max_depth=10)
        scene = three_spheres_scene()
        camera = scene.make_camera(settings.aspect_ratio)
        first = Renderer(settings).render(scene.world, camera, random.Random(5))
        second = Renderer(settings).render(scene.world, camera, random.Random(5))
        assert np.array_equal(first, second)

    def test_progress_reports_every_row(self, rng):
        settings = RenderSettings(image_width=4, aspect_ratio=1.0, samples_per_pixel=1, max_depth=2)
        calls = []
        Renderer(settings).render(World(), _sky_camera(1.0), rng,
                                  progress=lambda done, total: calls.append((done, total)))
        assert calls == [(1, 4), (2, 4), (3, 4), (4, 4)]

    def test_single_pixel_image(self, rng):
        settings = RenderSettings(image_width=1, aspect_ratio=1.0, samples_per_pixel=1, max_depth=2)
        pixels = Renderer(settings).render(World(), _sky_camera(1.0), rng)
        assert pixels.shape == (1, 1, 3)


class TestRenderSettings:
    """Tests for configuration defaults, validation and presets."""

    def test_height_from_aspect_ratio(self):
        assert RenderSettings(image_width=384, aspect_ratio=16.0 / 9.0).image_height == 216
        assert RenderSettings(image_width=1, aspect_ratio=4.0).image_height == 1

    @pytest.mark.parametrize("field", ["image_width", "samples_per_pixel", "max_depth", "aspect_ratio"])
    def test_rejects_non_positive_values(self, field):
        with pytest.raises(ValueError, match=field):
            RenderSettings(**{field: 0})

    def test_from_quality_applies_overrides(self):
        settings = RenderSettings.from_quality("interactive", samples_per_pixel=3, seed=None)
        assert settings.samples_per_pixel == 3
        assert settings.image_width == QUALITY_LEVELS["interactive"]["image_width"]
        assert settings.seed is None

    def test_unknown_quality_lists_valid_names(self):
        with pytest.raises(ValueError, match="balanced"):
            RenderSettings.from_quality("ultra")


class TestScenes:
    """Tests for the built-in scene builders."""

    def test_three_spheres_scene(self):
        scene = three_spheres_scene()
        assert len(scene.world) == 4
        assert all(obj.radius > 0 for obj in scene.world)
        camera = scene.make_camera(16.0 / 9.0)
        assert camera.focus_dist == pytest.approx((scene.look_from - scene.look_at).length())

    def test_random_scene_is_reproducible(self):
        first = random_spheres_scene(random.Random(3))
        second = random_spheres_scene(random.Random(3))
        assert len(first.world) == len(second.world)
        assert [s.center for s in first.world] == [s.center for s in second.world]
        assert len(first.world) > 4

    def test_registry_and_unknown_scene(self, rng):
        assert set(SCENES) == {"three_spheres", "random"}
        assert len(build_scene("three_spheres", rng).world) == 4
        with pytest.raises(ValueError, match="Unknown scene"):
            build_scene("cornell", rng)

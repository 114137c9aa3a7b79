"""
Pytest fixtures and helpers shared by the spheretrace tests.
"""
import random

import numpy as np
import pytest

from spheretrace.camera.camera import Camera
from spheretrace.core.vector import Vector3
from spheretrace.main import create_world
from spheretrace.renderer.raytracer import RenderSettings


@pytest.fixture
def world():
    """The default two-sphere scene: a small sphere resting on a huge ground sphere."""
    return create_world()


@pytest.fixture
def camera():
    return Camera(aspect_ratio=16.0 / 9.0)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def origin():
    return Vector3(0.0, 0.0, 0.0)


@pytest.fixture
def small_settings():
    """A tiny, seeded render that still exercises the process pool."""
    return RenderSettings(width=8, height=6, samples_per_pixel=2, max_depth=3,
                          seed=42, workers=2)


def assert_color_close(actual, expected, atol=1e-9, err_msg=""):
    """Assert two colors (Vector3 or sequences) match channel by channel."""
    np.testing.assert_allclose(
        tuple(actual), tuple(expected), rtol=0, atol=atol,
        err_msg=f"Color mismatch: {err_msg}"
    )


def assert_color_between(color, a, b, err_msg=""):
    """Assert every channel of `color` lies between the matching channels of a and b."""
    for c, lo_hi in zip(tuple(color), zip(tuple(a), tuple(b))):
        lo, hi = min(lo_hi), max(lo_hi)
        assert lo - 1e-12 <= c <= hi + 1e-12, f"{color} not between {a} and {b} - {err_msg}"

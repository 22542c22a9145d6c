"""Pytest configuration and fixtures for image_cutter tests."""

import numpy as np
import pytest
from PIL import Image

from image_cutter.geometry import Rectangle


def make_gradient(width: int, height: int) -> np.ndarray:
    """Build a (H, W, 3) uint8 array where pixel (x, y) is (x, y, x + y) mod 256."""
    ys, xs = np.mgrid[0:height, 0:width]
    return np.stack([xs % 256, ys % 256, (xs + ys) % 256], axis=-1).astype(np.uint8)


@pytest.fixture
def gradient_array():
    """80x60 RGB gradient as a numpy array."""
    return make_gradient(80, 60)


@pytest.fixture
def gradient_image(gradient_array):
    """80x60 RGB gradient as a Pillow image."""
    return Image.fromarray(gradient_array)


@pytest.fixture
def bounds_800x600():
    """Bounds of an 800x600 image at the origin."""
    return Rectangle.from_size(800, 600)

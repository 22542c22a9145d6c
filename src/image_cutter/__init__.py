"""Crop images by size or ratio around an anchor point."""

from image_cutter.cutter import copy_pixels, crop, crop_pil, crop_rectangle
from image_cutter.errors import CutterError, InvalidConfiguration
from image_cutter.geometry import Point, Rectangle
from image_cutter.images import ArraySource, PillowSource, ResultImage, RGBAImage, SourceImage, as_source
from image_cutter.models import AnchorMode, CropConfig, CropOption
from image_cutter.resolver import compute_size, crop_area, max_bounds, resolve_anchor, resolve_crop_rectangle

try:
    from image_cutter._version import __version__, __version_tuple__
except ImportError:
    __version__ = "0.0.0+unknown"
    __version_tuple__ = (0, 0, 0, "unknown", "unknown")

__all__ = [
    "__version__",
    "__version_tuple__",
    "AnchorMode",
    "CropConfig",
    "CropOption",
    "Point",
    "Rectangle",
    "SourceImage",
    "ResultImage",
    "RGBAImage",
    "PillowSource",
    "ArraySource",
    "CutterError",
    "InvalidConfiguration",
    "as_source",
    "crop",
    "crop_pil",
    "crop_rectangle",
    "copy_pixels",
    "resolve_anchor",
    "max_bounds",
    "compute_size",
    "crop_area",
    "resolve_crop_rectangle",
]

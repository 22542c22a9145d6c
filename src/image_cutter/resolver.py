"""Crop geometry resolution.

Turns a CropConfig and the bounds of a source image into the final crop
rectangle:

    anchor -> max bounds -> size -> crop area -> intersection with bounds

Top-left and centered modes are deliberately not unified. In top-left mode
the max bounds start at the raw anchor (absolute coordinates) while the crop
area is offset by the source's min corner. Both only differ when the source
bounds don't start at (0, 0), and existing callers rely on the current output.
"""

import logging

from image_cutter.geometry import Point, Rectangle
from image_cutter.models import AnchorMode, CropConfig

logger = logging.getLogger(__name__)


def resolve_anchor(config: CropConfig, bounds: Rectangle) -> Point:
    """Resolve the anchor to absolute coordinates.

    Args:
        config: Crop configuration
        bounds: Source image bounds

    Returns:
        Center of bounds for a centered crop without anchor, otherwise
        the anchor offset from bounds.min
    """
    if config.uses_image_center():
        return bounds.center()
    return bounds.min + config.effective_anchor


def max_bounds(config: CropConfig, bounds: Rectangle) -> Rectangle:
    """Calculate the largest rectangle around the anchor that fits the source.

    Used as the ceiling for ratio sizing.

    Args:
        config: Crop configuration
        bounds: Source image bounds

    Returns:
        Rectangle symmetric around the anchor (centered mode), or spanning from
        the anchor to bounds.max (top-left mode)
    """
    if config.mode is AnchorMode.CENTERED:
        anchor = resolve_anchor(config, bounds)
        # Anchors outside the source give a negative half extent
        half_width = max(0, min(anchor.x - bounds.min.x, bounds.max.x - anchor.x))
        half_height = max(0, min(anchor.y - bounds.min.y, bounds.max.y - anchor.y))
        half = Point(half_width, half_height)
        return Rectangle(anchor - half, anchor + half)

    anchor = config.effective_anchor
    return Rectangle.from_corners(anchor.x, anchor.y, bounds.max.x, bounds.max.y)


def compute_size(config: CropConfig, available: Rectangle) -> Point:
    """Calculate the effective (width, height) of the crop.

    In absolute mode the requested size is returned verbatim; clipping happens
    later. In ratio mode the result is the largest size matching
    width:height that fits in available, with the integer remainder dropped.

    Args:
        config: Crop configuration
        available: Max bounds for the crop (see max_bounds)

    Returns:
        Crop size as a Point

    Raises:
        InvalidConfiguration: If a ratio term is not positive
    """
    if not config.is_ratio:
        return config.requested

    config.validate()
    ratio_w, ratio_h = config.width, config.height
    avail_w, avail_h = available.width, available.height

    # ratio_w / avail_w > ratio_h / avail_h, cross-multiplied
    if ratio_w * avail_h > ratio_h * avail_w:
        return Point(avail_w, (avail_w // ratio_w) * ratio_h)
    return Point((avail_h // ratio_h) * ratio_w, avail_h)


def crop_area(config: CropConfig, bounds: Rectangle, size: Point) -> Rectangle:
    """Place a crop of the given size according to the anchor mode.

    Centered crops use half the size, rounded toward zero, on both sides of
    the anchor, so odd dimensions come out one pixel smaller and never larger.

    Args:
        config: Crop configuration
        bounds: Source image bounds
        size: Crop size (see compute_size)

    Returns:
        Crop rectangle before clipping to bounds
    """
    if config.mode is AnchorMode.CENTERED:
        anchor = resolve_anchor(config, bounds)
        half = size.halved()
        return Rectangle.from_points(anchor - half, anchor + half)

    origin = bounds.min + config.effective_anchor
    return Rectangle.from_points(origin, origin + size)


def resolve_crop_rectangle(config: CropConfig, bounds: Rectangle) -> Rectangle:
    """Resolve the final crop rectangle, clipped to the source bounds.

    Args:
        config: Crop configuration
        bounds: Source image bounds

    Returns:
        Crop rectangle contained in bounds (possibly empty)

    Raises:
        InvalidConfiguration: If a ratio term is not positive

    Example:
        >>> bounds = Rectangle.from_size(800, 600)
        >>> resolve_crop_rectangle(CropConfig(width=250, height=500, mode=AnchorMode.CENTERED), bounds)
        Rectangle(min=Point(x=275, y=50), max=Point(x=525, y=550))
    """
    available = max_bounds(config, bounds)
    size = compute_size(config, available)
    area = crop_area(config, bounds, size)
    clipped = bounds.intersect(area)

    logger.debug(
        f"Resolved crop {config.mode.value} in {bounds.to_box()}: "
        f"max bounds {available.to_box()}, size {size.x}x{size.y}, "
        f"area {area.to_box()}, clipped {clipped.to_box()}"
    )
    return clipped

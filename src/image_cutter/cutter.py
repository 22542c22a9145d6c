"""Crop images.

By default the source is cropped at the requested size from its top-left
corner:

    >>> cropped = crop(img, CropConfig(width=250, height=500))

The anchor sets the top-left corner of the crop, or its center in
centered mode. A centered crop without anchor is centered on the image:

    >>> cropped = crop(img, CropConfig(width=250, height=500, mode=AnchorMode.CENTERED))

With the RATIO option, width and height are a ratio and the crop is the
largest rectangle with that ratio that fits around the anchor:

    >>> cropped = crop(img, CropConfig(width=4, height=3, mode=AnchorMode.CENTERED, options=CropOption.RATIO))
"""

import logging
from typing import Union

import numpy as np
from PIL import Image

from image_cutter.geometry import Rectangle
from image_cutter.images import ArraySource, PillowSource, ResultImage, RGBAImage, SourceImage, as_source
from image_cutter.models import CropConfig
from image_cutter.resolver import resolve_crop_rectangle

logger = logging.getLogger(__name__)


def copy_pixels(source: SourceImage, result: ResultImage) -> None:
    """Copy the pixels covered by result.bounds from source into result.

    Pixels are read and written at the same absolute coordinates and
    converted to the result's native representation. No resampling happens.
    Pillow and numpy sources copied into an RGBAImage are cropped as a whole
    region; anything else goes pixel by pixel.

    Args:
        source: Image to read from; must contain result.bounds
        result: Buffer to fill
    """
    rect = result.bounds
    if rect.is_empty():
        return

    if isinstance(result, RGBAImage) and isinstance(source, (PillowSource, ArraySource)):
        logger.debug(f"Copying {rect.to_box()} as a region of {type(source).__name__}")
        result.paste(source.region(rect))
        return

    logger.debug(f"Copying {rect.to_box()} pixel by pixel")
    for y in range(rect.min.y, rect.max.y):
        for x in range(rect.min.x, rect.max.x):
            result.set_color_at(x, y, result.convert(source.color_at(x, y)))


def crop(image: Union[SourceImage, Image.Image, np.ndarray], config: CropConfig) -> RGBAImage:
    """Retrieve a cropped copy of an image.

    Args:
        image: Source image (SourceImage, Pillow image or numpy array); never modified
        config: How to crop

    Returns:
        New RGBA buffer whose bounds are the crop rectangle in the source's
        coordinates. Empty (0x0) if the crop doesn't overlap the source.

    Raises:
        InvalidConfiguration: If ratio mode is on and a ratio term is not positive
    """
    source = as_source(image)

    rect = resolve_crop_rectangle(config, source.bounds)
    result = RGBAImage(rect)
    if rect.is_empty():
        logger.debug(f"Crop of {source.bounds.to_box()} is empty")
        return result

    copy_pixels(source, result)
    return result


def crop_pil(image: Image.Image, config: CropConfig) -> Image.Image:
    """Crop a Pillow image and return the result as a Pillow RGBA image.

    Example:
        >>> with Image.open("frame.jpg") as img:
        ...     crop_pil(img, CropConfig(width=250, height=500)).save("cropped.png")
    """
    return crop(PillowSource(image), config).to_pil()


def crop_rectangle(bounds: Rectangle, config: CropConfig) -> Rectangle:
    """Resolve the crop rectangle for an image with the given bounds without copying pixels.

    Raises:
        InvalidConfiguration: If ratio mode is on and a ratio term is not positive
    """
    return resolve_crop_rectangle(config, bounds)

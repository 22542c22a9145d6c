"""Source and result image adapters.

The crop core only needs two capabilities from the outside world: a source
it can read pixels from and a result buffer it can write pixels to. Decoding
and encoding stay with the caller (Pillow, OpenCV, ...).

Colors are plain tuples of ints as returned by ``PIL.Image.getpixel``:
an int for greyscale, (L, A), (R, G, B) or (R, G, B, A).
"""

from typing import Protocol, Union, runtime_checkable

import numpy as np
from PIL import Image

from image_cutter.config import (
    ARRAY_CHANNELS,
    NATIVE_SOURCE_MODES,
    OPAQUE_ALPHA,
    RESULT_FILL,
    RESULT_MODE,
)
from image_cutter.geometry import Point, Rectangle

Color = Union[int, tuple[int, ...]]
RGBA = tuple[int, int, int, int]


@runtime_checkable
class SourceImage(Protocol):
    """Read-only pixel source.

    Never mutated by the crop core.
    """

    @property
    def bounds(self) -> Rectangle:
        """Absolute bounds of the image."""
        ...

    def color_at(self, x: int, y: int) -> Color:
        """Color of the pixel at absolute coordinates (x, y)."""
        ...


@runtime_checkable
class ResultImage(Protocol):
    """Writable pixel buffer with its own native color representation."""

    @property
    def bounds(self) -> Rectangle:
        """Absolute bounds of the buffer."""
        ...

    def color_at(self, x: int, y: int) -> Color:
        """Color of the pixel at absolute coordinates (x, y)."""
        ...

    def convert(self, color: Color) -> Color:
        """Normalize a color to the buffer's native representation."""
        ...

    def set_color_at(self, x: int, y: int, color: Color) -> None:
        """Write a pixel at absolute coordinates (x, y)."""
        ...


class RGBAImage:
    """RGBA pixel buffer positioned at absolute coordinates.

    Backed by a Pillow image of mode RGBA whose (0, 0) pixel is ``bounds.min``.
    Writes outside the bounds are ignored and reads outside the bounds return
    transparent black.
    """

    def __init__(self, bounds: Rectangle):
        self._bounds = bounds
        size = (bounds.width, bounds.height) if not bounds.is_empty() else (0, 0)
        self.image = Image.new(RESULT_MODE, size, RESULT_FILL)

    @property
    def bounds(self) -> Rectangle:
        return self._bounds

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    def is_empty(self) -> bool:
        """True if the buffer holds no pixels."""
        return self.width == 0 or self.height == 0

    def convert(self, color: Color) -> RGBA:
        """Normalize a color to an (R, G, B, A) tuple.

        Args:
            color: Greyscale int or a 1- to 4-item tuple of ints

        Returns:
            RGBA tuple

        Raises:
            TypeError: If color has an unsupported shape
        """
        if isinstance(color, int):
            return (color, color, color, OPAQUE_ALPHA)
        if not isinstance(color, tuple):
            raise TypeError(f"Unsupported color: {color!r}")

        if len(color) == 1:
            (grey,) = color
            return (grey, grey, grey, OPAQUE_ALPHA)
        if len(color) == 2:
            grey, alpha = color
            return (grey, grey, grey, alpha)
        if len(color) == 3:
            red, green, blue = color
            return (red, green, blue, OPAQUE_ALPHA)
        if len(color) == 4:
            return color

        raise TypeError(f"Unsupported color with {len(color)} channels: {color!r}")

    def color_at(self, x: int, y: int) -> RGBA:
        if not self._bounds.contains_point(Point(x, y)):
            return RESULT_FILL
        return self.image.getpixel((x - self._bounds.min.x, y - self._bounds.min.y))

    def set_color_at(self, x: int, y: int, color: Color) -> None:
        if not self._bounds.contains_point(Point(x, y)):
            return
        self.image.putpixel((x - self._bounds.min.x, y - self._bounds.min.y), self.convert(color))

    def paste(self, region: Image.Image) -> None:
        """Replace the whole buffer with a Pillow image of the same size."""
        if region.size != self.image.size:
            raise ValueError(f"Region size {region.size} doesn't match buffer size {self.image.size}")
        self.image.paste(region.convert(RESULT_MODE), (0, 0))

    def to_pil(self) -> Image.Image:
        """Return a copy of the buffer as a Pillow image with a (0, 0) origin."""
        return self.image.copy()

    def to_array(self) -> np.ndarray:
        """Return the buffer as a (H, W, 4) uint8 array."""
        return np.asarray(self.image, dtype=np.uint8).reshape(self.height, self.width, 4)


class PillowSource:
    """SourceImage backed by a Pillow image.

    Pillow images always start at (0, 0); ``origin`` places the image
    elsewhere in absolute coordinates.
    """

    def __init__(self, image: Image.Image, origin: Point = Point()):
        if image.mode not in NATIVE_SOURCE_MODES:
            image = image.convert(RESULT_MODE)
        self.image = image
        self._bounds = Rectangle.from_size(image.width, image.height, origin)

    @property
    def bounds(self) -> Rectangle:
        return self._bounds

    def color_at(self, x: int, y: int) -> Color:
        if not self._bounds.contains_point(Point(x, y)):
            return RESULT_FILL
        return self.image.getpixel((x - self._bounds.min.x, y - self._bounds.min.y))

    def region(self, rect: Rectangle) -> Image.Image:
        """Crop a rectangle given in absolute coordinates with Pillow."""
        return self.image.crop(
            (
                rect.min.x - self._bounds.min.x,
                rect.min.y - self._bounds.min.y,
                rect.max.x - self._bounds.min.x,
                rect.max.y - self._bounds.min.y,
            )
        )


class ArraySource:
    """SourceImage backed by a numpy array.

    Accepts uint8 arrays of shape (H, W) for greyscale or (H, W, C) with
    C in ARRAY_CHANNELS, in RGB(A) channel order.
    """

    def __init__(self, array: np.ndarray, origin: Point = Point()):
        if array.ndim == 3 and array.shape[2] not in ARRAY_CHANNELS:
            raise ValueError(f"Unsupported channel count: {array.shape[2]}")
        if array.ndim not in (2, 3):
            raise ValueError(f"Expected (H, W) or (H, W, C) array, got shape {array.shape}")
        self.array = array
        height, width = array.shape[:2]
        self._bounds = Rectangle.from_size(width, height, origin)

    @property
    def bounds(self) -> Rectangle:
        return self._bounds

    def color_at(self, x: int, y: int) -> Color:
        if not self._bounds.contains_point(Point(x, y)):
            return RESULT_FILL
        pixel = self.array[y - self._bounds.min.y, x - self._bounds.min.x]
        if self.array.ndim == 2:
            return int(pixel)
        return tuple(int(channel) for channel in pixel)

    def region(self, rect: Rectangle) -> Image.Image:
        """Slice a rectangle given in absolute coordinates into a Pillow image."""
        left = rect.min.x - self._bounds.min.x
        top = rect.min.y - self._bounds.min.y
        right = rect.max.x - self._bounds.min.x
        bottom = rect.max.y - self._bounds.min.y
        pixels = np.ascontiguousarray(self.array[top:bottom, left:right], dtype=np.uint8)
        return Image.fromarray(pixels)


def as_source(image: Union[SourceImage, Image.Image, np.ndarray]) -> SourceImage:
    """Wrap a Pillow image or numpy array as a SourceImage.

    Objects already implementing SourceImage are returned unchanged.

    Raises:
        TypeError: If image can't be used as a source
    """
    if isinstance(image, Image.Image):
        return PillowSource(image)
    if isinstance(image, np.ndarray):
        return ArraySource(image)
    if isinstance(image, SourceImage):
        return image
    raise TypeError(f"Unsupported image type: {type(image).__name__}")

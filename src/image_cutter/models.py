"""Crop request models."""

from dataclasses import dataclass
from enum import Enum, Flag, auto

from image_cutter.errors import InvalidConfiguration
from image_cutter.geometry import Point


class AnchorMode(Enum):
    """Which point of the cropped image the anchor refers to."""

    TOP_LEFT = "top-left"
    CENTERED = "centered"


class CropOption(Flag):
    """Flags that modify how the crop size is interpreted."""

    NONE = 0
    # Width and height are a ratio, not a size in pixels.
    RATIO = auto()


@dataclass(frozen=True)
class CropConfig:
    """Describes a crop request.

    Attributes:
        width: Crop width in pixels, or the width term of the ratio
        height: Crop height in pixels, or the height term of the ratio
        anchor: Anchor offset from the source's min corner. None means unset,
            which behaves exactly like (0, 0). In centered mode both select
            the center of the source image.
        mode: Whether the anchor is the top-left corner or the center of the crop
        options: Option flags (see CropOption)

    Example:
        >>> config = CropConfig(width=4, height=3, mode=AnchorMode.CENTERED, options=CropOption.RATIO)
        >>> config.is_ratio
        True
    """

    width: int
    height: int
    anchor: Point | None = None
    mode: AnchorMode = AnchorMode.TOP_LEFT
    options: CropOption = CropOption.NONE

    @property
    def is_ratio(self) -> bool:
        """True if width and height describe a ratio."""
        return CropOption.RATIO in self.options

    @property
    def effective_anchor(self) -> Point:
        """Anchor with unset treated as (0, 0)."""
        return self.anchor if self.anchor is not None else Point()

    @property
    def requested(self) -> Point:
        """Requested (width, height) pair."""
        return Point(self.width, self.height)

    def uses_image_center(self) -> bool:
        """True if a centered crop should pivot on the source image's center."""
        return self.mode is AnchorMode.CENTERED and self.effective_anchor.is_zero()

    def validate(self) -> None:
        """Check that the configuration can be resolved.

        Raises:
            InvalidConfiguration: If ratio mode is on and a ratio term is not positive
        """
        if self.is_ratio and (self.width <= 0 or self.height <= 0):
            raise InvalidConfiguration(f"Ratio terms must be positive, got {self.width}:{self.height}")

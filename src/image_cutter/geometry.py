"""Integer point and rectangle types for crop geometry.

Coordinate System Notes:
- All coordinates are absolute integer pixels with a top-left origin
- A rectangle's min corner is inclusive and its max corner is exclusive
- A source image's bounds need not start at (0, 0)
- Centers use floor division; crop sizes are halved toward zero
"""

from dataclasses import dataclass


def _half(value: int) -> int:
    return -(-value // 2) if value < 0 else value // 2


@dataclass(frozen=True)
class Point:
    """Integer (x, y) pair.

    Used both as a pixel coordinate and as a (width, height) size.
    """

    x: int = 0
    y: int = 0

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __floordiv__(self, divisor: int) -> "Point":
        return Point(self.x // divisor, self.y // divisor)

    def halved(self) -> "Point":
        """Halve both components, rounding toward zero.

        Negative sizes shrink in magnitude the same way positive ones do.
        """
        return Point(_half(self.x), _half(self.y))

    def is_zero(self) -> bool:
        """Check if both components are zero."""
        return self.x == 0 and self.y == 0


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned integer rectangle.

    Attributes:
        min: Inclusive top-left corner
        max: Exclusive bottom-right corner

    Build rectangles from arbitrary corners with ``from_corners`` so that
    ``min <= max`` holds componentwise.
    """

    min: Point = Point()
    max: Point = Point()

    @classmethod
    def from_corners(cls, x0: int, y0: int, x1: int, y1: int) -> "Rectangle":
        """Create a rectangle from two opposite corners, swapping as needed.

        Args:
            x0: First corner x
            y0: First corner y
            x1: Second corner x
            y1: Second corner y

        Returns:
            Rectangle with min <= max componentwise

        Example:
            >>> Rectangle.from_corners(10, 0, 0, 5)
            Rectangle(min=Point(x=0, y=0), max=Point(x=10, y=5))
        """
        if x0 > x1:
            x0, x1 = x1, x0
        if y0 > y1:
            y0, y1 = y1, y0
        return cls(Point(x0, y0), Point(x1, y1))

    @classmethod
    def from_points(cls, a: Point, b: Point) -> "Rectangle":
        """Create a canonical rectangle spanning two points."""
        return cls.from_corners(a.x, a.y, b.x, b.y)

    @classmethod
    def from_size(cls, width: int, height: int, origin: Point = Point()) -> "Rectangle":
        """Create a rectangle of the given size starting at origin."""
        return cls.from_corners(origin.x, origin.y, origin.x + width, origin.y + height)

    @property
    def width(self) -> int:
        """Rectangle width in pixels."""
        return self.max.x - self.min.x

    @property
    def height(self) -> int:
        """Rectangle height in pixels."""
        return self.max.y - self.min.y

    @property
    def size(self) -> Point:
        """Rectangle (width, height)."""
        return self.max - self.min

    @property
    def area(self) -> int:
        """Rectangle area in square pixels (0 when empty)."""
        if self.is_empty():
            return 0
        return self.width * self.height

    def center(self) -> Point:
        """Geometric center, rounded down to whole pixels."""
        return self.min + self.size // 2

    def is_empty(self) -> bool:
        """Check if the rectangle contains no pixels."""
        return self.min.x >= self.max.x or self.min.y >= self.max.y

    def contains_point(self, point: Point) -> bool:
        """Check if a pixel coordinate lies inside the rectangle."""
        return self.min.x <= point.x < self.max.x and self.min.y <= point.y < self.max.y

    def contains(self, other: "Rectangle") -> bool:
        """Check if another rectangle lies completely inside this one.

        The empty rectangle is contained in every rectangle.
        """
        if other.is_empty():
            return True
        return (
            self.min.x <= other.min.x
            and self.min.y <= other.min.y
            and other.max.x <= self.max.x
            and other.max.y <= self.max.y
        )

    def intersect(self, other: "Rectangle") -> "Rectangle":
        """Calculate the largest rectangle contained in both rectangles.

        Args:
            other: The rectangle to intersect with

        Returns:
            Intersection, or the empty rectangle (0,0)-(0,0) if they don't overlap
        """
        result = Rectangle(
            Point(max(self.min.x, other.min.x), max(self.min.y, other.min.y)),
            Point(min(self.max.x, other.max.x), min(self.max.y, other.max.y)),
        )
        if result.is_empty():
            return Rectangle()
        return result

    def to_box(self) -> tuple[int, int, int, int]:
        """Convert to a Pillow box tuple (left, top, right, bottom)."""
        return (self.min.x, self.min.y, self.max.x, self.max.y)

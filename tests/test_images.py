"""Tests for source and result image adapters."""

import numpy as np
import pytest
from PIL import Image

from image_cutter.geometry import Point, Rectangle
from image_cutter.images import (
    ArraySource,
    PillowSource,
    ResultImage,
    RGBAImage,
    SourceImage,
    as_source,
)


@pytest.mark.unit
class TestRGBAImage:
    """Tests for the RGBA result buffer."""

    def test_allocates_transparent_buffer(self):
        """Test a new buffer has the rectangle's size and is zero-initialized."""
        result = RGBAImage(Rectangle(Point(10, 20), Point(14, 23)))

        assert result.image.mode == "RGBA"
        assert result.image.size == (4, 3)
        assert result.color_at(10, 20) == (0, 0, 0, 0)

    def test_empty_rectangle(self):
        """Test an empty rectangle allocates a 0x0 buffer."""
        result = RGBAImage(Rectangle())

        assert result.is_empty()
        assert result.image.size == (0, 0)

    @pytest.mark.parametrize(
        "color,expected",
        [
            (128, (128, 128, 128, 255)),
            ((128,), (128, 128, 128, 255)),
            ((128, 64), (128, 128, 128, 64)),
            ((1, 2, 3), (1, 2, 3, 255)),
            ((1, 2, 3, 4), (1, 2, 3, 4)),
        ],
    )
    def test_convert(self, color, expected):
        """Test colors are normalized to RGBA tuples."""
        assert RGBAImage(Rectangle()).convert(color) == expected

    @pytest.mark.parametrize("color", [(1, 2, 3, 4, 5), (), [1, 2, 3], "red", 1.5])
    def test_convert_rejects_unknown_colors(self, color):
        """Test unsupported color shapes raise TypeError."""
        with pytest.raises(TypeError):
            RGBAImage(Rectangle()).convert(color)

    def test_set_and_get_use_absolute_coordinates(self):
        """Test pixel access is relative to bounds.min."""
        result = RGBAImage(Rectangle(Point(10, 20), Point(14, 23)))

        result.set_color_at(13, 22, (9, 8, 7))

        assert result.color_at(13, 22) == (9, 8, 7, 255)
        assert result.image.getpixel((3, 2)) == (9, 8, 7, 255)

    def test_out_of_bounds_access_is_ignored(self):
        """Test writes outside the bounds are dropped and reads return transparent black."""
        result = RGBAImage(Rectangle.from_size(2, 2))

        result.set_color_at(5, 5, (255, 255, 255))

        assert result.color_at(5, 5) == (0, 0, 0, 0)
        assert (result.to_array() == 0).all()

    def test_paste_rejects_wrong_size(self):
        """Test paste requires a region of the buffer's size."""
        result = RGBAImage(Rectangle.from_size(2, 2))

        with pytest.raises(ValueError):
            result.paste(Image.new("RGB", (3, 3)))

    def test_to_pil_is_a_copy(self):
        """Test to_pil doesn't expose the internal buffer."""
        result = RGBAImage(Rectangle.from_size(2, 2))
        copy = result.to_pil()
        copy.putpixel((0, 0), (1, 1, 1, 1))

        assert result.color_at(0, 0) == (0, 0, 0, 0)

    def test_to_array(self):
        """Test to_array returns an (H, W, 4) array."""
        result = RGBAImage(Rectangle.from_size(5, 3))

        assert result.to_array().shape == (3, 5, 4)

    def test_satisfies_result_protocol(self):
        """Test RGBAImage implements ResultImage."""
        assert isinstance(RGBAImage(Rectangle()), ResultImage)
        assert hasattr(ResultImage, "color_at")


@pytest.mark.unit
class TestPillowSource:
    """Tests for the Pillow source adapter."""

    def test_bounds_with_origin(self):
        """Test bounds follow the image size and origin."""
        source = PillowSource(Image.new("RGB", (80, 60)), origin=Point(-10, 5))

        assert source.bounds == Rectangle(Point(-10, 5), Point(70, 65))

    def test_native_mode_is_kept(self):
        """Test greyscale images aren't converted."""
        source = PillowSource(Image.new("L", (2, 2), 50))

        assert source.image.mode == "L"
        assert source.color_at(0, 0) == 50

    def test_other_modes_are_converted(self):
        """Test bilevel and palette images are converted to RGBA."""
        assert PillowSource(Image.new("1", (2, 2), 1)).color_at(1, 1) == (255, 255, 255, 255)
        assert PillowSource(Image.new("P", (2, 2))).image.mode == "RGBA"

    def test_color_at_uses_origin(self, gradient_image):
        """Test pixel reads are offset by the origin."""
        source = PillowSource(gradient_image, origin=Point(100, 100))

        assert source.color_at(103, 104) == (3, 4, 7)
        assert source.color_at(0, 0) == (0, 0, 0, 0)

    def test_region(self, gradient_image):
        """Test region crops in absolute coordinates."""
        source = PillowSource(gradient_image, origin=Point(100, 100))
        region = source.region(Rectangle(Point(110, 120), Point(115, 122)))

        assert region.size == (5, 2)
        assert region.getpixel((0, 0)) == (10, 20, 30)

    def test_satisfies_source_protocol(self, gradient_image):
        """Test PillowSource implements SourceImage."""
        assert isinstance(PillowSource(gradient_image), SourceImage)


@pytest.mark.unit
class TestArraySource:
    """Tests for the numpy source adapter."""

    def test_greyscale_array(self):
        """Test (H, W) arrays return int colors."""
        source = ArraySource(np.full((3, 4), 9, dtype=np.uint8))

        assert source.bounds == Rectangle.from_size(4, 3)
        assert source.color_at(3, 2) == 9
        assert isinstance(source.color_at(3, 2), int)

    def test_rgba_array(self):
        """Test (H, W, 4) arrays return 4-tuples of ints."""
        array = np.zeros((2, 2, 4), dtype=np.uint8)
        array[1, 0] = (1, 2, 3, 4)

        assert ArraySource(array).color_at(0, 1) == (1, 2, 3, 4)

    @pytest.mark.parametrize("shape", [(2, 2, 2), (2, 2, 5), (2,), (2, 2, 3, 1)])
    def test_rejects_unsupported_shapes(self, shape):
        """Test arrays that aren't greyscale, RGB or RGBA are rejected."""
        with pytest.raises(ValueError):
            ArraySource(np.zeros(shape, dtype=np.uint8))

    def test_region(self, gradient_array):
        """Test region slices absolute coordinates into a Pillow image."""
        source = ArraySource(gradient_array, origin=Point(100, 100))
        region = source.region(Rectangle(Point(110, 120), Point(115, 122)))

        assert region.mode == "RGB"
        assert region.size == (5, 2)
        assert region.getpixel((0, 0)) == (10, 20, 30)

    def test_greyscale_region(self):
        """Test (H, W) arrays slice into greyscale images."""
        region = ArraySource(np.full((3, 4), 9, dtype=np.uint8)).region(Rectangle.from_size(2, 2))

        assert region.mode == "L"
        assert region.getpixel((1, 1)) == 9

    def test_out_of_bounds_read(self, gradient_array):
        """Test reads outside the array return transparent black."""
        assert ArraySource(gradient_array).color_at(80, 0) == (0, 0, 0, 0)


@pytest.mark.unit
class TestAsSource:
    """Tests for as_source()."""

    def test_wraps_pillow_image(self, gradient_image):
        """Test Pillow images become PillowSource."""
        assert isinstance(as_source(gradient_image), PillowSource)

    def test_wraps_array(self, gradient_array):
        """Test numpy arrays become ArraySource."""
        assert isinstance(as_source(gradient_array), ArraySource)

    def test_passes_sources_through(self, gradient_array):
        """Test existing sources are returned unchanged."""
        source = ArraySource(gradient_array)

        assert as_source(source) is source

    def test_rejects_other_objects(self):
        """Test unsupported objects raise TypeError."""
        with pytest.raises(TypeError):
            as_source(42)

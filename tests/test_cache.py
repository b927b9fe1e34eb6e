import pytest

from richtextbuf.cache import CacheKey, SubpixelBin


@pytest.mark.parametrize(
    "pos, expected",
    [
        (0.0, (0, SubpixelBin.ZERO)),
        (0.124, (0, SubpixelBin.ZERO)),
        (0.125, (0, SubpixelBin.ONE)),
        (0.25, (0, SubpixelBin.ONE)),
        (0.374, (0, SubpixelBin.ONE)),
        (0.375, (0, SubpixelBin.TWO)),
        (0.5, (0, SubpixelBin.TWO)),
        (0.624, (0, SubpixelBin.TWO)),
        (0.625, (0, SubpixelBin.THREE)),
        (0.75, (0, SubpixelBin.THREE)),
        (0.874, (0, SubpixelBin.THREE)),
        (0.875, (1, SubpixelBin.ZERO)),
        (0.999, (1, SubpixelBin.ZERO)),
        (1.0, (1, SubpixelBin.ZERO)),
        (1.124, (1, SubpixelBin.ZERO)),
    ],
)
def test_subpixel_bins_positive(pos, expected):
    assert SubpixelBin.from_position(pos) == expected


@pytest.mark.parametrize(
    "pos, expected",
    [
        (-0.0, (0, SubpixelBin.ZERO)),
        (-0.124, (0, SubpixelBin.ZERO)),
        (-0.125, (-1, SubpixelBin.THREE)),
        (-0.25, (-1, SubpixelBin.THREE)),
        (-0.374, (-1, SubpixelBin.THREE)),
        (-0.375, (-1, SubpixelBin.TWO)),
        (-0.5, (-1, SubpixelBin.TWO)),
        (-0.624, (-1, SubpixelBin.TWO)),
        (-0.625, (-1, SubpixelBin.ONE)),
        (-0.75, (-1, SubpixelBin.ONE)),
        (-0.874, (-1, SubpixelBin.ONE)),
        (-0.875, (-1, SubpixelBin.ZERO)),
        (-0.999, (-1, SubpixelBin.ZERO)),
        (-1.0, (-1, SubpixelBin.ZERO)),
        (-1.124, (-1, SubpixelBin.ZERO)),
    ],
)
def test_subpixel_bins_negative(pos, expected):
    assert SubpixelBin.from_position(pos) == expected


@pytest.mark.parametrize(
    "bin_, value",
    [
        (SubpixelBin.ZERO, 0.0),
        (SubpixelBin.ONE, 0.25),
        (SubpixelBin.TWO, 0.5),
        (SubpixelBin.THREE, 0.75),
    ],
)
def test_as_float(bin_, value):
    assert bin_.as_float() == value


def test_cache_key_new_splits_position():
    key, x, y = CacheKey.new(3, 42, 14.0, (10.5, -0.25))
    assert (x, y) == (10, -1)
    assert key.x_bin is SubpixelBin.TWO
    assert key.y_bin is SubpixelBin.THREE
    assert key.font_id == 3
    assert key.glyph_id == 42


def test_cache_key_font_size_bits_are_f32():
    key, _, _ = CacheKey.new(0, 1, 1.0, (0.0, 0.0))
    assert key.font_size_bits == 0x3F800000


def test_cache_key_equal_for_same_bin():
    first, _, _ = CacheKey.new(1, 5, 12.0, (3.01, 4.0))
    second, _, _ = CacheKey.new(1, 5, 12.0, (7.05, 9.1))
    assert first == second
    assert hash(first) == hash(second)


def test_cache_key_differs_by_size():
    small, _, _ = CacheKey.new(1, 5, 12.0, (0.0, 0.0))
    large, _, _ = CacheKey.new(1, 5, 13.0, (0.0, 0.0))
    assert small != large
    assert small < large


def test_cache_key_rejects_bad_glyph_id():
    with pytest.raises(ValueError):
        CacheKey.new(1, 0x10000, 12.0, (0.0, 0.0))
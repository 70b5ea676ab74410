import numpy as np
import pytest

from lineargradient.colors import Color, coerce_color


def test_argb_round_trip():
    for argb in (0xFF3690EA, 0xFF94B3FF, 0x00000000, 0x80FF0000, 0xFFFFFFFF):
        assert Color.from_argb(argb).argb == argb


def test_argb_channels():
    color = Color.from_argb(0x80FF0000)
    assert color.red == 1.0
    assert color.green == 0.0
    assert color.blue == 0.0
    assert color.alpha == pytest.approx(128 / 255)


def test_argb_out_of_range():
    with pytest.raises(ValueError, match="32 bits"):
        Color.from_argb(0x1FFFFFFFF)


def test_from_hex_forms():
    assert Color.from_hex("#3690EA") == Color.from_argb(0xFF3690EA)
    assert Color.from_hex("ff3690ea") == Color.from_argb(0xFF3690EA)
    assert Color.from_hex("#abc") == Color.from_hex("#aabbcc")
    assert Color.from_hex("#803690EA").alpha == pytest.approx(128 / 255)


def test_from_hex_invalid():
    with pytest.raises(ValueError, match="Invalid hex color"):
        Color.from_hex("#12345")
    with pytest.raises(ValueError, match="Invalid hex color"):
        Color.from_hex("#zzzzzz")


def test_to_hex():
    assert Color.from_argb(0xFF3690EA).to_hex() == "#ff3690ea"


def test_three_channels_default_opaque():
    assert Color((0.2, 0.4, 0.6)).value == (0.2, 0.4, 0.6, 1.0)


def test_channels_clamped():
    assert Color((1.5, -1.0, 0.5, 2.0)).value == (1.0, 0.0, 0.5, 1.0)


def test_wrong_channel_count():
    with pytest.raises(ValueError, match="3 or 4 channels"):
        Color((0.1, 0.2))


def test_immutable():
    color = Color((0.1, 0.2, 0.3))
    with pytest.raises(AttributeError, match="immutable"):
        color._value = (0.0, 0.0, 0.0, 0.0)


def test_with_alpha():
    color = Color((0.1, 0.2, 0.3)).with_alpha(0.5)
    assert color.value == (0.1, 0.2, 0.3, 0.5)


def test_equality_and_hash():
    assert Color((0.1, 0.2, 0.3)) == Color((0.1, 0.2, 0.3, 1.0))
    assert hash(Color((0.1, 0.2, 0.3))) == hash(Color((0.1, 0.2, 0.3, 1.0)))
    assert Color((0.1, 0.2, 0.3)) != Color((0.1, 0.2, 0.4))


def test_coerce_color():
    expected = Color.from_argb(0xFF3690EA)
    assert coerce_color(expected) is expected
    assert coerce_color(0xFF3690EA) == expected
    assert coerce_color(np.uint32(0xFF3690EA)) == expected
    assert coerce_color("#3690EA") == expected
    assert coerce_color([0.0, 1.0, 0.0]) == Color((0.0, 1.0, 0.0))
    assert coerce_color(np.array([0.0, 1.0, 0.0, 0.5])) == Color((0.0, 1.0, 0.0, 0.5))


def test_coerce_color_rejects():
    with pytest.raises(TypeError, match="Unsupported color input type"):
        coerce_color(1.5)
    with pytest.raises(TypeError, match="Unsupported color input type"):
        coerce_color(True)
    with pytest.raises(ValueError, match="1-dimensional"):
        coerce_color(np.zeros((2, 3)))

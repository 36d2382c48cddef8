import pytest

from solong.visual import convert_color, rgb_shifts

WIN_SX = 242
WIN_SY = 242
RGB565 = (0xF800, 0x07E0, 0x001F)


def _color_map_1(x, y, w, h):
    return (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


def _color_map_2(x, y, w, h):
    return (y * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


def test_rgb_shifts_true_color():
    assert rgb_shifts(0xFF0000, 0x00FF00, 0x0000FF) == (16, 8, 8, 8, 0, 8)


def test_rgb_shifts_565():
    assert rgb_shifts(*RGB565) == (11, 5, 5, 6, 0, 5)


def test_rgb_shifts_zero_mask_rejected():
    with pytest.raises(ValueError):
        rgb_shifts(0, 0x00FF00, 0x0000FF)


@pytest.mark.parametrize("x,y", [(0, 0), (10, 200), (241, 241), (120, 60)])
def test_deep_visual_keeps_color(x, y):
    shifts = rgb_shifts(*RGB565)
    for color in (_color_map_1(x, y, WIN_SX, WIN_SY), _color_map_2(x, y, WIN_SX, WIN_SY)):
        assert convert_color(color, 24, shifts) == color
        assert convert_color(color, 32, shifts) == color


@pytest.mark.parametrize("color", [0x000000, 0x123456, 0xFF99FF, 0x00FFFF, 0xFFFFFF])
def test_eight_bit_channels_round_trip(color):
    shifts = rgb_shifts(0xFF0000, 0x00FF00, 0x0000FF)
    assert convert_color(color, 16, shifts) == color


@pytest.mark.parametrize(
    "color,expected",
    [
        (0xFF0000, 0xF800),
        (0x00FF00, 0x07E0),
        (0x0000FF, 0x001F),
        (0xFFFFFF, 0xFFFF),
        (0x000000, 0x0000),
    ],
)
def test_convert_to_565(color, expected):
    assert convert_color(color, 16, rgb_shifts(*RGB565)) == expected


def test_converted_value_fits_masks():
    shifts = rgb_shifts(*RGB565)
    for y in range(0, WIN_SY, 17):
        for x in range(0, WIN_SX, 13):
            value = convert_color(_color_map_1(x, y, WIN_SX, WIN_SY), 16, shifts)
            assert 0 <= value <= 0xFFFF


def test_bad_shift_tuple_rejected():
    with pytest.raises(ValueError):
        convert_color(0x123456, 16, (0, 8))
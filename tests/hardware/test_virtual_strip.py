from models.color import Color, BLACK
from hardware.led.strip_factory import create_strip
from hardware.led.virtual_strip import VirtualStrip
from models.config import StripConfig
from models.grid import GridConfig


def test_apply_frame_pads_short_frames():
    strip = VirtualStrip(4)
    strip.apply_frame([Color.red(), Color.green()])

    assert strip.get_frame() == [Color.red(), Color.green(), BLACK, BLACK]
    assert strip.show_count == 1


def test_apply_frame_trims_long_frames():
    strip = VirtualStrip(2)
    strip.apply_frame([Color.red()] * 5)
    assert len(strip.get_frame()) == 2


def test_output_applies_ceiling_then_wire_order():
    strip = VirtualStrip(1, brightness=60, color_order="GRB")
    strip.apply_frame([Color(255, 0, 0)])

    assert strip.get_output() == [(0, 60, 0)]
    # frame buffer itself is untouched
    assert strip.get_pixel(0) == Color(255, 0, 0)


def test_set_and_get_pixel_ignore_out_of_range():
    strip = VirtualStrip(2)
    strip.set_pixel(5, Color.red())
    assert strip.get_pixel(5) == BLACK


def test_clear():
    strip = VirtualStrip(3)
    strip.apply_frame([Color.white()] * 3)
    strip.clear()
    assert strip.get_frame() == [BLACK] * 3


def test_factory_builds_virtual_strip_from_grid():
    grid = GridConfig(width=4, height=2, color_order="BGR", brightness_ceiling=100)

    strip = create_strip(grid, StripConfig())

    assert isinstance(strip, VirtualStrip)
    assert strip.led_count == 8
    assert strip.brightness == 100
    assert strip.color_order == "BGR"

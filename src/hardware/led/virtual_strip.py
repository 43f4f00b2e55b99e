from __future__ import annotations
from typing import List, Sequence, Tuple
from models.color import Color, BLACK
from hardware.led.strip_interface import IPhysicalStrip


class VirtualStrip(IPhysicalStrip):
    """
    In-memory panel driver for development machines and tests.

    get_output() returns exactly what a WS281x chain would receive:
    brightness-ceiling scaled and channel-reordered.
    """

    def __init__(
        self,
        pixel_count: int,
        brightness: int = 255,
        color_order: str = "RGB",
    ):
        self.pixel_count = pixel_count
        self.brightness = brightness
        self.color_order = color_order
        self._buffer: List[Color] = [BLACK] * self.pixel_count
        self.show_count = 0

    @property
    def led_count(self) -> int:
        return self.pixel_count

    def set_pixel(self, index: int, color: Color) -> None:
        if 0 <= index < self.led_count:
            self._buffer[index] = color

    def get_pixel(self, index: int) -> Color:
        if 0 <= index < self.led_count:
            return self._buffer[index]
        return BLACK

    def get_frame(self) -> List[Color]:
        return list(self._buffer)

    def apply_frame(self, pixels: Sequence[Color]) -> None:
        frame = list(pixels[:self.led_count])
        if len(frame) < self.led_count:
            frame += [BLACK] * (self.led_count - len(frame))
        self._buffer = frame
        self.show()

    def get_output(self) -> List[Tuple[int, int, int]]:
        return [c.scaled(self.brightness).reordered(self.color_order) for c in self._buffer]

    def show(self) -> None:
        self.show_count += 1

    def clear(self) -> None:
        self._buffer = [BLACK] * self.led_count
        self.show()

# hardware/led/ws281x_strip.py
"""
WS281xStrip - rpi_ws281x hardware driver
==========================================
Concrete implementation of IPhysicalStrip for the WS2812B panel.

Features:
- Color order remapping (RGB/GRB/BRG/...) done here, chip set to RGB
- Brightness ceiling passed as PixelStrip global brightness
- Internal buffer (_buffer) as source of truth
- apply_frame() for atomic single-DMA push
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Sequence

from rpi_ws281x import PixelStrip, ws

from hardware.led.strip_interface import IPhysicalStrip
from models.color import Color, BLACK, COLOR_ORDER_MAP
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.HARDWARE)


@dataclass(frozen=True)
class WS281xConfig:
    """Configuration for WS281x LED chain."""
    gpio_pin: int
    led_count: int
    color_order: str = "RGB"
    frequency_hz: int = 800_000
    dma_channel: int = 10
    brightness: int = 255
    invert: bool = False
    channel: int = 0  # PWM channel (0 or 1)


class WS281xStrip(IPhysicalStrip):
    """
    WS281x hardware driver using rpi_ws281x library.

    - _buffer: List[Color] is canonical source of truth (logical RGB)
    - All reads (get_pixel) use _buffer (no hardware query)
    - apply_frame() pushes entire buffer in single DMA transfer
    """

    def __init__(self, config: WS281xConfig) -> None:
        self.config = config

        if config.color_order.upper() not in COLOR_ORDER_MAP:
            raise ValueError(f"Unsupported color order: {config.color_order}")

        self._color_order = config.color_order.upper()

        # Chip told RGB: reordering happens in _write_pixel so every driver
        # shares Color.reordered()
        self._pixel_strip = PixelStrip(
            config.led_count,
            config.gpio_pin,
            config.frequency_hz,
            config.dma_channel,
            config.invert,
            config.brightness,
            config.channel,
            ws.WS2811_STRIP_RGB,
        )
        self._pixel_strip.begin()

        self._buffer: List[Color] = [BLACK] * config.led_count

        log.info(
            "WS281xStrip initialized",
            gpio=config.gpio_pin,
            count=config.led_count,
            order=config.color_order,
            brightness=config.brightness,
            dma=config.dma_channel,
            pwm=config.channel,
        )

    # ==================== IPhysicalStrip API ====================

    @property
    def led_count(self) -> int:
        return self.config.led_count

    def set_pixel(self, index: int, color: Color) -> None:
        if 0 <= index < self.config.led_count:
            self._buffer[index] = color
            self._write_pixel(index, color)
        else:
            log.debug("set_pixel: index out of range", index=index)

    def get_pixel(self, index: int) -> Color:
        if 0 <= index < self.config.led_count:
            return self._buffer[index]
        return BLACK

    def get_frame(self) -> List[Color]:
        return list(self._buffer)

    def apply_frame(self, pixels: Sequence[Color]) -> None:
        """
        Atomic push of full frame to hardware (single DMA transfer).

        Pixels beyond the frame length are blanked.
        """
        length = min(len(pixels), self.config.led_count)

        for i in range(length):
            self._buffer[i] = pixels[i]
            self._write_pixel(i, pixels[i])

        for i in range(length, self.config.led_count):
            self._buffer[i] = BLACK
            self._write_pixel(i, BLACK)

        self.show()

    def show(self) -> None:
        try:
            self._pixel_strip.show()
        except Exception as ex:
            log.error("show failed", error=str(ex))

    def clear(self) -> None:
        """Turn off all LEDs (black + show)."""
        for i in range(self.config.led_count):
            self._buffer[i] = BLACK
            self._write_pixel(i, BLACK)
        self.show()

    def shutdown(self) -> None:
        log.info(f"Shutting down WS281xStrip GPIO {self.config.gpio_pin}")
        self.clear()

    # ==================== Helpers ====================

    def _write_pixel(self, index: int, color: Color) -> None:
        first, second, third = color.reordered(self._color_order)
        self._pixel_strip.setPixelColorRGB(index, first, second, third)

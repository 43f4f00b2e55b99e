# hardware/led/strip_interface.py
"""
IPhysicalStrip Protocol
========================
Hardware abstraction for the LED panel chain.
Minimal contract for any physical driver (WS281x, virtual, ...).
"""

from __future__ import annotations
from typing import Protocol, List, Sequence
from models.color import Color


class IPhysicalStrip(Protocol):
    """
    Protocol defining minimal LED strip hardware interface.

    Pixels are always addressed by physical index and given as logical RGB.
    Drivers apply color order and the brightness ceiling on output.

    All implementations must provide:
    - led_count: total pixels
    - set_pixel: buffer single pixel (no immediate show)
    - get_pixel: read buffered pixel state
    - apply_frame: atomic push of full frame
    - show: flush buffer to hardware
    - clear: turn off all LEDs
    """

    @property
    def led_count(self) -> int:
        """Total number of addressable pixels."""
        ...

    def set_pixel(self, index: int, color: Color) -> None:
        """
        Set pixel color in buffer (does not push to hardware).
        Call show() or apply_frame() to render.
        """
        ...

    def get_pixel(self, index: int) -> Color:
        """Read buffered pixel color."""
        ...

    def get_frame(self) -> List[Color]:
        """Read buffered pixel frame."""
        ...

    def apply_frame(self, pixels: Sequence[Color]) -> None:
        """
        Atomic push of entire frame to hardware.
        Preferred over multiple set_pixel + show.
        """
        ...

    def show(self) -> None:
        """Push buffered pixels to hardware."""
        ...

    def clear(self) -> None:
        """Turn off all LEDs (set to black + show)."""
        ...

"""
Hardware Layer

Low-level LED output only:

- IPhysicalStrip protocol
- VirtualStrip (in-memory)
- WS281xStrip (rpi_ws281x, imported on demand by the factory)
"""
from .led.strip_interface import IPhysicalStrip
from .led.virtual_strip import VirtualStrip
from .led.strip_factory import create_strip

__all__ = [
    "IPhysicalStrip",
    "VirtualStrip",
    "create_strip",
]

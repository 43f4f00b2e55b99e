"""
Grid configuration model

Immutable description of the physical panel: geometry, wiring, orientation
flags and output stage settings. Created once at startup from grid: in
config.yaml; an invalid grid is fatal.
"""

from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Any, Dict

from models.color import COLOR_ORDER_MAP
from models.enums import PanelRotation, WiringTopology


@dataclass(frozen=True)
class GridConfig:
    """Physical LED panel (8x8 WS2812B matrix by default)."""
    width: int = 8
    height: int = 8
    wiring: WiringTopology = WiringTopology.PROGRESSIVE
    rotation: PanelRotation = PanelRotation.DEG_0
    flip_x: bool = False
    flip_y: bool = False
    color_order: str = "RGB"
    brightness_ceiling: int = 60

    def __post_init__(self):
        for name in ("width", "height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ValueError(f"Grid {name} must be a positive integer, got {value!r}")

        if not isinstance(self.wiring, WiringTopology):
            raise ValueError(f"Unsupported wiring: {self.wiring!r}")

        if not isinstance(self.rotation, PanelRotation):
            raise ValueError(f"Unsupported rotation: {self.rotation!r}")

        if not isinstance(self.color_order, str) or self.color_order.upper() not in COLOR_ORDER_MAP:
            raise ValueError(f"Unsupported color order: {self.color_order!r}")

        ceiling = self.brightness_ceiling
        if isinstance(ceiling, bool) or not isinstance(ceiling, int) or not 0 <= ceiling <= 255:
            raise ValueError(f"Brightness ceiling must be 0-255, got {ceiling!r}")

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    def as_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["wiring"] = self.wiring.value
        data["rotation"] = self.rotation.value
        data["pixel_count"] = self.pixel_count
        return data

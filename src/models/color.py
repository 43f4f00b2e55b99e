"""
Color model - 8-bit RGB triple used by the frame buffer

Colors are immutable. The frame buffer always stores logical RGB; channel
reordering and the global brightness ceiling are applied on the way out to
the driver (see hardware/led).
"""

from dataclasses import dataclass
from typing import Dict, Tuple


# Channel mapping: position of R, G and B in the emitted triple
COLOR_ORDER_MAP: Dict[str, Tuple[int, int, int]] = {
    "RGB": (0, 1, 2),
    "RBG": (0, 2, 1),
    "GRB": (1, 0, 2),
    "GBR": (2, 0, 1),
    "BRG": (1, 2, 0),
    "BGR": (2, 1, 0),
}


@dataclass(frozen=True)
class Color:
    """
    Single pixel color

    Examples:
        c = Color(255, 0, 0)
        c.to_hex()              # "FF0000"
        c.scaled(60).to_rgb()   # (60, 0, 0)
        c.reordered("GRB")      # (0, 255, 0) as emitted on a GRB chain
    """

    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self):
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"Channel {name}={value} outside 0-255")

    # === CONSTRUCTORS ===

    @classmethod
    def gray(cls, intensity: int) -> 'Color':
        """Same value on all three channels"""
        return cls(intensity, intensity, intensity)

    # === CONVERSIONS ===

    def to_rgb(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def to_hex(self) -> str:
        """Upper-case RRGGBB"""
        return f"{self.r:02X}{self.g:02X}{self.b:02X}"

    def is_black(self) -> bool:
        return self.r == 0 and self.g == 0 and self.b == 0

    # === OUTPUT STAGE ===

    def scaled(self, ceiling: int) -> 'Color':
        """
        Apply global brightness ceiling (0-255).

        Every channel ends up <= ceiling; 255 leaves the color unchanged.
        """
        ceiling = max(0, min(255, ceiling))
        return Color(
            self.r * ceiling // 255,
            self.g * ceiling // 255,
            self.b * ceiling // 255,
        )

    def reordered(self, color_order: str) -> Tuple[int, int, int]:
        """Channel triple in the order the LED chip expects it on the wire"""
        r_i, g_i, b_i = COLOR_ORDER_MAP[color_order.upper()]
        ordered = [0, 0, 0]
        ordered[r_i] = self.r
        ordered[g_i] = self.g
        ordered[b_i] = self.b
        return (ordered[0], ordered[1], ordered[2])

    @staticmethod
    def white() -> 'Color':
        return Color(255, 255, 255)

    @staticmethod
    def red() -> 'Color':
        return Color(255, 0, 0)

    @staticmethod
    def green() -> 'Color':
        return Color(0, 255, 0)

    @staticmethod
    def blue() -> 'Color':
        return Color(0, 0, 255)

    def __str__(self) -> str:
        return f"Color(#{self.to_hex()})"


BLACK = Color(0, 0, 0)

# Board palette, pre-dimmed to the panel's safe brightness level
MATRIX_COLORS: Dict[str, Color] = {
    "BLACK": BLACK,
    "RED": Color(60, 0, 0),
    "GREEN": Color(0, 60, 0),
    "BLUE": Color(0, 0, 60),
    "YELLOW": Color(60, 60, 0),
    "CYAN": Color(0, 60, 60),
    "MAGENTA": Color(60, 0, 60),
    "WHITE": Color(60, 60, 60),
    "ORANGE": Color(60, 30, 0),
    "PURPLE": Color(30, 0, 60),
}

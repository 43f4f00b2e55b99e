"""
Enums for the matrix torus renderer
"""

from enum import Enum, auto


class WiringTopology(Enum):
    """
    How the LED chain snakes through the panel.

    PROGRESSIVE: every row runs left → right
    SERPENTINE: odd rows run right → left
    """
    PROGRESSIVE = "progressive"
    SERPENTINE = "serpentine"


class PanelRotation(Enum):
    """Panel rotation in degrees (stored in config, not applied by addressing)"""
    DEG_0 = 0
    DEG_90 = 90
    DEG_180 = 180
    DEG_270 = 270


class StripDriver(Enum):
    """Physical driver behind the frame buffer"""
    VIRTUAL = "virtual"    # In-memory strip (dev machine, tests)
    WS281X = "ws281x"      # rpi_ws281x DMA driver on Raspberry Pi


class ExportTarget(Enum):
    """Where diagnostic frame lines are written"""
    STDOUT = "stdout"
    FILE = "file"
    SERIAL = "serial"


class LogLevel(Enum):
    """Log severity levels"""
    DEBUG = auto()
    INFO = auto()
    WARN = auto()
    ERROR = auto()


class LogCategory(Enum):
    """Log categories for grouping related events"""
    CONFIG = auto()      # Configuration loading, validation
    HARDWARE = auto()    # LED strip drivers
    GRID = auto()        # Addressing / panel geometry
    RENDER_ENGINE = auto()
    EXPORT = auto()      # Diagnostic frame export
    CALIBRATION = auto()
    API = auto()
    SYSTEM = auto()      # Startup, shutdown, errors
    SHUTDOWN = auto()
    LIFECYCLE = auto()

    GENERAL = auto()     # Default general category

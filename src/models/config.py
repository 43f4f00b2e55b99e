"""
Application Configuration Models

Pure data models mirroring the sections of config.yaml. ConfigManager
parses the raw YAML dict into these; range checks live in __post_init__ so a
bad value fails at startup instead of mid-render.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional

from models.enums import ExportTarget, LogLevel, StripDriver
from models.grid import GridConfig


# ============================================================
#  Torus geometry / camera
# ============================================================

@dataclass(frozen=True)
class TorusConfig:
    """
    Torus geometry and projection.

    tube_radius (R1) and ring_radius (R2) are in object units; camera_distance
    (K2) pushes the object away from the viewer. zoom (K1) is derived from the
    grid width when left unset.
    """
    tube_radius: float = 1.0
    ring_radius: float = 2.0
    theta_step: float = 0.3
    phi_step: float = 0.1
    camera_distance: float = 5.0
    zoom: Optional[float] = None

    def __post_init__(self):
        if self.tube_radius <= 0 or self.ring_radius <= 0:
            raise ValueError("Torus radii must be positive")
        if self.theta_step <= 0 or self.phi_step <= 0:
            raise ValueError("Sampling steps must be positive")
        if self.camera_distance <= self.tube_radius + self.ring_radius:
            raise ValueError(
                f"camera_distance={self.camera_distance} puts the camera inside the torus "
                f"(needs > {self.tube_radius + self.ring_radius})"
            )
        if self.zoom is not None and self.zoom <= 0:
            raise ValueError("zoom must be positive")


@dataclass(frozen=True)
class ShadingConfig:
    """Empirical depth normalization: clamp01((1/z - depth_offset) * depth_scale)"""
    depth_offset: float = 0.15
    depth_scale: float = 4.0

    def __post_init__(self):
        if self.depth_scale <= 0:
            raise ValueError("depth_scale must be positive")


@dataclass(frozen=True)
class AnimationConfig:
    """Per-frame rotation deltas (radians) and pacing delay."""
    delta_a: float = 0.07
    delta_b: float = 0.03
    frame_interval_ms: int = 100

    def __post_init__(self):
        if self.frame_interval_ms < 0:
            raise ValueError("frame_interval_ms cannot be negative")


# ============================================================
#  Output / collaborators
# ============================================================

@dataclass(frozen=True)
class StripConfig:
    """LED driver selection and WS281x wiring."""
    driver: StripDriver = StripDriver.VIRTUAL
    gpio_pin: int = 18
    frequency_hz: int = 800_000
    dma_channel: int = 10
    invert: bool = False
    channel: int = 0


@dataclass(frozen=True)
class DiagnosticsConfig:
    """Line-oriented frame export (CONFIG:/FRAME: lines)."""
    enabled: bool = False
    target: ExportTarget = ExportTarget.STDOUT
    path: Optional[str] = None
    port: Optional[str] = None
    baud_rate: int = 115200
    queue_size: int = 4

    def __post_init__(self):
        if self.queue_size < 1:
            raise ValueError("diagnostics queue_size must be >= 1")
        if self.enabled and self.target == ExportTarget.FILE and not self.path:
            raise ValueError("diagnostics target 'file' requires a path")
        if self.enabled and self.target == ExportTarget.SERIAL and not self.port:
            raise ValueError("diagnostics target 'serial' requires a port")


@dataclass(frozen=True)
class ApiConfig:
    enabled: bool = False
    host: str = "0.0.0.0"
    port: int = 8000


@dataclass(frozen=True)
class CalibrationConfig:
    """Corner test pattern shown before the torus starts."""
    enabled: bool = False
    hold_seconds: float = 3.0


@dataclass(frozen=True)
class LoggingConfig:
    level: LogLevel = LogLevel.INFO
    use_colors: bool = True


@dataclass(frozen=True)
class AppConfig:
    """Everything loaded from config.yaml, typed."""
    grid: GridConfig = field(default_factory=GridConfig)
    torus: TorusConfig = field(default_factory=TorusConfig)
    shading: ShadingConfig = field(default_factory=ShadingConfig)
    animation: AnimationConfig = field(default_factory=AnimationConfig)
    strip: StripConfig = field(default_factory=StripConfig)
    diagnostics: DiagnosticsConfig = field(default_factory=DiagnosticsConfig)
    api: ApiConfig = field(default_factory=ApiConfig)
    calibration: CalibrationConfig = field(default_factory=CalibrationConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

"""
ShadingModel — lighting term and grayscale intensity per sample.

L approximates dot(surface normal, light direction) for a light coming from
above and behind the viewer. Samples with L <= 0 face away and are culled,
even when they won the depth test.

Accepted samples:
    depth_norm  = clamp01((1/z - depth_offset) * depth_scale)
    brightness  = depth_norm * clamp01(0.7 * L + 0.3)
    intensity   = 15 + round(brightness * 240)       → [15, 255]
"""

from __future__ import annotations
from typing import Optional

from engine.surface_sampler import SurfaceSample
from engine.transform import FrameRotation
from models.color import Color
from models.config import ShadingConfig

LIGHT_WEIGHT = 0.7
AMBIENT_BIAS = 0.3
INTENSITY_FLOOR = 15
INTENSITY_RANGE = 240


def clamp01(value: float) -> float:
    if value < 0.0:
        return 0.0
    if value > 1.0:
        return 1.0
    return value


class ShadingModel:

    def __init__(self, config: ShadingConfig):
        self.depth_offset = config.depth_offset
        self.depth_scale = config.depth_scale

    @staticmethod
    def luminance(sample: SurfaceSample, rot: FrameRotation) -> float:
        cos_theta = sample.cos_theta
        sin_theta = sample.sin_theta
        cos_phi = sample.cos_phi
        sin_phi = sample.sin_phi

        return (
            cos_phi * cos_theta * rot.sin_b
            - rot.cos_a * cos_theta * sin_phi
            - rot.sin_a * sin_theta
            + rot.cos_b * (rot.cos_a * sin_theta - cos_theta * rot.sin_a * sin_phi)
        )

    def normalize_depth(self, inverse_depth: float) -> float:
        return clamp01((inverse_depth - self.depth_offset) * self.depth_scale)

    def intensity(self, luminance: float, inverse_depth: float) -> int:
        brightness = self.normalize_depth(inverse_depth) * clamp01(LIGHT_WEIGHT * luminance + AMBIENT_BIAS)
        # half-up rounding; brightness is never negative
        return INTENSITY_FLOOR + int(brightness * INTENSITY_RANGE + 0.5)

    def shade(self, luminance: float, inverse_depth: float) -> Optional[Color]:
        """Grayscale color, or None when the sample faces away from the light."""
        if luminance <= 0.0:
            return None
        return Color.gray(self.intensity(luminance, inverse_depth))

"""
TransformPipeline — rotate torus samples into camera space and project.

Rotation A spins around the X axis, rotation B around the Z axis. Their
sines/cosines are frame-invariant and computed once in begin_frame().

Projection:
    x' = width/2  + K1 · (1/z) · x
    y' = height/2 − K1 · (1/z) · y
with K2 (camera distance) folded into z during rotation.
"""

from __future__ import annotations
import math
from dataclasses import dataclass

from engine.surface_sampler import SurfaceSample
from models.config import TorusConfig
from models.grid import GridConfig


@dataclass(frozen=True)
class FrameRotation:
    """sin/cos of both animation angles for one frame."""
    cos_a: float
    sin_a: float
    cos_b: float
    sin_b: float

    @classmethod
    def from_angles(cls, angle_a: float, angle_b: float) -> 'FrameRotation':
        return cls(
            cos_a=math.cos(angle_a),
            sin_a=math.sin(angle_a),
            cos_b=math.cos(angle_b),
            sin_b=math.sin(angle_b),
        )


@dataclass(frozen=True)
class ProjectedSample:
    """Camera-space point and its screen cell (may lie outside the grid)."""
    x: float
    y: float
    z: float
    inverse_depth: float
    screen_x: int
    screen_y: int


def default_zoom(grid: GridConfig, torus: TorusConfig) -> float:
    """K1 sized so the torus spans roughly 3/8 of the grid width at K2."""
    return grid.width * torus.camera_distance * 3.0 / (8.0 * (torus.tube_radius + torus.ring_radius))


class TransformPipeline:

    def __init__(self, grid: GridConfig, torus: TorusConfig):
        self.camera_distance = torus.camera_distance
        self.zoom = torus.zoom if torus.zoom is not None else default_zoom(grid, torus)
        self.center_x = grid.width / 2.0
        self.center_y = grid.height / 2.0

    def begin_frame(self, angle_a: float, angle_b: float) -> FrameRotation:
        return FrameRotation.from_angles(angle_a, angle_b)

    def project(self, sample: SurfaceSample, rot: FrameRotation) -> ProjectedSample:
        cx = sample.circle_x
        cy = sample.circle_y
        cos_phi = sample.cos_phi
        sin_phi = sample.sin_phi

        x = cx * (rot.cos_b * cos_phi + rot.sin_a * rot.sin_b * sin_phi) - cy * rot.cos_a * rot.sin_b
        y = cx * (rot.sin_b * cos_phi - rot.sin_a * rot.cos_b * sin_phi) + cy * rot.cos_a * rot.cos_b
        z = self.camera_distance + rot.cos_a * cx * sin_phi + cy * rot.sin_a
        ooz = 1.0 / z

        # floor, not int(): -0.5 must land off-grid rather than on column 0
        screen_x = math.floor(self.center_x + self.zoom * ooz * x)
        screen_y = math.floor(self.center_y - self.zoom * ooz * y)

        return ProjectedSample(
            x=x,
            y=y,
            z=z,
            inverse_depth=ooz,
            screen_x=screen_x,
            screen_y=screen_y,
        )

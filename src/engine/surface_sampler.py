"""
SurfaceSampler — fixed (θ, φ) sweep over a torus surface.

θ walks around the tube cross-section, φ sweeps the tube around the ring.
The full sequence is generated once at construction; every frame iterates
the same tuple in the same order (outer θ, inner φ), which is what makes
depth ties and repeated frames deterministic.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Iterator, List, Tuple

from models.config import TorusConfig
from models.enums import LogCategory
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.RENDER_ENGINE)

TAU = 2.0 * math.pi


@dataclass(frozen=True)
class SurfaceSample:
    """One point of the torus in its local frame, plus cached trig terms."""
    theta: float
    phi: float
    cos_theta: float
    sin_theta: float
    cos_phi: float
    sin_phi: float
    circle_x: float   # R2 + R1·cos θ
    circle_y: float   # R1·sin θ


def angle_steps(step: float) -> List[float]:
    """
    Angles k*step covering [0, 2π).

    Computed from the integer k rather than accumulated, so the count and
    values are stable across platforms.
    """
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    count = math.ceil(TAU / step)
    return [k * step for k in range(count) if k * step < TAU]


class SurfaceSampler:
    """
    Precomputed torus sample sequence.

    Usage:
        sampler = SurfaceSampler(TorusConfig())
        for sample in sampler:
            ...
    """

    def __init__(self, config: TorusConfig):
        self.config = config
        self.thetas = angle_steps(config.theta_step)
        self.phis = angle_steps(config.phi_step)
        self._samples: Tuple[SurfaceSample, ...] = tuple(self._generate())

        log.info(
            "Surface sampler ready",
            samples=len(self._samples),
            theta_steps=len(self.thetas),
            phi_steps=len(self.phis),
        )

    def _generate(self) -> Iterator[SurfaceSample]:
        r1 = self.config.tube_radius
        r2 = self.config.ring_radius

        for theta in self.thetas:
            cos_theta = math.cos(theta)
            sin_theta = math.sin(theta)
            circle_x = r2 + r1 * cos_theta
            circle_y = r1 * sin_theta

            for phi in self.phis:
                yield SurfaceSample(
                    theta=theta,
                    phi=phi,
                    cos_theta=cos_theta,
                    sin_theta=sin_theta,
                    cos_phi=math.cos(phi),
                    sin_phi=math.sin(phi),
                    circle_x=circle_x,
                    circle_y=circle_y,
                )

    @property
    def samples(self) -> Tuple[SurfaceSample, ...]:
        return self._samples

    def __len__(self) -> int:
        return len(self._samples)

    def __iter__(self) -> Iterator[SurfaceSample]:
        return iter(self._samples)

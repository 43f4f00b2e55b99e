"""
Models package - Data models for the matrix torus renderer
"""

from .enums import WiringTopology, PanelRotation, StripDriver, ExportTarget, LogLevel, LogCategory
from .color import Color, BLACK, COLOR_ORDER_MAP, MATRIX_COLORS
from .grid import GridConfig
from .frame import FrameBuffer, AnimationState, CommittedFrame

__all__ = [
    'WiringTopology',
    'PanelRotation',
    'StripDriver',
    'ExportTarget',
    'LogLevel',
    'LogCategory',
    'Color',
    'BLACK',
    'COLOR_ORDER_MAP',
    'MATRIX_COLORS',
    'GridConfig',
    'FrameBuffer',
    'AnimationState',
    'CommittedFrame',
]

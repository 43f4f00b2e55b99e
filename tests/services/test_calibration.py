from grid_layer.grid_addressing import GridAddressing
from models.color import MATRIX_COLORS, BLACK
from models.enums import WiringTopology
from models.frame import FrameBuffer
from models.grid import GridConfig
from services.calibration import draw_calibration_pattern


def _draw(config: GridConfig) -> FrameBuffer:
    buffer = FrameBuffer(config.pixel_count)
    draw_calibration_pattern(buffer, GridAddressing(config))
    return buffer


def test_progressive_corners():
    buffer = _draw(GridConfig())

    assert buffer[0] == MATRIX_COLORS["RED"]
    assert buffer[7] == MATRIX_COLORS["GREEN"]
    assert buffer[56] == MATRIX_COLORS["BLUE"]
    assert buffer[63] == MATRIX_COLORS["WHITE"]


def test_top_row_marks_orientation():
    buffer = _draw(GridConfig())

    assert all(buffer[i] == MATRIX_COLORS["YELLOW"] for i in range(1, 7))
    assert buffer.lit_count() == 10


def test_serpentine_last_row_reversed():
    buffer = _draw(GridConfig(wiring=WiringTopology.SERPENTINE))

    # row 7 is odd: (0,7) is the last LED of the chain
    assert buffer[63] == MATRIX_COLORS["BLUE"]
    assert buffer[56] == MATRIX_COLORS["WHITE"]


def test_flip_x_moves_origin():
    buffer = _draw(GridConfig(flip_x=True))
    assert buffer[7] == MATRIX_COLORS["RED"]
    assert buffer[0] == MATRIX_COLORS["GREEN"]


def test_previous_content_cleared():
    config = GridConfig()
    buffer = FrameBuffer(config.pixel_count)
    buffer.fill(MATRIX_COLORS["PURPLE"])

    draw_calibration_pattern(buffer, GridAddressing(config))

    assert buffer[20] == BLACK


def test_single_row_panel_keeps_corner_colors():
    buffer = _draw(GridConfig(width=4, height=1))
    assert buffer[0] == MATRIX_COLORS["RED"]
    assert buffer[3] == MATRIX_COLORS["GREEN"]

import pytest

from models.color import Color, BLACK
from models.frame import AnimationState, CommittedFrame, FrameBuffer


class TestFrameBuffer:

    def test_starts_black(self):
        buffer = FrameBuffer(64)
        assert len(buffer) == 64
        assert all(c == BLACK for c in buffer)

    def test_zero_pixels_rejected(self):
        with pytest.raises(ValueError):
            FrameBuffer(0)

    def test_clear_resets_to_background(self):
        buffer = FrameBuffer(4)
        buffer.set(2, Color.gray(200))
        assert buffer.lit_count() == 1

        buffer.clear()
        assert buffer.lit_count() == 0

    def test_snapshot_is_detached_from_later_writes(self):
        buffer = FrameBuffer(4)
        buffer.set(0, Color.red())
        snap = buffer.snapshot()

        buffer.set(0, Color.blue())

        assert snap[0] == Color.red()
        assert isinstance(snap, tuple)


class TestAnimationState:

    def test_advance_accumulates_deltas(self):
        state = AnimationState()
        state.advance(0.07, 0.03)
        state.advance(0.07, 0.03)

        assert state.angle_a == pytest.approx(0.14)
        assert state.angle_b == pytest.approx(0.06)
        assert state.frame_index == 2


def test_committed_frame_hex_and_equality_ignore_timestamp():
    pixels = (Color.gray(15), BLACK)
    a = CommittedFrame(index=1, angle_a=0.0, angle_b=0.0, pixels=pixels, timestamp=1.0)
    b = CommittedFrame(index=1, angle_a=0.0, angle_b=0.0, pixels=pixels, timestamp=2.0)

    assert a == b
    assert a.to_hex() == ["0F0F0F", "000000"]
    assert a.pixel_count == 2
    assert a.lit_count() == 1

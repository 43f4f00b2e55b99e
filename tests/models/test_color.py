import pytest

from models.color import Color, BLACK, COLOR_ORDER_MAP, MATRIX_COLORS


class TestColorModel:

    def test_channels_outside_byte_range_rejected(self):
        with pytest.raises(ValueError):
            Color(256, 0, 0)
        with pytest.raises(ValueError):
            Color(0, -1, 0)

    def test_hex_is_upper_case_rrggbb(self):
        assert Color(255, 10, 0).to_hex() == "FF0A00"
        assert BLACK.to_hex() == "000000"

    def test_is_black(self):
        assert BLACK.is_black()
        assert not Color.gray(15).is_black()


class TestOutputStage:

    def test_scaled_caps_every_channel_at_ceiling(self):
        assert Color.white().scaled(60) == Color(60, 60, 60)
        assert Color(255, 128, 0).scaled(60).to_rgb() == (60, 30, 0)

    def test_scaled_full_brightness_is_identity(self):
        c = Color(17, 99, 254)
        assert c.scaled(255) == c

    def test_scaled_zero_turns_panel_off(self):
        assert Color.white().scaled(0) == BLACK

    @pytest.mark.parametrize("order,expected", [
        ("RGB", (1, 2, 3)),
        ("RBG", (1, 3, 2)),
        ("GRB", (2, 1, 3)),
        ("GBR", (2, 3, 1)),
        ("BRG", (3, 1, 2)),
        ("BGR", (3, 2, 1)),
    ])
    def test_reordered_emits_channels_in_wire_order(self, order, expected):
        assert Color(1, 2, 3).reordered(order) == expected

    def test_every_order_is_a_permutation(self):
        for mapping in COLOR_ORDER_MAP.values():
            assert sorted(mapping) == [0, 1, 2]

    def test_palette_is_pre_dimmed(self):
        for color in MATRIX_COLORS.values():
            assert max(color.to_rgb()) <= 60

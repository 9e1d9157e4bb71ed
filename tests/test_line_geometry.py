"""Tests for bounding polygon measurements."""

import pytest

from bookcover_matcher import LineGeometry


class TestLineGeometry:
    """Tests for height, width, orientation and text size."""

    def test_axis_aligned_box(self):
        geometry = LineGeometry()
        polygon = [10, 20, 110, 20, 110, 70, 10, 70]

        assert geometry.height(polygon) == 50
        assert geometry.width(polygon) == 100
        assert geometry.is_vertical(polygon) is False
        assert geometry.text_size(polygon) == 50
        assert geometry.has_geometry(polygon) is True

    def test_degenerate_box_measures_zero(self):
        geometry = LineGeometry()
        polygon = [10] * 8

        assert geometry.height(polygon) == 0
        assert geometry.width(polygon) == 0
        assert geometry.text_size(polygon) == 0
        assert geometry.is_vertical(polygon) is False
        assert geometry.has_geometry(polygon) is False

    @pytest.mark.parametrize("polygon", [None, [], [0, 0, 10, 0]])
    def test_missing_or_short_polygon_measures_zero(self, polygon):
        geometry = LineGeometry()

        assert geometry.height(polygon) == 0
        assert geometry.width(polygon) == 0
        assert geometry.text_size(polygon) == 0
        assert geometry.is_vertical(polygon) is False

    def test_tall_box_is_vertical_and_sized_by_width(self):
        geometry = LineGeometry()
        polygon = [0, 0, 30, 0, 30, 300, 0, 300]

        assert geometry.is_vertical(polygon) is True
        assert geometry.text_size(polygon) == 30

    def test_zero_width_box_has_no_size(self):
        geometry = LineGeometry()
        polygon = [10, 0, 10, 0, 10, 50, 10, 50]

        assert geometry.text_size(polygon) == 0

    def test_vertical_aspect_ratio_margin(self):
        """With a margin, slightly tall boxes still count as horizontal."""
        polygon = [0, 0, 40, 0, 40, 50, 0, 50]

        assert LineGeometry().is_vertical(polygon) is True
        assert LineGeometry(vertical_aspect_ratio=1.5).is_vertical(polygon) is False

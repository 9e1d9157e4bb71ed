from typing import Sequence

Polygon = Sequence[float]

class LineGeometry:
    """
    Measurements over an 8-point bounding polygon [x0,y0, x1,y1, x2,y2, x3,y3]
    whose corners are top-left, top-right, bottom-right and bottom-left.

    A missing, short or zero-sized polygon measures 0 everywhere and is never vertical.
    """
    POINT_COUNT = 8

    def __init__(self, vertical_aspect_ratio: float = 1.0):
        """
        Args:
            vertical_aspect_ratio : A line is vertical when height > width * vertical_aspect_ratio
        """
        self.vertical_aspect_ratio = vertical_aspect_ratio

    @classmethod
    def height(cls, polygon: Polygon | None) -> float:
        """
        Bottom-right y minus top-left y.
        """
        if polygon is None or len(polygon) < cls.POINT_COUNT:
            return 0.0
        return float(polygon[5] - polygon[1])

    @classmethod
    def width(cls, polygon: Polygon | None) -> float:
        """
        Top-right x minus top-left x.
        """
        if polygon is None or len(polygon) < cls.POINT_COUNT:
            return 0.0
        return float(polygon[2] - polygon[0])

    def is_vertical(self, polygon: Polygon | None) -> bool:
        height = self.height(polygon)
        width  = self.width(polygon)
        if height <= 0 or width <= 0:
            return False
        return height > width * self.vertical_aspect_ratio

    def text_size(self, polygon: Polygon | None) -> float:
        """
        Scalar font size of a line: its height when horizontal, its width when vertical.
        """
        height = self.height(polygon)
        width  = self.width(polygon)
        if height <= 0 or width <= 0:
            return 0.0
        return width if self.is_vertical(polygon) else height

    def has_geometry(self, polygon: Polygon | None) -> bool:
        return self.text_size(polygon) > 0

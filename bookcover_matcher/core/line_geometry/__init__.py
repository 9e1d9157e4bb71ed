from .geometry import LineGeometry

__all__ = ['LineGeometry']

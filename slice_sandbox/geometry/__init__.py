"""Pure polygon geometry: shape generators, metrics and blade splitting."""

from .generators import blade_points, circle_edge_count, circle_points, rectangle_points
from .metrics import (
    bounding_box,
    calculate_area,
    is_degenerate,
    relative_center_of_mass,
    signed_area,
    translate,
)
from .splitter import CutLine, split_polygon

__all__ = [
    "blade_points",
    "circle_edge_count",
    "circle_points",
    "rectangle_points",
    "bounding_box",
    "calculate_area",
    "is_degenerate",
    "relative_center_of_mass",
    "signed_area",
    "translate",
    "CutLine",
    "split_polygon",
]

import math


class Config:
    # Slicing
    SPLIT_LENGTH_MARGIN = 10.0  # Blade is pulled back and extended by this much so it cuts through the full shape
    SLICE_WIDTH = 5.0  # Width of the blade used for interactive slicing
    MINIMUM_AREA = 100.0  # Bodies with less area than this are destroyed
    BLADE_NORMAL_ANGLE = math.pi / 2  # Rotation applied to the cut direction to offset the blade width

    # Polygon generators
    CIRCLE_MIN_EDGES = 3
    CIRCLE_EDGES_PER_LOG_RADIUS = 8
    DEFAULT_RECTANGLE_HALF_EXTENTS = (100.0, 100.0)
    DEFAULT_CIRCLE_RADIUS = 50.0

    # Physics (screen space, Y increases downward)
    GRAVITY = 980.0
    TIME_STEP = 1.0 / 60.0
    FPS = 60
    BODY_FRICTION = 0.7
    BODY_ELASTICITY = 0.1
    CONVEX_DECOMPOSITION_TOLERANCE = 0.5

    # Viewport boundaries
    VIEWPORT_WIDTH = 1152.0
    VIEWPORT_HEIGHT = 648.0
    MIN_VIEWPORT_SIZE = 300.0
    BOUNDARY_DEPTH = 500.0  # Thickness of the walls placed outside the viewport
    CULL_MARGIN = 1000.0  # Objects further than this outside the viewport are destroyed

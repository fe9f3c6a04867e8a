"""
Slice Sandbox Package

This package provides a 2D physics sandbox in which polygon bodies can be cut
apart along a dragged line. It encompasses several key modules:

  - geometry: Pure polygon helpers: shape generators, area/centroid metrics and
    the blade splitter that clips a polygon into pieces.
  - bodies: Sliceable body kinds (generic polygon, rectangle, circle) and the
    registry used to spawn them by tag.
  - physics: The pymunk-backed engine that owns the space, creates and destroys
    objects and answers ray, point and overlap queries.
  - slicer: The orchestrator that finds every body crossed by a cut and splits
    each one into re-centred replacement bodies.
  - controller: The explicit input state machine that turns mouse drags into
    slicing, drawing and deleting.
  - scenes: JSON presets describing starting layouts.
  - utils: Configuration constants and shared dataclasses.
"""

"""motionframe utility modules - pure functions organized by domain.

Modules:
    geometry: Bounding boxes and arc-length lookup along polylines
    math_utils: Float promotion and tolerance checks
    easing: Easing functions for keyframe segments
    logging: Coloured console logging helpers
"""

__all__ = [
    "geometry",
    "math_utils",
    "easing",
    "logging",
]

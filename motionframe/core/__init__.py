"""Core domain logic for motionframe.

Modules:
    elements: Objects, actions and frame ranges
    context: Current/previous object and action of a resolution pass
    frames: Frame range assignment
    interpolation: Per-frame progress and action evaluation
    transitions: Translation, rotation and scaling values
    animation: Keyframe curves and schedule strings
    timeline: Full resolution pass and per-frame queries
    errors: Fatal error and non-fatal warnings
"""

__all__ = [
    "elements",
    "context",
    "frames",
    "interpolation",
    "transitions",
    "animation",
    "timeline",
    "errors",
]

"""
motionframe - frame timeline resolution for procedural animations.

Given objects (persistent visual entities) and their actions (time-bounded
behaviours), motionframe assigns every element a concrete frame range and
computes, per rendered frame, the value of each action's transition.

Package structure:
    motionframe/
        core/       - Elements, frame assignment, interpolation, timeline
        utils/      - Pure helpers (geometry, math, easing, logging)
        config/     - Resolution settings
"""

from motionframe.core.animation import Animation, FunctionCurve
from motionframe.core.context import ElementKind, ResolutionContext
from motionframe.core.elements import Action, FrameRange, Object, ObjectSetting, RelativeFrames
from motionframe.core.errors import (
    AnimationDomainWarning,
    FrameResolutionWarning,
    MissingFrameRangeError,
    OutOfParentRangeWarning,
)
from motionframe.core.frames import compute_frames, default_frames, get_current_setting
from motionframe.core.interpolation import (
    action_schedule,
    check_animation_domain,
    evaluate_action,
    get_interpolation,
)
from motionframe.core.timeline import Timeline
from motionframe.core.transitions import (
    Rotation,
    Scaling,
    Translation,
    get_position,
    get_scale,
    resolve_transition,
)

__version__ = "0.1.0"
__all__ = [
    "Action",
    "Animation",
    "AnimationDomainWarning",
    "ElementKind",
    "FrameRange",
    "FrameResolutionWarning",
    "FunctionCurve",
    "MissingFrameRangeError",
    "Object",
    "ObjectSetting",
    "OutOfParentRangeWarning",
    "RelativeFrames",
    "ResolutionContext",
    "Rotation",
    "Scaling",
    "Timeline",
    "Translation",
    "action_schedule",
    "check_animation_domain",
    "compute_frames",
    "default_frames",
    "evaluate_action",
    "get_current_setting",
    "get_interpolation",
    "get_position",
    "get_scale",
    "resolve_transition",
]

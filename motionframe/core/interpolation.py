"""Per-frame evaluation of actions.

Maps a frame to the normalized progress of an action, runs the action's
curve at that progress and resolves the result through its transition.
Evaluation only reads the action, so it can run for any frame in any order
once frame ranges are resolved.
"""

from typing import Optional

import numpy as np
import pandas as pd

from motionframe.core.elements import Action, FrameRange
from motionframe.core.errors import AnimationDomainWarning
from motionframe.core.transitions import resolve_transition
from motionframe.utils import logging as log

DEFAULT_DOMAIN_ATOL = 1e-4


def get_interpolation(frame_range: FrameRange, frame: int) -> float:
    """Relative position of ``frame`` inside ``frame_range``.

    Args:
        frame_range: Inclusive frame range of the element
        frame: Current frame

    Returns:
        0.0 at the first frame and exactly 1.0 at the last one. Frames after
        the range are clamped to 1.0; frames before it give negative values.

    Examples:
        >>> get_interpolation(FrameRange(1, 11), 6)
        0.5
        >>> get_interpolation(FrameRange(1, 11), 11)
        1.0
        >>> get_interpolation(FrameRange(4, 4), 4)
        1.0
    """
    if frame == frame_range.end or len(frame_range) == 1:
        return 1.0
    t = (frame - frame_range.start) / (len(frame_range) - 1)
    return min(1.0, t)


def check_animation_domain(anim, atol: float = DEFAULT_DOMAIN_ATOL) -> Optional[AnimationDomainWarning]:
    """Return a warning if the curve does not end at t=1.0, else None."""
    domain_end = getattr(anim, "domain_end", 1.0)
    if np.isclose(domain_end, 1.0, rtol=0.0, atol=atol):
        return None
    return AnimationDomainWarning(domain_end)


def _require_frames(action: Action) -> FrameRange:
    if action.frame_range is None:
        raise RuntimeError(f"{action!r} has no resolved frames; run compute_frames first")
    return action.frame_range


def _evaluate(action: Action, frame: int):
    t = get_interpolation(_require_frames(action), frame)
    return resolve_transition(action.anim.at(t), action.transition)


def evaluate_action(
    action: Action,
    frame: int,
    atol: float = DEFAULT_DOMAIN_ATOL,
    check_domain: bool = True,
):
    """Value of ``action`` at ``frame``, ready for the rendering backend.

    Logs an ``AnimationDomainWarning`` if the action's curve does not span
    [0, 1]; the value is still returned. Callers that already checked the
    curve once can pass ``check_domain=False``.

    Raises:
        RuntimeError: If the action has no resolved frames
    """
    if check_domain:
        warning = check_animation_domain(action.anim, atol)
        if warning is not None:
            log.warning(str(warning))
    return _evaluate(action, frame)


def action_schedule(action: Action, atol: float = DEFAULT_DOMAIN_ATOL) -> pd.Series:
    """Evaluate ``action`` at every frame of its range.

    Returns:
        Series indexed by frame number. Vector values are stored as arrays
        in an object series.
    """
    frame_range = _require_frames(action)
    warning = check_animation_domain(action.anim, atol)
    if warning is not None:
        log.warning(str(warning))

    values = [_evaluate(action, frame) for frame in frame_range]
    index = pd.RangeIndex(frame_range.start, frame_range.end + 1, name="frame")
    if all(np.ndim(v) == 0 for v in values):
        return pd.Series(values, index=index, dtype=float, name=action.name)
    data = np.empty(len(values), dtype=object)
    for i, value in enumerate(values):
        data[i] = value
    return pd.Series(data, index=index, name=action.name)

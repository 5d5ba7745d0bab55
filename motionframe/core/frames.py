"""Frame range assignment for objects and actions.

``compute_frames`` walks siblings in declaration order and gives each one a
concrete frame range: explicit ranges are kept, everything else is derived
from the previous sibling or the parent by a policy function. Ranges that
leave the parent's range are reported, never rejected.
"""

from typing import Callable, List, Optional, Sequence

from motionframe.core.context import ResolutionContext
from motionframe.core.elements import (
    FrameRange,
    FramesDeclaration,
    Object,
    ObjectSetting,
    RelativeFrames,
    TimelineElement,
)
from motionframe.core.errors import MissingFrameRangeError, OutOfParentRangeWarning
from motionframe.utils import logging as log

FramesPolicy = Callable[
    [FramesDeclaration, Optional[FrameRange], Optional[FrameRange], bool], FrameRange
]


def default_frames(
    frames: FramesDeclaration,
    last_range: Optional[FrameRange],
    parent_range: Optional[FrameRange],
    is_first: bool,
) -> FrameRange:
    """Derive a frame range for an element without explicit frames.

    Args:
        frames: The element's declaration (None or RelativeFrames)
        last_range: Range of the previous sibling, or the parent's range for
            the first child
        parent_range: Range of the parent, None at top level
        is_first: Whether the element is the first of its siblings

    Returns:
        - None: the same frames as ``last_range``
        - RelativeFrames: ``length`` frames starting at the parent's first
          frame for the first child, otherwise ``gap`` frames after the
          previous sibling ends

    Examples:
        >>> default_frames(None, FrameRange(1, 30), None, False)
        FrameRange(start=1, end=30)
        >>> default_frames(RelativeFrames(10), FrameRange(1, 30), None, False)
        FrameRange(start=31, end=40)
        >>> default_frames(RelativeFrames(5), FrameRange(11, 50), FrameRange(11, 50), True)
        FrameRange(start=11, end=15)
    """
    if frames is None:
        return last_range
    if isinstance(frames, RelativeFrames):
        if is_first and parent_range is not None:
            start = parent_range.start + frames.gap
        else:
            start = last_range.end + 1 + frames.gap
        return FrameRange(start, start + frames.length - 1)
    if isinstance(frames, FrameRange):
        return frames
    raise TypeError(f"Cannot derive frames from {frames!r}")


def compute_frames(
    elements: Sequence[TimelineElement],
    parent: Optional[Object] = None,
    *,
    context: ResolutionContext,
    parent_index: int = 0,
    policy: FramesPolicy = default_frames,
    recursive: bool = False,
    log_warnings: bool = True,
) -> List[OutOfParentRangeWarning]:
    """Set ``frame_range`` on every element that does not have one yet.

    Args:
        elements: Objects or actions in declaration order
        parent: Object owning ``elements``; its range must already be resolved
        context: Tracker updated with every element before it is resolved
        parent_index: Number of the parent used in warnings (Background is #1)
        policy: Function deriving a range for elements without explicit frames
        recursive: Resolve the actions of each object right after the object,
            so the context sees objects and actions in declaration order
        log_warnings: Also log each warning as it is found

    Returns:
        Warnings for elements whose range leaves the parent's range

    Raises:
        MissingFrameRangeError: If the first element has no frames and there
            is no parent range to derive them from
    """
    available: Optional[FrameRange] = None
    last_range: Optional[FrameRange] = None
    if parent is not None:
        available = parent.frame_range
        last_range = parent.frame_range

    warnings: List[OutOfParentRangeWarning] = []
    is_first = True
    for counter, elem in enumerate(elements, start=1):
        elem.index = counter
        context.visit(elem)

        if elem.frame_range is None:
            if last_range is None:
                raise MissingFrameRangeError(counter, parent_index)
            elem.set_frames(policy(elem.frames, last_range, available, is_first))
        last_range = elem.frame_range

        if not elem.frame_range.issubset(available):
            warning = OutOfParentRangeWarning(counter, parent_index, elem.frame_range, available)
            if log_warnings:
                log.warning(str(warning))
            warnings.append(warning)
        is_first = False

        if recursive and isinstance(elem, Object) and elem.actions:
            warnings.extend(compute_frames(
                elem.actions,
                parent=elem,
                context=context,
                parent_index=counter,
                policy=policy,
                log_warnings=log_warnings,
            ))

    return warnings


def get_current_setting(context: ResolutionContext) -> ObjectSetting:
    """Return the rendering setting of the object currently being defined."""
    return context.get_current_setting()

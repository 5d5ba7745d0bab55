"""Errors and warnings raised while resolving a timeline.

``MissingFrameRangeError`` is fatal and aborts a resolution pass. The warning
classes are never raised by motionframe itself; they are collected and logged
so that every problem of a pass is reported at once.
"""


class MissingFrameRangeError(ValueError):
    """An element has no frames and nothing precedes it to derive them from."""

    def __init__(self, element_index: int, parent_index: int = 0):
        self.element_index = element_index
        self.parent_index = parent_index
        where = f"element #{element_index}"
        if parent_index:
            where += f" of Object #{parent_index}"
        super().__init__(
            f"Frames need to be defined explicitly in the initial Object/Background "
            f"or Action ({where} has no frames)."
        )


class FrameResolutionWarning(UserWarning):
    """Base class for non-fatal problems found while resolving frames."""


class OutOfParentRangeWarning(FrameResolutionWarning):
    """An element's frames are not contained in its parent's frames."""

    def __init__(self, element_index: int, parent_index: int, got, available):
        self.element_index = element_index
        self.parent_index = parent_index
        self.got = got
        self.available = available
        super().__init__(
            f"Action defined outside the frame range of the parent object. "
            f"Action #{element_index} for Object #{parent_index} is defined for frames "
            f"{got} but Object #{parent_index} exists only for {available}. "
            f"(Info: Background is counted as Object #1)"
        )


class AnimationDomainWarning(FrameResolutionWarning):
    """An animation curve does not end at t=1.0."""

    def __init__(self, domain_end: float):
        self.domain_end = domain_end
        super().__init__(
            f"Animations should be defined from 0.0 to 1.0 (curve ends at t={domain_end})"
        )

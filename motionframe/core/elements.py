"""Objects, actions and the frame ranges they occupy.

An ``Object`` is a persistent visual entity (a background, a shape, ...).
An ``Action`` is a time-bounded behaviour attached to an object (a move, a
fade, ...). Both declare the frames they want and receive a resolved
``FrameRange`` from ``compute_frames``.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Callable, Iterator, List, Optional, Union

import numpy as np

from motionframe.core.animation import Animation, FunctionCurve
from motionframe.utils.math_utils import isapprox_discrete


@dataclass(frozen=True)
class FrameRange:
    """Inclusive integer frame interval ``[start, end]``.

    Examples:
        >>> r = FrameRange(1, 30)
        >>> len(r)
        30
        >>> 30 in r
        True
        >>> FrameRange(5, 10).issubset(r)
        True
    """

    start: int
    end: int

    def __post_init__(self):
        if self.start > self.end:
            raise ValueError(f"FrameRange start ({self.start}) must be <= end ({self.end})")

    def __len__(self) -> int:
        return self.end - self.start + 1

    def __contains__(self, frame) -> bool:
        return self.start <= frame <= self.end

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.start, self.end + 1))

    def __str__(self) -> str:
        return f"{self.start}:{self.end}"

    def issubset(self, other: Optional["FrameRange"]) -> bool:
        """``None`` stands for the unbounded range."""
        if other is None:
            return True
        return other.start <= self.start and self.end <= other.end

    def shift(self, offset: int) -> "FrameRange":
        return FrameRange(self.start + offset, self.end + offset)

    @classmethod
    def from_any(cls, value) -> "FrameRange":
        """Build from a FrameRange, a ``(start, end)`` pair or a python ``range``."""
        if isinstance(value, FrameRange):
            return value
        if isinstance(value, range):
            if value.step != 1 or len(value) == 0:
                raise ValueError(f"Only non-empty contiguous ranges are frame ranges, got {value}")
            return cls(value.start, value.stop - 1)
        start, end = value
        return cls(_as_frame(start), _as_frame(end))


@dataclass(frozen=True)
class RelativeFrames:
    """Request ``length`` frames placed after the previous sibling.

    The first child under a parent starts at the parent's first frame instead.
    ``gap`` leaves empty frames between the previous sibling and this one.
    """

    length: int
    gap: int = 0

    def __post_init__(self):
        if self.length < 1:
            raise ValueError(f"RelativeFrames length must be >= 1, got {self.length}")
        if self.gap < 0:
            raise ValueError(f"RelativeFrames gap must be >= 0, got {self.gap}")


FramesDeclaration = Union[FrameRange, RelativeFrames, None]


def _as_frame(value) -> int:
    """Frame numbers computed in floating point must still land on a frame."""
    if not isapprox_discrete(value):
        raise ValueError(f"Frame number {value} is not a whole number")
    return int(round(value))


def _as_declaration(frames) -> FramesDeclaration:
    if frames is None or isinstance(frames, (FrameRange, RelativeFrames)):
        return frames
    return FrameRange.from_any(frames)


def _vec2(value) -> np.ndarray:
    arr = np.asarray(value, dtype=np.float64)
    if arr.ndim == 0:
        arr = np.array([float(arr), float(arr)])
    return arr


@dataclass(eq=False)
class ObjectSetting:
    """Rendering state of an object handed to the drawing backend."""

    position: np.ndarray = field(default_factory=lambda: np.zeros(2))
    scale: np.ndarray = field(default_factory=lambda: np.ones(2))
    angle: float = 0.0
    opacity: float = 1.0
    line_width: float = 1.0

    def __post_init__(self):
        self.position = _vec2(self.position)
        self.scale = _vec2(self.scale)

    def copy(self) -> "ObjectSetting":
        return replace(self, position=self.position.copy(), scale=self.scale.copy())


class TimelineElement:
    """Shared frame bookkeeping of objects and actions."""

    def __init__(self, frames=None):
        self.frames: FramesDeclaration = _as_declaration(frames)
        self.frame_range: Optional[FrameRange] = (
            self.frames if isinstance(self.frames, FrameRange) else None
        )
        self.index = 0

    def get_frames(self) -> Optional[FrameRange]:
        return self.frame_range

    def set_frames(self, frame_range: FrameRange) -> None:
        if self.frame_range is not None:
            raise RuntimeError(f"{self!r} already has frames {self.frame_range}")
        self.frame_range = frame_range

    def is_active(self, frame: int) -> bool:
        return self.frame_range is not None and frame in self.frame_range


class Object(TimelineElement):
    """A persistent visual entity with child actions.

    Args:
        frames: FrameRange, ``(start, end)``, RelativeFrames or None (same
            frames as the previous object)
        func: Drawing callable used by the rendering backend
        start_pos: Initial position
        actions: Actions to attach right away
    """

    def __init__(
        self,
        frames=None,
        func: Optional[Callable[..., Any]] = None,
        start_pos=(0.0, 0.0),
        actions: Optional[List["Action"]] = None,
        name: Optional[str] = None,
    ):
        super().__init__(frames)
        self.func = func
        self.name = name
        self.start_pos = _vec2(start_pos)
        self.current_setting = ObjectSetting(position=self.start_pos.copy())
        self.actions: List[Action] = []
        for action in actions or []:
            self.add_action(action)

    def add_action(self, action: "Action") -> "Action":
        action.object = self
        self.actions.append(action)
        return action

    def get_position(self) -> np.ndarray:
        return self.current_setting.position

    def get_scale(self) -> np.ndarray:
        return self.current_setting.scale

    def __repr__(self) -> str:
        label = self.name or f"#{self.index}"
        return f"Object({label}, frames={self.frame_range or self.frames})"


class Action(TimelineElement):
    """A time-bounded behaviour of the object it is attached to.

    Args:
        frames: FrameRange, ``(start, end)``, RelativeFrames or None (same
            frames as the previous action, or the object's for the first one)
        anim: Curve mapping progress in [0, 1] to a raw value. Anything with
            an ``at(t)`` method is used as is, plain callables are wrapped in
            ``FunctionCurve``. Defaults to a linear 0 -> 1 curve.
        transition: Translation, Rotation, Scaling or None
        keep: Keep the final value applied after the last frame
    """

    def __init__(
        self,
        frames=None,
        anim=None,
        transition=None,
        keep: bool = True,
        name: Optional[str] = None,
    ):
        super().__init__(frames)
        if anim is None:
            anim = Animation([0.0, 1.0], [0.0, 1.0])
        elif not hasattr(anim, "at") and callable(anim):
            anim = FunctionCurve(anim)
        self.anim = anim
        self.transition = transition
        self.keep = keep
        self.name = name
        self.object: Optional[Object] = None

    def __repr__(self) -> str:
        label = self.name or f"#{self.index}"
        return f"Action({label}, frames={self.frame_range or self.frames})"

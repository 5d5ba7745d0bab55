"""Animation curves mapping normalized progress to raw keyframe values.

A curve is anything with an ``at(t)`` method and a ``domain_end`` attribute
(the time of its last keyframe, expected to be 1.0). ``Animation`` is the
keyframe curve shipped with motionframe; ``FunctionCurve`` adapts a plain
callable. Schedules can also be written as strings like
``"0:(0), 0.5:(1.5), 1:(sin(t))"``, where values may be numexpr expressions
of ``t`` (the keyframe time).
"""

import re
from typing import Any, Callable, Dict, Sequence

import numexpr
import numpy as np

from motionframe.utils.easing import get_easing
from motionframe.utils.math_utils import interpolateable

_FLOAT_PATTERN = re.compile(r'^(?=.)([+-]?([0-9]*)(\.([0-9]+))?)$')
# Split only on commas that start a new "time:" entry so expressions keep theirs
_KEYFRAME_SPLIT = re.compile(r',\s*(?=[+-]?[0-9.]+\s*:)')


def check_is_number(value: str) -> bool:
    """Check if string represents a valid float number."""
    return _FLOAT_PATTERN.match(value) is not None


def sanitize_value(value: str) -> str:
    """Remove quotes and surrounding whitespace from a keyframe value."""
    return value.replace("'", "").replace('"', "").strip()


def parse_key_frames(string: str, name: str = 'unknown') -> Dict[float, str]:
    """Parse a schedule string into a time -> value expression dictionary.

    Args:
        string: Schedule like ``"0:(0), 0.5:(2*t), 1:(1)"``
        name: Schedule name used in error messages

    Returns:
        Dictionary mapping keyframe times to the raw value expressions

    Raises:
        RuntimeError: If a non-empty string contains no keyframe

    Examples:
        >>> parse_key_frames("0:(1.0), 0.5:(2.0), 1:(1.5)")
        {0.0: '1.0', 0.5: '2.0', 1.0: '1.5'}
    """
    frames = dict()
    for entry in _KEYFRAME_SPLIT.split(string.strip()):
        if not entry:
            continue
        key, sep, param = entry.partition(":")
        key = sanitize_value(key)
        if not sep or not check_is_number(key):
            raise RuntimeError(f"Key Frame string not correctly formatted ({name}: '{entry}')")
        param = param.strip()
        if param.startswith("(") and param.endswith(")"):
            param = param[1:-1]
        frames[float(key)] = sanitize_value(param)

    if frames == {} and len(string) != 0:
        raise RuntimeError('Key Frame string not correctly formatted')
    return frames


class FunctionCurve:
    """Wrap a callable ``t -> value`` as a curve."""

    def __init__(self, fn: Callable[[float], Any], domain_end: float = 1.0):
        self.fn = fn
        self.domain_end = domain_end

    def at(self, t: float) -> Any:
        return self.fn(t)


class Animation:
    """Keyframe curve with optional per-segment easing.

    Values are interpolated in floating point even when the keyframes are
    given as integers. Values may be scalars or equally shaped vectors.

    Attributes:
        times: Keyframe times, strictly increasing
        values: Keyframe values as a float array (first axis = keyframe)
        easings: One easing function per segment

    Examples:
        >>> anim = Animation([0.0, 1.0], [0, 10])
        >>> anim.at(0.25)
        2.5
        >>> Animation([0, 0.5, 1], [0, 1, 0], easings="smooth_step").at(0.75)
        0.5
    """

    def __init__(self, times: Sequence[float], values: Sequence[Any], easings=None):
        if len(times) == 0:
            raise ValueError("Animation needs at least one keyframe")
        if len(times) != len(values):
            raise ValueError(
                f"Animation got {len(times)} keyframe times but {len(values)} values"
            )
        self.times = np.asarray(times, dtype=np.float64)
        if np.any(np.diff(self.times) <= 0):
            raise ValueError("Animation keyframe times must be strictly increasing")
        self.values = np.asarray(interpolateable(list(values)), dtype=np.float64)

        n_segments = max(len(self.times) - 1, 0)
        if isinstance(easings, (list, tuple)):
            if len(easings) != n_segments:
                raise ValueError(
                    f"Animation with {len(self.times)} keyframes needs {n_segments} easings, "
                    f"got {len(easings)}"
                )
            self.easings = [get_easing(e) for e in easings]
        else:
            self.easings = [get_easing(easings)] * n_segments

    @property
    def domain_start(self) -> float:
        return float(self.times[0])

    @property
    def domain_end(self) -> float:
        return float(self.times[-1])

    def _out(self, value: np.ndarray):
        return float(value) if value.ndim == 0 else value

    def at(self, t: float):
        """Value of the curve at time ``t``, held constant outside the keyframes."""
        if t <= self.times[0]:
            return self._out(self.values[0].copy())
        if t >= self.times[-1]:
            return self._out(self.values[-1].copy())

        i = int(np.searchsorted(self.times, t, side="right")) - 1
        t0, t1 = self.times[i], self.times[i + 1]
        local = self.easings[i]((t - t0) / (t1 - t0))
        v0, v1 = self.values[i], self.values[i + 1]
        return self._out(v0 + local * (v1 - v0))

    @classmethod
    def from_schedule(cls, schedule: str, easings=None, name: str = 'unknown') -> "Animation":
        """Build a curve from a schedule string.

        Numeric values are used directly; anything else is evaluated with
        numexpr where ``t`` is the keyframe time.

        Raises:
            RuntimeError: If the schedule string is malformed
            SyntaxError: If a value expression cannot be evaluated
        """
        key_frames = parse_key_frames(schedule, name=name)
        times = sorted(key_frames)
        values = []
        for t in times:
            value = key_frames[t]
            if check_is_number(value):
                values.append(float(value))
                continue
            try:
                values.append(float(numexpr.evaluate(value, local_dict={"t": t})))
            except SyntaxError as e:
                e.filename = f"{name}@t={t}"
                raise e
            except (KeyError, TypeError, ValueError) as e:
                raise SyntaxError(f"Cannot evaluate '{value}' in {name}@t={t}: {e}") from e
        return cls(times, values, easings=easings)

    def __repr__(self) -> str:
        return f"Animation(times={self.times.tolist()}, values={self.values.tolist()})"

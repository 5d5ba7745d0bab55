"""Transitions turn an interpolated curve value into a renderable value.

The set of transitions is closed: ``None``, ``Translation``, ``Rotation`` and
``Scaling``. ``from_`` and ``to`` targets are resolved when a frame is
evaluated, not when the transition is declared, so a target can be an
object whose position is only known later.

Note the asymmetry kept on purpose: ``Translation`` yields a delta relative
to the ``from_`` position, ``Scaling`` yields an absolute scale.
"""

from dataclasses import dataclass
from typing import Any, Union

import numpy as np


@dataclass(frozen=True)
class Translation:
    from_: Any
    to: Any


@dataclass(frozen=True)
class Rotation:
    pass


@dataclass(frozen=True)
class Scaling:
    from_: Any
    to: Any


Transition = Union[Translation, Rotation, Scaling]


def get_position(handle) -> np.ndarray:
    """Resolve a translation target to a point.

    Objects exposing ``get_position()`` are asked for their current position,
    callables are called, anything else is read as coordinates.
    """
    if hasattr(handle, "get_position"):
        handle = handle.get_position()
    elif callable(handle):
        handle = handle()
    return np.asarray(handle, dtype=np.float64)


def get_scale(handle) -> np.ndarray:
    """Resolve a scaling target to an ``(sx, sy)`` pair.

    A single number ``s`` means uniform scaling ``(s, s)``.
    """
    if hasattr(handle, "get_scale"):
        handle = handle.get_scale()
    elif callable(handle):
        handle = handle()
    scale = np.asarray(handle, dtype=np.float64)
    if scale.ndim == 0:
        scale = np.array([float(scale), float(scale)])
    return scale


def resolve_transition(value, transition: Transition | None):
    """Compute the renderable value of ``transition`` for a raw curve value.

    Dispatches on the transition only; the shape of ``value`` is never used
    to guess intent.

    Args:
        value: Raw value returned by the action's curve
        transition: Transition of the action, or None

    Returns:
        - None / Rotation: ``value`` unchanged
        - Translation: ``value * (to - from_)``, the offset from ``from_``
        - Scaling: ``from_ + value * (to - from_)``, the absolute scale

    Raises:
        TypeError: If ``transition`` is not one of the known transitions

    Examples:
        >>> resolve_transition(0.5, Translation((0, 0), (10, 4)))
        array([5., 2.])
        >>> resolve_transition(1.0, Scaling(1, 3))
        array([3., 3.])
    """
    if transition is None:
        return value
    if isinstance(transition, Translation):
        start = get_position(transition.from_)
        end = get_position(transition.to)
        return value * (end - start)
    if isinstance(transition, Rotation):
        return value
    if isinstance(transition, Scaling):
        start = get_scale(transition.from_)
        end = get_scale(transition.to)
        return start + value * (end - start)
    raise TypeError(f"Unknown transition type: {type(transition).__name__}")

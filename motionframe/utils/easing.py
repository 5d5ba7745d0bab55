"""Easing functions for keyframe segments.

Each function maps local segment progress in [0, 1] to eased progress in
[0, 1]. Inputs outside the unit interval are clamped.
"""


def _clamp(t: float) -> float:
    return max(0.0, min(1.0, t))


def linear(t):
    return _clamp(t)


def ease_in_quad(t):
    t = _clamp(t)
    return t * t


def ease_out_quad(t):
    """Gentle deceleration. Subtler than cubic."""
    t = _clamp(t)
    return 1.0 - (1.0 - t) ** 2


def ease_in_cubic(t):
    t = _clamp(t)
    return t * t * t


def ease_out_cubic(t):
    """Fast start, slow end."""
    t = _clamp(t)
    return 1.0 - (1.0 - t) ** 3


def ease_in_out_cubic(t):
    """Smooth acceleration and deceleration."""
    t = _clamp(t)
    if t < 0.5:
        return 4.0 * t * t * t
    return 1.0 - (-2.0 * t + 2.0) ** 3 / 2.0


def ease_out_bounce(t):
    """Bounce at the end of the segment."""
    t = _clamp(t)
    if t < 1.0 / 2.75:
        return 7.5625 * t * t
    elif t < 2.0 / 2.75:
        t -= 1.5 / 2.75
        return 7.5625 * t * t + 0.75
    elif t < 2.5 / 2.75:
        t -= 2.25 / 2.75
        return 7.5625 * t * t + 0.9375
    else:
        t -= 2.625 / 2.75
        return 7.5625 * t * t + 0.984375


def smooth_step(t):
    """Hermite interpolation, smooth start and end."""
    t = _clamp(t)
    return t * t * (3.0 - 2.0 * t)


EASINGS = {
    "linear": linear,
    "ease_in_quad": ease_in_quad,
    "ease_out_quad": ease_out_quad,
    "ease_in_cubic": ease_in_cubic,
    "ease_out_cubic": ease_out_cubic,
    "ease_in_out_cubic": ease_in_out_cubic,
    "ease_out_bounce": ease_out_bounce,
    "smooth_step": smooth_step,
}


def get_easing(name_or_fn):
    """Resolve an easing by name, pass callables through, ``None`` -> linear."""
    if name_or_fn is None:
        return linear
    if callable(name_or_fn):
        return name_or_fn
    try:
        return EASINGS[name_or_fn]
    except KeyError:
        raise ValueError(
            f"Unknown easing '{name_or_fn}'. Available: {', '.join(sorted(EASINGS))}"
        ) from None

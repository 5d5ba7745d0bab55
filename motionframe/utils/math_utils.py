"""Pure numeric helpers shared by the curve and geometry code."""

from typing import Any

import numpy as np


def interpolateable(x: Any) -> Any:
    """Return ``x`` in a form that can be interpolated.

    Integer sequences and arrays are promoted to float64 so that keyframes
    declared as ints interpolate smoothly instead of being truncated.
    Anything else is returned unchanged.

    Examples:
        >>> interpolateable([1, 2, 3])
        array([1., 2., 3.])
        >>> interpolateable(np.array([0.5, 1.5]))
        array([0.5, 1.5])
        >>> interpolateable(3)
        3
    """
    if isinstance(x, (list, tuple, np.ndarray)) and len(x) > 0:
        arr = np.asarray(x)
        if np.issubdtype(arr.dtype, np.integer):
            return arr.astype(np.float64)
    return x


def isapprox_discrete(val: float, atol: float = 1e-4) -> bool:
    """Check whether ``val`` lies within ``atol`` of an integer.

    Examples:
        >>> isapprox_discrete(3.00001)
        True
        >>> isapprox_discrete(2.5)
        False
    """
    return bool(np.isclose(val, np.round(val), rtol=0.0, atol=atol))

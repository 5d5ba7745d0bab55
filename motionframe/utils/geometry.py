"""Pure functions for polygon and polyline geometry.

Used by path-following transitions: measuring the extent of a shape and
finding the point that sits at a given fraction of a polyline's arc length.
Points are anything numpy can turn into an ``(x, y)`` pair.
"""

from typing import Sequence, Tuple

import numpy as np


def polywh(polygons: Sequence[Sequence[Sequence[float]]]) -> Tuple[float, float]:
    """Compute the width and height of the bounding box around polygons.

    Args:
        polygons: List of polygons, each a list of ``(x, y)`` points

    Returns:
        Tuple of (width, height) covering every point of every polygon

    Raises:
        ValueError: If no points are given

    Examples:
        >>> polywh([[(0, 0), (4, 1)], [(2, 5)]])
        (4.0, 5.0)
        >>> polywh([[(2, 3)]])
        (0.0, 0.0)
    """
    chunks = [np.asarray(poly, dtype=np.float64).reshape(-1, 2) for poly in polygons]
    chunks = [c for c in chunks if len(c)]
    if not chunks:
        raise ValueError("polywh needs at least one point")

    points = np.concatenate(chunks)
    min_x, min_y = points.min(axis=0)
    max_x, max_y = points.max(axis=0)
    return float(max_x - min_x), float(max_y - min_y)


def distance(p1, p2) -> float:
    return float(np.linalg.norm(np.asarray(p2, dtype=np.float64) - np.asarray(p1, dtype=np.float64)))


def between(p1, p2, t: float) -> np.ndarray:
    """Linearly interpolate between two points (``t=0`` -> p1, ``t=1`` -> p2)."""
    p1 = np.asarray(p1, dtype=np.float64)
    p2 = np.asarray(p2, dtype=np.float64)
    return p1 + t * (p2 - p1)


def polydistances(points: Sequence[Sequence[float]], closed: bool = True) -> np.ndarray:
    """Cumulative arc length at each vertex of a polyline.

    Args:
        points: Polyline vertices
        closed: Include the segment from the last vertex back to the first

    Returns:
        Array starting at 0.0 with one entry per vertex, plus one for the
        closing segment when ``closed`` is True

    Examples:
        >>> polydistances([(0, 0), (3, 0), (3, 4)])
        array([ 0.,  3.,  7., 12.])
        >>> polydistances([(0, 0), (3, 0), (3, 4)], closed=False)
        array([0., 3., 7.])
    """
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    if closed and len(pts) > 1:
        pts = np.vstack([pts, pts[:1]])
    segments = np.linalg.norm(np.diff(pts, axis=0), axis=1)
    return np.concatenate([[0.0], np.cumsum(segments)])


def nearest_index(distances: Sequence[float], value: float) -> Tuple[int, float]:
    """Find the segment whose cumulative distance bracket contains ``value``.

    Args:
        distances: Cumulative distances as returned by ``polydistances``
        value: Arc length to locate

    Returns:
        Tuple of (segment start index, distance travelled into that segment)

    Examples:
        >>> nearest_index([0.0, 3.0, 7.0, 12.0], 5.0)
        (1, 2.0)
        >>> nearest_index([0.0, 3.0, 7.0, 12.0], 12.0)
        (2, 5.0)
    """
    distances = np.asarray(distances, dtype=np.float64)
    if len(distances) < 2:
        return 0, 0.0
    ind = int(np.searchsorted(distances, value, side="right")) - 1
    ind = min(max(ind, 0), len(distances) - 2)
    return ind, float(value - distances[ind])


def get_polypoint_at(points, t: float, pdist=None):
    """Return the point at arc-length fraction ``t`` along a closed polyline.

    Args:
        points: Polyline vertices
        t: Fraction of the total arc length, 0 to 1
        pdist: Precomputed ``polydistances(points)``

    Returns:
        ``points[0]`` itself when ``t`` is approximately 0, otherwise the
        interpolated point as a numpy array
    """
    if np.isclose(t, 0.0):
        return points[0]
    if pdist is None:
        pdist = polydistances(points)

    ind, surplus = nearest_index(pdist, t * pdist[-1])
    nextind = (ind + 1) % len(points)
    seg_len = distance(points[ind], points[nextind])
    if seg_len == 0:
        return np.asarray(points[ind], dtype=np.float64)
    return between(points[ind], points[nextind], surplus / seg_len)

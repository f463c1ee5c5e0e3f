"""Intersection records and hit selection.

An ``Intersection`` pairs a ray parameter ``t`` with the shape the ray struck
there. Shapes return their intersections in ascending ``t`` order, including
those behind the ray origin (negative ``t``); ``hit`` is where those are
filtered out.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from raycaster.geometry.shape import Shape


@dataclass(frozen=True)
class Intersection:
    """A ray/shape intersection.

    Attributes:
        t: Ray parameter of the intersection point.
        object: The shape that was struck. Compared by identity.
    """

    t: float
    object: Shape


def intersections(*xs: Intersection) -> list[Intersection]:
    """Collect intersections into a list, preserving argument order."""
    return list(xs)


def hit(xs: Iterable[Intersection]) -> Intersection | None:
    """Return the visible intersection: the smallest non-negative ``t``.

    Args:
        xs: Intersections in any order.

    Returns:
        The intersection with the lowest ``t >= 0``, or None if there is none.
        When several share that ``t``, the first one encountered wins.
    """
    best: Intersection | None = None
    for x in xs:
        if x.t >= 0.0 and (best is None or x.t < best.t):
            best = x
    return best

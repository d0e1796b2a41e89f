# ============================================================
# File: blemap/gis/barriers.py
# Barrier polygons: construction, dissolve, point tests
# ============================================================

from typing import Iterable, Sequence

from shapely.prepared import prep
from shapely.geometry import Point, Polygon
from shapely.geometry.base import BaseGeometry
from shapely.ops import unary_union
from shapely.validation import make_valid


Ring = Sequence[Sequence[float]]


def barrier_polygon(rings: Sequence[Ring]) -> BaseGeometry:
    """
    Build a polygon from GeoJSON-like rings (shell first, then holes).

    Open rings are closed by shapely. Self-intersecting input is repaired
    with make_valid so area and containment stay meaningful.
    """
    if not rings:
        raise ValueError("Barrier has no rings.")

    shell, *holes = rings
    if len(shell) < 3:
        raise ValueError("Barrier ring needs at least three points.")

    poly = Polygon(shell, holes)
    if not poly.is_valid:
        return make_valid(poly)
    return poly


def dissolve_barriers(barriers: Iterable[Sequence[Ring]]) -> BaseGeometry:
    """
    Union every barrier into one exclusion geometry (possibly empty).
    """
    geoms = [barrier_polygon(rings) for rings in barriers]
    if not geoms:
        return Polygon()
    if len(geoms) == 1:
        return geoms[0]
    return unary_union(geoms)


class BarrierMask:
    """
    Point-in-barrier test over a dissolved exclusion geometry.

    Points on a barrier edge count as blocked, same as points inside.
    """

    def __init__(self, barriers: Iterable[Sequence[Ring]]):
        self.geometry = dissolve_barriers(barriers)
        self._prepared = None if self.geometry.is_empty else prep(self.geometry)

    @property
    def area(self) -> float:
        return float(self.geometry.area)

    def blocks(self, x: float, y: float) -> bool:
        if self._prepared is None:
            return False
        return self._prepared.intersects(Point(x, y))

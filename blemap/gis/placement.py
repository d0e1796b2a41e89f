# ============================================================
# File: blemap/gis/placement.py
# Grid auto-placement of beacons and antennas around barriers
# ============================================================

import math
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from blemap.core.config import settings
from blemap.gis.barriers import BarrierMask, Ring


# Antenna coverage model (meters / degrees)
MIN_ANTENNA_RANGE = 10.0
BASE_ANTENNA_RANGE = 5.0
RANGE_PER_METER_HEIGHT = 2.0
RANGE_PER_FULL_TURN = 5.0

# Antennas are spaced at this fraction of their range so coverage overlaps
ANTENNA_STEP_RATIO = 0.75


# ============================================================
# Parametric antenna model
# ============================================================

def antenna_range(height: float, angle: float) -> float:
    """
    Coverage radius for an antenna mounted at ``height`` meters with the
    given operating ``angle`` in degrees. Never below MIN_ANTENNA_RANGE.
    """
    computed = (
        BASE_ANTENNA_RANGE
        + height * RANGE_PER_METER_HEIGHT
        + angle / 360.0 * RANGE_PER_FULL_TURN
    )
    return max(MIN_ANTENNA_RANGE, computed)


def antenna_step(height: float, angle: float) -> float:
    return antenna_range(height, angle) * ANTENNA_STEP_RATIO


# ============================================================
# Grid sampling
# ============================================================

def _check_extent(width: float, height: float, step: float) -> None:
    if width <= 0 or height <= 0:
        raise ValueError("Map width and height must be positive.")
    if step <= 0:
        raise ValueError("Placement step must be positive.")


def _axis_count(extent: float, step: float) -> int:
    # Points at step/2, 3*step/2, ... strictly below extent
    ratio = extent / step
    if not math.isfinite(ratio):
        raise ValueError("Placement grid is unbounded; check map size and step.")
    return max(0, math.ceil(ratio - 0.5))


def grid_points(
    width: float,
    height: float,
    step: float,
    max_points: Optional[int] = None,
) -> List[Tuple[float, float]]:
    """
    Cell-centred grid over [0, width) x [0, height).

    The first point sits at (step/2, step/2); rows run along x and are
    ordered by increasing y. Grids larger than ``max_points`` (default
    ``settings.max_grid_points``) raise ValueError before anything is
    allocated.
    """
    _check_extent(width, height, step)
    limit = settings.max_grid_points if max_points is None else max_points

    # The estimate can be one over per axis; the exact count is checked below
    nx = _axis_count(width, step) - 1
    ny = _axis_count(height, step) - 1
    if nx > limit or ny > limit or nx * ny > limit:
        raise ValueError(f"Placement grid exceeds {limit} points; use a larger step.")

    xs = np.arange(step / 2.0, width, step)
    ys = np.arange(step / 2.0, height, step)
    # arange can overshoot the stop value by float rounding
    xs = xs[xs < width]
    ys = ys[ys < height]
    if len(xs) * len(ys) > limit:
        raise ValueError(f"Placement grid exceeds {limit} points; use a larger step.")
    return [(float(x), float(y)) for y in ys for x in xs]


def free_points(
    width: float,
    height: float,
    step: float,
    barriers: Iterable[Sequence[Ring]] = (),
) -> List[Tuple[float, float]]:
    """Grid points not blocked by any barrier."""
    mask = BarrierMask(barriers)
    return [(x, y) for x, y in grid_points(width, height, step) if not mask.blocks(x, y)]


# ============================================================
# Auto-placement
# ============================================================

def place_beacons(
    width: float,
    height: float,
    step: float,
    barriers: Iterable[Sequence[Ring]] = (),
    rssi: float = 70,
) -> List[Dict]:
    points = free_points(width, height, step, barriers)
    return [
        {"id": f"beacon-auto-{n}", "position": [x, y], "rssi": rssi}
        for n, (x, y) in enumerate(points)
    ]


def place_antennas(
    width: float,
    height: float,
    barriers: Iterable[Sequence[Ring]] = (),
    antenna_height: float = 2.0,
    angle: float = 0.0,
) -> List[Dict]:
    coverage = antenna_range(antenna_height, angle)
    points = free_points(width, height, coverage * ANTENNA_STEP_RATIO, barriers)
    return [
        {
            "id": f"antenna-auto-{n}",
            "position": [x, y],
            "height": antenna_height,
            "angle": angle,
            "range": coverage,
        }
        for n, (x, y) in enumerate(points)
    ]


# ============================================================
# Area statistics
# ============================================================

def area_stats(
    width: float,
    height: float,
    barriers: Iterable[Sequence[Ring]] = (),
) -> Dict[str, float]:
    """
    Total map area, area covered by barriers (overlaps counted once) and
    the movable remainder, all in square meters.
    """
    if width <= 0 or height <= 0:
        raise ValueError("Map width and height must be positive.")

    total = float(width) * float(height)
    blocked = BarrierMask(barriers).area
    return {
        "total_area": total,
        "barrier_area": blocked,
        "movable_area": total - blocked,
    }

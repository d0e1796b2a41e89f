# File: blemap/services/placement_service.py

"""
Glue between the placement API schemas and the geometry engine in
``blemap.gis.placement``.
"""

import logging
from typing import Any, Dict, List

from pydantic import ValidationError

from blemap.gis import placement
from blemap.schemas.placement import (
    AntennaPlacementRequest,
    AntennaPlacementResponse,
    AntennaRangeResponse,
    AreaStatsResponse,
    Barrier,
    BeaconPlacementRequest,
    BeaconPlacementResponse,
    MapArea,
    MapData,
    ProjectLayoutSummary,
)

logger = logging.getLogger(__name__)


def _rings(barriers: List[Barrier]):
    return [b.coordinates for b in barriers]


def antenna_coverage(height: float, angle: float) -> AntennaRangeResponse:
    return AntennaRangeResponse(
        range=placement.antenna_range(height, angle),
        step=placement.antenna_step(height, angle),
    )


def auto_place_beacons(req: BeaconPlacementRequest) -> BeaconPlacementResponse:
    beacons = placement.place_beacons(
        req.map_width_meters,
        req.map_height_meters,
        req.step,
        _rings(req.barriers),
        rssi=req.rssi,
    )
    logger.info(
        "Auto-placed %d beacons on %.1fx%.1f m (step %.2f, %d barriers)",
        len(beacons), req.map_width_meters, req.map_height_meters,
        req.step, len(req.barriers),
    )
    return BeaconPlacementResponse(beacons=beacons, count=len(beacons))


def auto_place_antennas(req: AntennaPlacementRequest) -> AntennaPlacementResponse:
    antennas = placement.place_antennas(
        req.map_width_meters,
        req.map_height_meters,
        _rings(req.barriers),
        antenna_height=req.height,
        angle=req.angle,
    )
    logger.info(
        "Auto-placed %d antennas on %.1fx%.1f m (height %.2f, angle %.1f)",
        len(antennas), req.map_width_meters, req.map_height_meters,
        req.height, req.angle,
    )
    return AntennaPlacementResponse(
        antennas=antennas,
        count=len(antennas),
        range=placement.antenna_range(req.height, req.angle),
        step=placement.antenna_step(req.height, req.angle),
    )


def map_area_stats(area: MapArea) -> AreaStatsResponse:
    stats = placement.area_stats(
        area.map_width_meters,
        area.map_height_meters,
        _rings(area.barriers),
    )
    return AreaStatsResponse(**stats)


def summarize_layout(map_data: Dict[str, Any]) -> ProjectLayoutSummary:
    """
    Device counts and areas for a stored project layout.

    Raises ValueError when the stored mapData is not a usable layout.
    """
    try:
        layout = MapData.model_validate(map_data)
    except ValidationError as exc:
        raise ValueError(f"Project map data is not a valid layout: {exc.error_count()} error(s).") from exc

    stats = map_area_stats(layout)
    return ProjectLayoutSummary(
        beacon_count=len(layout.beacons),
        antenna_count=len(layout.antennas),
        barrier_count=len(layout.barriers),
        **stats.model_dump(),
    )

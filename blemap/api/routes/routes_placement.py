# File: blemap/api/routes/routes_placement.py

from fastapi import APIRouter, HTTPException, Query

from blemap.core.config import settings
from blemap.schemas.placement import (
    AntennaPlacementRequest,
    AntennaPlacementResponse,
    AntennaRangeResponse,
    AreaStatsResponse,
    BeaconPlacementRequest,
    BeaconPlacementResponse,
    MapArea,
)
from blemap.services import placement_service

router = APIRouter(tags=["placement"])


@router.get("/antenna-range", response_model=AntennaRangeResponse)
def get_antenna_range(
    height: float = Query(settings.default_antenna_height, ge=0),
    angle: float = Query(settings.default_antenna_angle),
):
    """
    Coverage radius and grid step for an antenna with the given mount
    height (m) and operating angle (deg).
    """
    return placement_service.antenna_coverage(height, angle)


@router.post("/beacons", response_model=BeaconPlacementResponse)
def auto_place_beacons(req: BeaconPlacementRequest):
    try:
        return placement_service.auto_place_beacons(req)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/antennas", response_model=AntennaPlacementResponse)
def auto_place_antennas(req: AntennaPlacementRequest):
    try:
        return placement_service.auto_place_antennas(req)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/stats", response_model=AreaStatsResponse)
def map_stats(req: MapArea):
    try:
        return placement_service.map_area_stats(req)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

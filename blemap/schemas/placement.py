# File: blemap/schemas/placement.py

from __future__ import annotations

from typing import List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from blemap.core.config import settings
from blemap.schemas.project import CamelModel


Position = Tuple[float, float]


# -----------------------------
# Map objects (as stored in mapData)
# -----------------------------

class Beacon(CamelModel):
    id: str
    position: Position
    rssi: Optional[float] = None


class Antenna(CamelModel):
    id: str
    position: Position
    height: float
    angle: float
    range: float


class Barrier(CamelModel):
    id: str
    # Shell ring first, holes after it
    coordinates: List[List[Position]] = Field(min_length=1)

    @field_validator("coordinates")
    @classmethod
    def check_rings(cls, rings):
        for ring in rings:
            if len(set(ring)) < 3:
                raise ValueError("each barrier ring needs at least three distinct points")
        return rings


# -----------------------------
# Auto-placement request / response
# -----------------------------

class MapArea(CamelModel):
    map_width_meters: float = Field(gt=0)
    map_height_meters: float = Field(gt=0)
    barriers: List[Barrier] = []


class MapData(MapArea):
    map_image_src: Optional[str] = None
    beacons: List[Beacon] = []
    antennas: List[Antenna] = []


class BeaconPlacementRequest(MapArea):
    step: float = Field(default=settings.default_beacon_step, gt=0)
    rssi: float = settings.default_beacon_rssi


class AntennaPlacementRequest(MapArea):
    height: float = Field(default=settings.default_antenna_height, ge=0)
    angle: float = settings.default_antenna_angle


class BeaconPlacementResponse(CamelModel):
    beacons: List[Beacon]
    count: int


class AntennaPlacementResponse(CamelModel):
    antennas: List[Antenna]
    count: int
    range: float
    step: float


class AntennaRangeResponse(BaseModel):
    range: float
    step: float


class AreaStatsResponse(CamelModel):
    total_area: float
    barrier_area: float
    movable_area: float


class ProjectLayoutSummary(AreaStatsResponse):
    beacon_count: int
    antenna_count: int
    barrier_count: int

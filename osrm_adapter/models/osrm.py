from typing import Any

import msgspec

# OSRM API Documentation:
# https://project-osrm.org/docs/v5.24.0/api/#route-service
# Valhalla and Mapbox extend the same schema with banner/voice instructions,
# richer annotations, incidents and via waypoints. Such fields are optional
# here: absence means the backend did not provide them.


class OSRMStepManeuver(msgspec.Struct, kw_only=True):
    type: str
    modifier: str | None = None
    exit: int | None = None
    bearing_before: float | None = None
    bearing_after: float | None = None
    location: tuple[float, float] | None = None  # [lon, lat]
    instruction: str | None = None  # Valhalla, Mapbox


class OSRMBannerComponent(msgspec.Struct, kw_only=True):
    text: str = ''
    type: str | None = None
    abbr: str | None = None
    active: bool | None = None
    directions: list[str] | None = None
    active_direction: str | None = None


class OSRMBannerContent(msgspec.Struct, kw_only=True):
    text: str = ''
    type: str | None = None
    modifier: str | None = None
    degrees: float | None = None  # roundabout exit degrees
    driving_side: str | None = None
    components: list[OSRMBannerComponent] = msgspec.field(default_factory=list)


class OSRMBannerInstruction(msgspec.Struct, kw_only=True):
    distance_along_geometry: float = msgspec.field(name='distanceAlongGeometry')
    primary: OSRMBannerContent
    secondary: OSRMBannerContent | None = None
    sub: OSRMBannerContent | None = None


class OSRMVoiceInstruction(msgspec.Struct, kw_only=True):
    announcement: str
    ssml_announcement: str | None = msgspec.field(name='ssmlAnnouncement', default=None)
    distance_along_geometry: float = msgspec.field(name='distanceAlongGeometry')


class OSRMStep(msgspec.Struct, kw_only=True):
    distance: float  # in meters
    duration: float  # in seconds
    geometry: str  # polyline encoded string
    name: str = ''
    ref: str | None = None
    destinations: str | None = None
    exits: str | None = None
    mode: str | None = None
    driving_side: str | None = None
    maneuver: OSRMStepManeuver
    banner_instructions: list[OSRMBannerInstruction] = msgspec.field(
        name='bannerInstructions', default_factory=list
    )
    voice_instructions: list[OSRMVoiceInstruction] = msgspec.field(
        name='voiceInstructions', default_factory=list
    )


class OSRMCongestion(msgspec.Struct, kw_only=True):
    value: int


class OSRMIncident(msgspec.Struct, kw_only=True):
    id: str | None = None
    type: str | None = None
    description: str | None = None
    long_description: str | None = None
    creation_time: str | None = None
    start_time: str | None = None
    end_time: str | None = None
    impact: str | None = None
    sub_type: str | None = None
    sub_type_description: str | None = None
    lanes_blocked: list[str] | None = None
    num_lanes_blocked: int | None = None
    congestion: OSRMCongestion | None = None
    closed: bool | None = None
    geometry_index_start: int  # index into the leg's coordinates
    geometry_index_end: int | None = None
    affected_road_names: list[str] | None = None
    iso_3166_1_alpha2: str | None = None
    iso_3166_1_alpha3: str | None = None
    south: float | None = None
    west: float | None = None
    north: float | None = None
    east: float | None = None


class OSRMViaWaypoint(msgspec.Struct, kw_only=True):
    waypoint_index: int  # index into the response waypoints
    geometry_index: int | None = None
    distance_from_start: float | None = None


class OSRMLeg(msgspec.Struct, kw_only=True):
    steps: list[OSRMStep] = msgspec.field(default_factory=list)
    # parallel arrays keyed by field name (distance, duration, speed, maxspeed, ...)
    annotation: dict[str, Any] | None = None
    incidents: list[OSRMIncident] = msgspec.field(default_factory=list)
    via_waypoints: list[OSRMViaWaypoint] = msgspec.field(default_factory=list)
    distance: float | None = None
    duration: float | None = None
    summary: str | None = None


class OSRMRoute(msgspec.Struct, kw_only=True):
    distance: float  # in meters
    duration: float = 0  # in seconds
    geometry: str  # polyline encoded string
    weight: float | None = None
    weight_name: str | None = None
    legs: list[OSRMLeg] = msgspec.field(default_factory=list)


class OSRMWaypoint(msgspec.Struct, kw_only=True):
    location: tuple[float, float]  # [lon, lat]
    name: str = ''
    distance: float | None = None


class OSRMResponse(msgspec.Struct, kw_only=True):
    code: str
    message: str | None = None
    routes: list[OSRMRoute] = msgspec.field(default_factory=list)
    waypoints: list[OSRMWaypoint] = msgspec.field(default_factory=list)

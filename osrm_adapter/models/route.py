from enum import StrEnum
from uuid import UUID

import msgspec

from osrm_adapter.models.maneuver import ManeuverModifier, ManeuverType


class GeographicCoordinate(msgspec.Struct, frozen=True):
    lat: float
    lng: float


class BoundingBox(msgspec.Struct, frozen=True):
    sw: GeographicCoordinate
    ne: GeographicCoordinate


class WaypointKind(StrEnum):
    break_ = 'break'  # starts or ends a leg, the navigation stops here
    via = 'via'  # passed through without interrupting the route


class Waypoint(msgspec.Struct, frozen=True):
    coordinate: GeographicCoordinate
    kind: WaypointKind


class LaneInfo(msgspec.Struct, frozen=True):
    active: bool
    directions: list[str]
    active_direction: str | None = None


class VisualInstructionContent(msgspec.Struct, frozen=True, kw_only=True):
    text: str
    maneuver_type: ManeuverType | None = None
    maneuver_modifier: ManeuverModifier | None = None
    roundabout_exit_degrees: float | None = None
    lane_info: list[LaneInfo] | None = None  # None when the banner has no lanes


class VisualInstruction(msgspec.Struct, frozen=True, kw_only=True):
    primary: VisualInstructionContent
    secondary: VisualInstructionContent | None = None
    sub: VisualInstructionContent | None = None
    trigger_distance: float  # meters before the maneuver


class SpokenInstruction(msgspec.Struct, frozen=True, kw_only=True):
    text: str
    ssml: str | None = None
    trigger_distance: float  # meters before the maneuver
    utterance_id: UUID


class IncidentCongestion(msgspec.Struct, frozen=True):
    value: int


class Incident(msgspec.Struct, frozen=True, kw_only=True):
    id: str | None = None
    incident_type: str | None = None
    description: str | None = None
    long_description: str | None = None
    creation_time: str | None = None
    start_time: str | None = None
    end_time: str | None = None
    impact: str | None = None
    sub_type: str | None = None
    sub_type_description: str | None = None
    lanes_blocked: list[str] = msgspec.field(default_factory=list)
    num_lanes_blocked: int | None = None
    congestion: IncidentCongestion | None = None
    closed: bool | None = None
    geometry_index_start: int
    geometry_index_end: int | None = None
    affected_road_names: list[str] = msgspec.field(default_factory=list)
    iso_3166_1_alpha2: str | None = None
    iso_3166_1_alpha3: str | None = None
    bbox: BoundingBox | None = None


class RouteStep(msgspec.Struct, frozen=True, kw_only=True):
    geometry: list[GeographicCoordinate]
    distance: float  # in meters
    duration: float  # in seconds
    road_name: str = ''  # empty when the backend has no name
    instruction: str
    visual_instructions: list[VisualInstruction] = msgspec.field(default_factory=list)
    spoken_instructions: list[SpokenInstruction] = msgspec.field(default_factory=list)
    # one JSON object per geometry segment, keys depend on the backend
    annotations: list[str] | None = None
    incidents: list[Incident] = msgspec.field(default_factory=list)


class Route(msgspec.Struct, frozen=True, kw_only=True):
    geometry: list[GeographicCoordinate]
    bbox: BoundingBox
    distance: float  # in meters
    duration: float  # in seconds
    waypoints: list[Waypoint]
    steps: list[RouteStep]

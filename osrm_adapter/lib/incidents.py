from collections.abc import Iterable

import cython
from msgspec.structs import replace

from osrm_adapter.models.osrm import OSRMIncident
from osrm_adapter.models.route import (
    BoundingBox,
    GeographicCoordinate,
    Incident,
    IncidentCongestion,
)


def incident_from_osrm(incident: OSRMIncident) -> Incident:
    """Convert a backend incident, keeping its leg-relative geometry indices."""
    bbox = (
        BoundingBox(
            sw=GeographicCoordinate(incident.south, incident.west),
            ne=GeographicCoordinate(incident.north, incident.east),
        )
        if (
            incident.south is not None
            and incident.west is not None
            and incident.north is not None
            and incident.east is not None
        )
        else None
    )
    return Incident(
        id=incident.id,
        incident_type=incident.type,
        description=incident.description,
        long_description=incident.long_description,
        creation_time=incident.creation_time,
        start_time=incident.start_time,
        end_time=incident.end_time,
        impact=incident.impact,
        sub_type=incident.sub_type,
        sub_type_description=incident.sub_type_description,
        lanes_blocked=incident.lanes_blocked or [],
        num_lanes_blocked=incident.num_lanes_blocked,
        congestion=(
            IncidentCongestion(incident.congestion.value)
            if incident.congestion is not None
            else None
        ),
        closed=incident.closed,
        geometry_index_start=incident.geometry_index_start,
        geometry_index_end=incident.geometry_index_end,
        affected_road_names=incident.affected_road_names or [],
        iso_3166_1_alpha2=incident.iso_3166_1_alpha2,
        iso_3166_1_alpha3=incident.iso_3166_1_alpha3,
        bbox=bbox,
    )


@cython.cfunc
def _overlaps(incident: Incident, start: cython.Py_ssize_t, end: cython.Py_ssize_t) -> cython.bint:
    incident_start: cython.Py_ssize_t = incident.geometry_index_start
    if incident.geometry_index_end is None:
        return start <= incident_start <= end
    incident_end: cython.Py_ssize_t = incident.geometry_index_end
    return incident_start >= start and incident_end <= end


def clip_incidents(incidents: Iterable[Incident], start: int, end: int) -> list[Incident]:
    """
    Select the incidents of the step window [start, end) of a leg.

    Indices of the returned incidents are relative to the window start,
    and never point past the window end.
    """
    result: list[Incident] = []
    for incident in incidents:
        if not _overlaps(incident, start, end):
            continue

        geometry_index_end = incident.geometry_index_end
        if geometry_index_end is not None:
            geometry_index_end = min(end - start, geometry_index_end - start)

        result.append(
            replace(
                incident,
                geometry_index_start=max(0, incident.geometry_index_start - start),
                geometry_index_end=geometry_index_end,
            )
        )

    return result

from collections.abc import Sequence
from typing import NamedTuple

import cython

from osrm_adapter.lib.annotations import (
    AnnotationRecord,
    serialize_annotations,
    slice_annotations,
    zip_annotations,
)
from osrm_adapter.lib.incidents import clip_incidents, incident_from_osrm
from osrm_adapter.lib.instructions import (
    UtteranceIdFactory,
    maneuver_instruction,
    normalize_spoken_instructions,
    normalize_visual_instructions,
)
from osrm_adapter.lib.polyline import decode_coordinates, decode_polyline
from osrm_adapter.models.osrm import OSRMLeg, OSRMRoute, OSRMStep, OSRMWaypoint
from osrm_adapter.models.route import (
    GeographicCoordinate,
    Incident,
    Route,
    RouteStep,
    Waypoint,
    WaypointKind,
)


class LegContext(NamedTuple):
    """Leg-wide data shared by the steps of one leg."""

    leg_index: int
    annotations: list[AnnotationRecord] | None
    incidents: list[Incident]
    polyline_precision: int
    utterance_id_factory: UtteranceIdFactory


def leg_context(
    leg: OSRMLeg,
    *,
    leg_index: int = 0,
    polyline_precision: int,
    utterance_id_factory: UtteranceIdFactory,
) -> LegContext:
    return LegContext(
        leg_index=leg_index,
        annotations=zip_annotations(leg.annotation) if leg.annotation is not None else None,
        incidents=[incident_from_osrm(incident) for incident in leg.incidents],
        polyline_precision=polyline_precision,
        utterance_id_factory=utterance_id_factory,
    )


def assemble_step(
    cursor: int,
    step: OSRMStep,
    *,
    context: LegContext,
    step_index: int = 0,
) -> tuple[RouteStep, int]:
    """
    Assemble one step of a leg, starting at the given leg coordinate cursor.

    The step covers the segments [cursor, cursor + len(geometry) - 1) of its leg.
    Returns the step and the cursor of the following step.
    """
    geometry = decode_coordinates(step.geometry, context.polyline_precision)
    span: cython.Py_ssize_t = max(len(geometry) - 1, 0)
    start: cython.Py_ssize_t = cursor
    end: cython.Py_ssize_t = start + span

    annotation_slice = slice_annotations(context.annotations, start, end)
    annotations = (
        serialize_annotations(annotation_slice, step_index, leg_index=context.leg_index)
        if annotation_slice is not None
        else None
    )

    route_step = RouteStep(
        geometry=geometry,
        distance=step.distance,
        duration=step.duration,
        road_name=step.name,
        instruction=maneuver_instruction(step),
        visual_instructions=normalize_visual_instructions(step.banner_instructions),
        spoken_instructions=normalize_spoken_instructions(
            step.voice_instructions, context.utterance_id_factory
        ),
        annotations=annotations,
        incidents=clip_incidents(context.incidents, start, end),
    )
    return route_step, end


def assemble_leg_steps(
    leg: OSRMLeg,
    *,
    leg_index: int = 0,
    polyline_precision: int,
    utterance_id_factory: UtteranceIdFactory,
) -> list[RouteStep]:
    """Assemble the steps of a leg, threading the coordinate cursor from the first step."""
    context = leg_context(
        leg,
        leg_index=leg_index,
        polyline_precision=polyline_precision,
        utterance_id_factory=utterance_id_factory,
    )
    result: list[RouteStep] = [None] * len(leg.steps)  # type: ignore
    cursor: cython.Py_ssize_t = 0

    i: cython.Py_ssize_t
    for i, step in enumerate(leg.steps):
        result[i], cursor = assemble_step(cursor, step, context=context, step_index=i)

    return result


def classify_waypoints(
    waypoints: Sequence[OSRMWaypoint],
    legs: Sequence[OSRMLeg],
) -> list[Waypoint]:
    """Mark the waypoints listed as via waypoints of any leg, the others break the route."""
    via_indices = {via.waypoint_index for leg in legs for via in leg.via_waypoints}
    return [
        Waypoint(
            coordinate=GeographicCoordinate(lat=waypoint.location[1], lng=waypoint.location[0]),
            kind=WaypointKind.via if i in via_indices else WaypointKind.break_,
        )
        for i, waypoint in enumerate(waypoints)
    ]


def assemble_route(
    route: OSRMRoute,
    waypoints: Sequence[OSRMWaypoint],
    *,
    polyline_precision: int,
    utterance_id_factory: UtteranceIdFactory,
) -> Route:
    """Assemble a normalized route, geometry and bounding box come from the route-level polyline."""
    geometry, bbox = decode_polyline(route.geometry, polyline_precision)
    steps = [
        step
        for leg_index, leg in enumerate(route.legs)
        for step in assemble_leg_steps(
            leg,
            leg_index=leg_index,
            polyline_precision=polyline_precision,
            utterance_id_factory=utterance_id_factory,
        )
    ]
    return Route(
        geometry=geometry,
        bbox=bbox,
        distance=route.distance,
        duration=route.duration,
        waypoints=classify_waypoints(waypoints, route.legs),
        steps=steps,
    )

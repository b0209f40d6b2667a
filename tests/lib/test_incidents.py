import pytest

from osrm_adapter.lib.incidents import clip_incidents, incident_from_osrm
from osrm_adapter.models.osrm import OSRMCongestion, OSRMIncident
from osrm_adapter.models.route import GeographicCoordinate, Incident


def _incident(start: int, end: int | None = None) -> Incident:
    return Incident(id=f'{start}-{end}', geometry_index_start=start, geometry_index_end=end)


@pytest.mark.parametrize(
    ('incident', 'start', 'end', 'expected'),
    [
        # start-only incidents inside the closed window
        (_incident(3), 3, 6, (0, None)),
        (_incident(5), 3, 6, (2, None)),
        (_incident(6), 3, 6, (3, None)),
        # start-only incidents outside
        (_incident(2), 3, 6, None),
        (_incident(7), 3, 6, None),
        # ranged incidents contained in the window
        (_incident(3, 6), 3, 6, (0, 3)),
        (_incident(4, 5), 3, 6, (1, 2)),
        (_incident(0, 2), 0, 4, (0, 2)),
        # ranged incidents reaching out of the window
        (_incident(2, 5), 3, 6, None),
        (_incident(4, 8), 3, 6, None),
        (_incident(1, 8), 3, 6, None),
    ],
)
def test_clip_incidents(incident, start, end, expected):
    result = clip_incidents([incident], start, end)
    if expected is None:
        assert result == []
        return

    (clipped,) = result
    assert (clipped.geometry_index_start, clipped.geometry_index_end) == expected
    assert clipped.id == incident.id


def test_clip_incidents_keeps_order_and_source():
    incidents = [_incident(1), _incident(10), _incident(2, 3)]
    result = clip_incidents(incidents, 1, 4)
    assert [i.id for i in result] == ['1-None', '2-3']
    # leg-relative indices are left untouched
    assert [i.geometry_index_start for i in incidents] == [1, 10, 2]


def test_clip_incidents_local_indices_within_step():
    # a leg of 10 segments split into steps of 4, 3 and 3 segments
    incidents = [_incident(0, 2), _incident(5), _incident(7, 9), _incident(8)]
    cursor = 0
    for span in (4, 3, 3):
        for incident in clip_incidents(incidents, cursor, cursor + span):
            assert 0 <= incident.geometry_index_start <= span
            if incident.geometry_index_end is not None:
                assert incident.geometry_index_end <= span
        cursor += span


def test_incident_from_osrm():
    incident = incident_from_osrm(
        OSRMIncident(
            id='13956787949218641',
            type='construction',
            description='roadworks',
            congestion=OSRMCongestion(value=101),
            closed=True,
            lanes_blocked=['left'],
            geometry_index_start=12,
            geometry_index_end=20,
            south=40.77,
            west=-74.04,
            north=40.78,
            east=-74.03,
        )
    )
    assert incident.incident_type == 'construction'
    assert incident.congestion is not None
    assert incident.congestion.value == 101
    assert incident.lanes_blocked == ['left']
    assert incident.affected_road_names == []
    assert (incident.geometry_index_start, incident.geometry_index_end) == (12, 20)
    assert incident.bbox is not None
    assert incident.bbox.sw == GeographicCoordinate(40.77, -74.04)
    assert incident.bbox.ne == GeographicCoordinate(40.78, -74.03)


def test_incident_from_osrm_partial_bbox():
    incident = incident_from_osrm(OSRMIncident(geometry_index_start=0, south=1.0, west=2.0))
    assert incident.bbox is None
    assert incident.geometry_index_end is None

from typing import NamedTuple

import cython
import numpy as np
from polyline_rs import decode_latlon

from osrm_adapter.exceptions import InvalidGeometryError
from osrm_adapter.models.route import BoundingBox, GeographicCoordinate


class DecodedPolyline(NamedTuple):
    coordinates: list[GeographicCoordinate]
    bbox: BoundingBox


@cython.cfunc
def _is_well_formed(encoded: str) -> cython.bint:
    # every char in 63..126, the last one ends a value, values come in lat/lng pairs
    values: cython.Py_ssize_t = 0
    last: cython.int = 0
    for char in encoded:
        last = ord(char) - 63
        if last < 0 or last > 63:
            return False
        if last < 0x20:
            values += 1
    return last < 0x20 and values % 2 == 0


def decode_coordinates(encoded: str, precision: int) -> list[GeographicCoordinate]:
    """
    Decode an encoded polyline into coordinates.

    >>> decode_coordinates('_p~iF~ps|U_ulLnnqC_mqNvxq`@', 5)[0]
    GeographicCoordinate(lat=38.5, lng=-120.2)
    """
    if not _is_well_formed(encoded):
        raise InvalidGeometryError(f'Malformed polyline {encoded!r}')
    try:
        points = decode_latlon(encoded, precision)
    except Exception as e:
        raise InvalidGeometryError(f'Failed to decode polyline {encoded!r}: {e}') from e
    return [GeographicCoordinate(lat, lng) for lat, lng in points]


def bounding_box(coordinates: list[GeographicCoordinate]) -> BoundingBox:
    """Compute the bounding rectangle of the given coordinates."""
    if not coordinates:
        raise InvalidGeometryError('Bounding box could not be calculated')

    coords = np.array([(c.lat, c.lng) for c in coordinates], dtype=np.float64)
    min_lat, min_lng = coords.min(axis=0).tolist()
    max_lat, max_lng = coords.max(axis=0).tolist()
    return BoundingBox(
        sw=GeographicCoordinate(min_lat, min_lng),
        ne=GeographicCoordinate(max_lat, max_lng),
    )


def decode_polyline(encoded: str, precision: int) -> DecodedPolyline:
    """
    Decode an encoded polyline into coordinates and their bounding box.

    Raises InvalidGeometryError when the string is malformed or decodes to nothing.
    """
    coordinates = decode_coordinates(encoded, precision)
    return DecodedPolyline(coordinates, bounding_box(coordinates))

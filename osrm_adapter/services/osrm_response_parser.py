import logging
from typing import Protocol

import msgspec

from osrm_adapter.config import OSRM_POLYLINE_PRECISION
from osrm_adapter.exceptions import InvalidStatusCodeError, ResponseDecodeError
from osrm_adapter.lib.instructions import UtteranceIdFactory
from osrm_adapter.lib.route_assembler import assemble_route
from osrm_adapter.lib.uuid7 import uuid7
from osrm_adapter.models.osrm import OSRMResponse
from osrm_adapter.models.route import Route

_DECODER = msgspec.json.Decoder(OSRMResponse)

# Top-level `code` of a successful route service response
_OSRM_SUCCESS_CODE = 'Ok'


class RouteResponseParser(Protocol):
    def parse_response(self, data: bytes) -> list[Route]: ...


class OSRMResponseParser:
    """
    Parser of OSRM-compatible route service responses.

    Not limited to the standard OSRM format: Valhalla and Mapbox extensions
    (banner and voice instructions, annotations, incidents, via waypoints)
    are read when present.
    """

    __slots__ = ('polyline_precision', 'utterance_id_factory')

    def __init__(
        self,
        polyline_precision: int = OSRM_POLYLINE_PRECISION,
        *,
        utterance_id_factory: UtteranceIdFactory = uuid7,
    ) -> None:
        self.polyline_precision = polyline_precision
        self.utterance_id_factory = utterance_id_factory

    def parse_response(self, data: bytes) -> list[Route]:
        """
        Parse the response into routes, in the order of the response.

        Any failure aborts the whole parse, no partial results are returned.
        """
        try:
            response = _DECODER.decode(data)
        except msgspec.DecodeError as e:
            raise ResponseDecodeError(str(e)) from e

        if response.code != _OSRM_SUCCESS_CODE:
            raise InvalidStatusCodeError(response.code, response.message)

        routes = [
            assemble_route(
                route,
                response.waypoints,
                polyline_precision=self.polyline_precision,
                utterance_id_factory=self.utterance_id_factory,
            )
            for route in response.routes
        ]
        logging.debug(
            'Parsed %d routes with %d steps',
            len(routes),
            sum(len(route.steps) for route in routes),
        )
        return routes


def parse_route_response(data: bytes, precision: int = OSRM_POLYLINE_PRECISION) -> list[Route]:
    """Parse an OSRM-compatible route response encoded at the given polyline precision."""
    return OSRMResponseParser(precision).parse_response(data)

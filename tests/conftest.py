from collections.abc import Callable
from functools import cache
from itertools import count
from pathlib import Path
from uuid import UUID

import pytest

_ROUTING_DATA_DIR = Path(__file__).parent.joinpath('data', 'routing')


@cache
def _route_response(name: str) -> bytes:
    return _ROUTING_DATA_DIR.joinpath(f'{name}.json').read_bytes()


@pytest.fixture
def route_response() -> Callable[[str], bytes]:
    """Load a recorded route service response from tests/data/routing."""
    return _route_response


@pytest.fixture
def utterance_ids() -> Callable[[], UUID]:
    """Deterministic utterance id source: UUID(int=1), UUID(int=2), ..."""
    counter = count(1)
    return lambda: UUID(int=next(counter))

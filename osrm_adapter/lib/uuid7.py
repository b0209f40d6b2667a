from time import time_ns
from uuid import UUID

import cython

from osrm_adapter.lib.buffered_random import buffered_randbytes

_last_ms: int = -1
_last_seq: int = 0

# UUIDv7 layout (RFC 9562, section 5.7):
#  48 bits  unix_ts_ms
#   4 bits  version (0b0111)
#  12 bits  rand_a, used here as a per-millisecond sequence
#   2 bits  variant (0b10)
#  62 bits  rand_b


def uuid7() -> UUID:
    """
    Generate a time-ordered UUIDv7.

    Identifiers created within the same millisecond stay ordered by a sequence
    counter. Used as the default source of spoken instruction utterance ids.
    """
    global _last_ms, _last_seq

    ms: cython.ulonglong = time_ns() // 1_000_000
    seq: cython.uint
    if ms == _last_ms:
        seq = (_last_seq + 1) & 0xFFF
    else:
        seq = 0
        _last_ms = ms
    _last_seq = seq

    rand: cython.ulonglong = int.from_bytes(buffered_randbytes(8)) & 0x3FFF_FFFF_FFFF_FFFF

    return UUID(
        int=(
            ((ms & 0xFFFF_FFFF_FFFF) << 80)
            | (7 << 76)  # version
            | (seq << 64)
            | (2 << 62)  # variant
            | rand
        )
    )

from collections.abc import Sequence
from typing import Any

import cython
import msgspec

from osrm_adapter.exceptions import AnnotationSerializationError

type AnnotationRecord = dict[str, Any]

_ENCODER = msgspec.json.Encoder()


def zip_annotations(annotation: dict[str, Any]) -> list[AnnotationRecord]:
    """
    Transpose column-oriented leg annotations into one record per segment.

    Arrays shorter than the longest one leave their key out of the trailing
    records. Non-array values are not per-segment data and are skipped.

    >>> zip_annotations({'distance': [1.0, 2.0], 'maxspeed': [{'unknown': True}]})
    [{'distance': 1.0, 'maxspeed': {'unknown': True}}, {'distance': 2.0}]
    """
    columns = {k: v for k, v in annotation.items() if isinstance(v, list)}
    if not columns:
        return []

    length: cython.Py_ssize_t = max(map(len, columns.values()))
    records: list[AnnotationRecord] = [{} for _ in range(length)]

    i: cython.Py_ssize_t
    for key, values in columns.items():
        for i, value in enumerate(values):
            records[i][key] = value

    return records


def slice_annotations(
    annotations: Sequence[AnnotationRecord] | None,
    start: int,
    end: int,
) -> list[AnnotationRecord] | None:
    """
    Get the annotations of the half-open segment window [start, end).

    Returns None when there are no annotations, or the window is empty or out of range.

    >>> slice_annotations([{'a': 0}, {'a': 1}, {'a': 2}], 1, 3)
    [{'a': 1}, {'a': 2}]
    >>> slice_annotations([{'a': 0}], 0, 2) is None
    True
    """
    if annotations is None or start < 0 or end <= start or end > len(annotations):
        return None
    return list(annotations[start:end])


def serialize_annotations(
    records: Sequence[AnnotationRecord],
    step_index: int,
    *,
    leg_index: int = 0,
) -> list[str]:
    """Encode each annotation record as an independent JSON string."""
    try:
        return [_ENCODER.encode(record).decode() for record in records]
    except (msgspec.EncodeError, TypeError, ValueError, OverflowError) as e:
        raise AnnotationSerializationError(step_index, str(e), leg_index=leg_index) from e

"""Datadog header names read and written by the propagator."""

from typing import List, Tuple

TRACE_ID_HEADER = "x-datadog-trace-id"
PARENT_ID_HEADER = "x-datadog-parent-id"
SAMPLING_PRIORITY_HEADER = "x-datadog-sampling-priority"

FIELDS: Tuple[str, ...] = (
    TRACE_ID_HEADER,
    PARENT_ID_HEADER,
    SAMPLING_PRIORITY_HEADER,
)


def fields() -> List[str]:
    """Return the header names in propagation order."""
    return list(FIELDS)

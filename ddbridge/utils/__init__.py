"""Utility functions for ddbridge."""

from ddbridge.utils.helpers import (
    SPAN_ID_HEX_WIDTH,
    TRACE_ID_HEX_WIDTH,
    format_trace_id,
    format_span_id,
    is_hex,
    parse_trace_id,
    parse_span_id,
)

__all__ = [
    "SPAN_ID_HEX_WIDTH",
    "TRACE_ID_HEX_WIDTH",
    "format_trace_id",
    "format_span_id",
    "is_hex",
    "parse_trace_id",
    "parse_span_id",
]

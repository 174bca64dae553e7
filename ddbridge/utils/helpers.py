"""Helpers for moving OpenTelemetry ids between int and hex forms."""

from __future__ import annotations

import string

_HEX_DIGITS = frozenset(string.hexdigits)

TRACE_ID_HEX_WIDTH = 32
SPAN_ID_HEX_WIDTH = 16


def is_hex(value: str) -> bool:
    """Return True if value is non-empty and made of ASCII hex digits only."""
    return bool(value) and all(c in _HEX_DIGITS for c in value)


def format_trace_id(trace_id: int) -> str:
    """
    Format OTel trace_id (int) to hex string.

    Args:
        trace_id: OTel trace_id as 128-bit int

    Returns:
        32-character hex string
    """
    return format(trace_id, '032x')


def format_span_id(span_id: int) -> str:
    """
    Format OTel span_id (int) to hex string.

    Args:
        span_id: OTel span_id as 64-bit int

    Returns:
        16-character hex string
    """
    return format(span_id, '016x')


def _parse_fixed_hex(hex_string: str, width: int) -> int:
    if len(hex_string) != width or not is_hex(hex_string):
        raise ValueError(f"expected {width} hex characters, got {hex_string!r}")
    return int(hex_string, 16)


def parse_trace_id(hex_string: str) -> int:
    """
    Parse hex string trace_id to OTel int.

    Args:
        hex_string: 32-character hex string

    Returns:
        OTel trace_id as int

    Raises:
        ValueError: If the string is not exactly 32 hex characters
    """
    return _parse_fixed_hex(hex_string, TRACE_ID_HEX_WIDTH)


def parse_span_id(hex_string: str) -> int:
    """
    Parse hex string span_id to OTel int.

    Args:
        hex_string: 16-character hex string

    Returns:
        OTel span_id as int

    Raises:
        ValueError: If the string is not exactly 16 hex characters
    """
    return _parse_fixed_hex(hex_string, SPAN_ID_HEX_WIDTH)

"""Conversion between OpenTelemetry hex ids and Datadog decimal ids.

Datadog ids are limited to 64 bits and travel as decimal text:

    x-b3-traceid: b810dba29803ee61e7c71ff0c2c95a9d -> 16701352862047361693
    x-datadog-parent-id: 2939011537882399028 -> 28c9776c12414134
"""

from __future__ import annotations

from ddbridge.utils.helpers import SPAN_ID_HEX_WIDTH, TRACE_ID_HEX_WIDTH, is_hex

DATADOG_ID_HEX_WIDTH = 16
MAX_DATADOG_ID = 2**64 - 1

__all__ = [
    "DATADOG_ID_HEX_WIDTH",
    "MAX_DATADOG_ID",
    "SPAN_ID_HEX_WIDTH",
    "TRACE_ID_HEX_WIDTH",
    "datadog_id_to_otel",
    "otel_id_to_datadog",
    "pad_hex_id",
]


def otel_id_to_datadog(hex_id: str) -> str:
    """
    Convert an OpenTelemetry hex id to a Datadog decimal id.

    Ids longer than 64 bits keep only their low 64 bits (the last 16
    hex characters), so a 128-bit trace id and its 64-bit B3 form map to
    the same Datadog id.

    Args:
        hex_id: 16 or 32 character hex string

    Returns:
        Decimal string, or "" when the id is too short or not hex
    """
    if len(hex_id) < DATADOG_ID_HEX_WIDTH:
        return ""
    if len(hex_id) > DATADOG_ID_HEX_WIDTH:
        hex_id = hex_id[-DATADOG_ID_HEX_WIDTH:]
    if not is_hex(hex_id):
        return ""
    return str(int(hex_id, 16))


def datadog_id_to_otel(dec_id: str) -> str:
    """
    Convert a Datadog decimal id to an unpadded lowercase hex string.

    Raises:
        ValueError: If dec_id is not an unsigned 64-bit decimal
    """
    # int() alone would accept signs, whitespace, underscores and non-ASCII digits
    if not dec_id or not dec_id.isascii() or not dec_id.isdigit():
        raise ValueError(f"not an unsigned decimal: {dec_id!r}")
    value = int(dec_id)
    if value > MAX_DATADOG_ID:
        raise ValueError(f"out of 64-bit range: {dec_id!r}")
    return format(value, "x")


def pad_hex_id(hex_id: str, width: int) -> str:
    """Left-pad a non-empty hex id with zeros up to width characters."""
    if not hex_id or len(hex_id) >= width:
        return hex_id
    return hex_id.rjust(width, "0")

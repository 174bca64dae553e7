"""Codecs for Datadog header values."""

from ddbridge.codec.identifiers import (
    DATADOG_ID_HEX_WIDTH,
    datadog_id_to_otel,
    otel_id_to_datadog,
    pad_hex_id,
)
from ddbridge.codec.sampling import IS_SAMPLED, NOT_SAMPLED, decode_sampling, encode_sampling

__all__ = [
    "DATADOG_ID_HEX_WIDTH",
    "IS_SAMPLED",
    "NOT_SAMPLED",
    "datadog_id_to_otel",
    "decode_sampling",
    "encode_sampling",
    "otel_id_to_datadog",
    "pad_hex_id",
]

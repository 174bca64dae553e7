"""Tests for the Datadog id and sampling codecs."""

import pytest

from ddbridge.codec import (
    IS_SAMPLED,
    NOT_SAMPLED,
    datadog_id_to_otel,
    decode_sampling,
    encode_sampling,
    otel_id_to_datadog,
    pad_hex_id,
)
from ddbridge.utils.helpers import format_span_id, parse_span_id, parse_trace_id


class TestOtelToDatadog:
    """Hex OpenTelemetry ids to decimal Datadog ids."""

    def test_span_id(self):
        assert otel_id_to_datadog("28c9776c12414134") == "2939011537882399028"

    def test_64bit_trace_id(self):
        assert otel_id_to_datadog("e7c71ff0c2c95a9d") == "16701352862047361693"

    def test_128bit_trace_id_keeps_low_bits(self):
        assert otel_id_to_datadog("b810dba29803ee61e7c71ff0c2c95a9d") == "16701352862047361693"

    def test_odd_length_keeps_last_16_characters(self):
        assert otel_id_to_datadog("fe7c71ff0c2c95a9d") == otel_id_to_datadog("e7c71ff0c2c95a9d")

    def test_leading_zeros(self):
        assert otel_id_to_datadog("000000003ade68b1") == "987654321"
        assert otel_id_to_datadog("0" * 32) == "0"

    def test_upper_case_hex(self):
        assert otel_id_to_datadog("28C9776C12414134") == "2939011537882399028"

    def test_max_value(self):
        assert otel_id_to_datadog("ffffffffffffffff") == "18446744073709551615"

    @pytest.mark.parametrize("hex_id", ["", "3ade68b1", "28c9776c1241413"])
    def test_too_short_is_empty(self, hex_id):
        assert otel_id_to_datadog(hex_id) == ""

    @pytest.mark.parametrize(
        "hex_id",
        ["28c9776c1241413g", "0x9776c12414134a", "28c9_776c1241413", " 28c9776c1241413"],
    )
    def test_not_hex_is_empty(self, hex_id):
        assert otel_id_to_datadog(hex_id) == ""


class TestDatadogToOtel:
    """Decimal Datadog ids to hex OpenTelemetry ids."""

    def test_trace_id(self):
        assert datadog_id_to_otel("16701352862047361693") == "e7c71ff0c2c95a9d"

    def test_no_leading_zeros(self):
        assert datadog_id_to_otel("123456789") == "75bcd15"
        assert datadog_id_to_otel("0000000000000000000") == "0"

    def test_max_value(self):
        assert datadog_id_to_otel("18446744073709551615") == "ffffffffffffffff"

    @pytest.mark.parametrize(
        "dec_id",
        [
            "",
            "18446744073709551616",
            "-1",
            "+1",
            " 1",
            "1 ",
            "1_000",
            "12a",
            "١٢",
        ],
    )
    def test_malformed_raises(self, dec_id):
        with pytest.raises(ValueError):
            datadog_id_to_otel(dec_id)

    @pytest.mark.parametrize("value", [1, 987654321, 2**63, 2**64 - 1])
    def test_round_trip_through_span_id(self, value):
        hex_id = format_span_id(value)
        decoded = pad_hex_id(datadog_id_to_otel(otel_id_to_datadog(hex_id)), 16)
        assert parse_span_id(decoded) == value


def test_pad_hex_id():
    assert pad_hex_id("75bcd15", 32) == "0000000000000000000000000" + "75bcd15"
    assert pad_hex_id("3ade68b1", 16) == "000000003ade68b1"
    assert pad_hex_id("", 16) == ""
    assert pad_hex_id("53995c3f42cd8ad8", 16) == "53995c3f42cd8ad8"


def test_padded_trace_id_parses_to_low_bits():
    padded = pad_hex_id(datadog_id_to_otel("123456789"), 32)
    assert len(padded) == 32
    assert parse_trace_id(padded) == 0x075BCD15


class TestSampling:
    """Sampling priority header values."""

    def test_encode(self):
        assert encode_sampling(True) == IS_SAMPLED == "1"
        assert encode_sampling(False) == NOT_SAMPLED == "0"
        assert encode_sampling(None) == "0"

    @pytest.mark.parametrize("text", ["1", "2", "+1", "10", "9223372036854775807"])
    def test_decode_sampled(self, text):
        assert decode_sampling(text) is True

    @pytest.mark.parametrize("text", ["0", "-1", "-0", "-9223372036854775808"])
    def test_decode_not_sampled(self, text):
        assert decode_sampling(text) is False

    @pytest.mark.parametrize(
        "text",
        ["", "yes", "1.0", " 1", "1_0", "9223372036854775808", "-9223372036854775809"],
    )
    def test_decode_invalid_raises(self, text):
        with pytest.raises(ValueError):
            decode_sampling(text)

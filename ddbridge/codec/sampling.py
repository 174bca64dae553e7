"""Sampling decision to and from the Datadog sampling priority header."""

from __future__ import annotations

import re
from typing import Optional

# Datadog tracers emit other priorities too (-1, 2, ...); >= 1 means sampled
NOT_SAMPLED = "0"
IS_SAMPLED = "1"

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def encode_sampling(sampled: Optional[bool]) -> str:
    return IS_SAMPLED if sampled else NOT_SAMPLED


def decode_sampling(text: str) -> bool:
    """
    Parse a sampling priority and return whether the trace is sampled.

    Raises:
        ValueError: If text is not a signed 64-bit integer
    """
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"not an integer: {text!r}")
    priority = int(text)
    if not _INT64_MIN <= priority <= _INT64_MAX:
        raise ValueError(f"out of 64-bit range: {text!r}")
    return priority >= 1

"""Basic smoke tests for ddbridge.

Quick sanity checks that the public surface imports and works. Detailed
behaviour is covered by the codec, extractor and propagator tests.
"""

import pytest

import ddbridge
from ddbridge import DatadogPropagator


def test_version_exposed():
    """Smoke test: version is accessible."""
    assert hasattr(ddbridge, '__version__')
    assert isinstance(ddbridge.__version__, str)
    assert len(ddbridge.__version__) > 0


def test_import_propagator():
    """Smoke test: propagator can be built and round-trips headers."""
    propagator = DatadogPropagator()
    carrier = {
        "x-datadog-trace-id": "8778793551513751462",
        "x-datadog-parent-id": "6023947403358210776",
        "x-datadog-sampling-priority": "1",
    }

    ctx = propagator.extract(carrier)
    out = {}
    propagator.inject(out, context=ctx)

    assert out == carrier


def test_fields_exposed():
    """Smoke test: header names are exported in order."""
    assert ddbridge.fields() == [
        "x-datadog-trace-id",
        "x-datadog-parent-id",
        "x-datadog-sampling-priority",
    ]
    assert ddbridge.FIELDS == tuple(ddbridge.fields())


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

"""Tests for the OpenTelemetry span emitted while creating response output."""

from __future__ import annotations

import pytest
from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

from tests.utils import output_of
from tests.utils.models import Plain


@pytest.fixture(scope="module")
def span_exporter() -> InMemorySpanExporter:
    exporter = InMemorySpanExporter()
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(exporter))
    trace.set_tracer_provider(provider)
    return exporter


@pytest.fixture(autouse=True)
def clear_spans(span_exporter: InMemorySpanExporter) -> None:
    span_exporter.clear()


class TestOutputSpan:
    def test_output_creates_span(self, span_exporter):
        output_of(Plain())

        spans = span_exporter.get_finished_spans()
        assert [span.name for span in spans] == ["responders.output"]
        assert spans[0].attributes["responders.data_type"] == "Plain"

    def test_error_data_creates_no_span(self, span_exporter):
        output_of(ValueError("boom"))

        assert span_exporter.get_finished_spans() == ()

    def test_hook_failure_is_recorded(self, span_exporter):
        def constructor(data, depth):
            raise RuntimeError("failed")

        with pytest.raises(RuntimeError):
            output_of(Plain(), constructor=constructor)

        (span,) = span_exporter.get_finished_spans()
        assert span.status.status_code == trace.StatusCode.ERROR

"""Observability module for the weather widget.

Uses Arize Phoenix as the OpenTelemetry collector and UI.
"""

from .instrumentation import init_tracing, trace_span, trace_tool, tracing_enabled

__all__ = ["init_tracing", "trace_tool", "trace_span", "tracing_enabled"]

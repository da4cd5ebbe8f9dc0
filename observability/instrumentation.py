"""Span helpers for the weather widget.

Spans go to whatever tracer provider ``init_tracing`` registered. Before that
the OpenTelemetry API hands out a no-op tracer, so decorated code runs the
same with or without a Phoenix collector.
"""

import functools
import os
from typing import Any, Callable, TypeVar

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

F = TypeVar("F", bound=Callable[..., Any])

TRACER_NAME = "weather-widget"

_tracer: trace.Tracer | None = None


def get_tracer() -> trace.Tracer:
    global _tracer
    if _tracer is None:
        _tracer = trace.get_tracer(TRACER_NAME)
    return _tracer


def tracing_enabled() -> bool:
    """Whether WEATHER_WIDGET_TRACING asks for spans to be exported."""
    return os.getenv("WEATHER_WIDGET_TRACING", "").lower() in ("1", "true", "yes")


def init_tracing(
    project_name: str = TRACER_NAME,
    endpoint: str | None = None,
) -> None:
    """Register a Phoenix tracer provider and route widget spans to it.

    Args:
        project_name: Project shown in the Phoenix UI.
        endpoint: OTLP collector URL. Falls back to PHOENIX_COLLECTOR_ENDPOINT,
            then to a Phoenix server on localhost.
    """
    from phoenix.otel import register

    collector_endpoint = endpoint or os.getenv(
        "PHOENIX_COLLECTOR_ENDPOINT",
        "http://localhost:6006/v1/traces"
    )
    tracer_provider = register(
        project_name=project_name,
        endpoint=collector_endpoint,
    )

    global _tracer
    _tracer = trace.get_tracer(TRACER_NAME, tracer_provider=tracer_provider)

    print(f"Phoenix tracing initialized for project: {project_name}")
    print(f"Sending traces to: {collector_endpoint}")


def trace_tool(name: str, record_result: bool = True) -> Callable[[F], F]:
    """Wrap a call in a span named ``name``.

    With ``record_result`` the ``str()`` of a non-None return value is stored
    as ``output.result``. Exceptions mark the span as failed and re-raise.
    """
    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            with get_tracer().start_as_current_span(name) as span:
                span.set_attribute("code.function", func.__qualname__)
                try:
                    result = func(*args, **kwargs)
                except Exception as e:
                    span.set_status(Status(StatusCode.ERROR, str(e)))
                    span.set_attribute("error.type", type(e).__name__)
                    raise
                if record_result and result is not None:
                    span.set_attribute("output.result", str(result))
                span.set_status(Status(StatusCode.OK))
                return result

        return wrapper  # type: ignore

    return decorator


def trace_span(name: str) -> Callable[[F], F]:
    """Span around a call without recording its result."""
    return trace_tool(name, record_result=False)

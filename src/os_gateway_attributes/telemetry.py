"""
OpenTelemetry integration for gateway attributes.

Records finalized gateway attribute sets as events on the current span, so a
trace of the emitting call shows exactly what was handed to Object Store
Gateway.

This module gracefully degrades if OpenTelemetry is not installed,
allowing the library to work without OTEL as a required dependency.

Usage:
    from os_gateway_attributes import OsGatewayAttributeGenerator
    from os_gateway_attributes.telemetry import add_attributes_to_span

    generator = OsGatewayAttributeGenerator.access_revoke(scope, account)
    add_attributes_to_span(generator)
"""

from __future__ import annotations

import logging
from typing import Any

from .generator import OsGatewayAttributeGenerator

logger = logging.getLogger(__name__)

# Try to import OpenTelemetry, but don't require it
try:
    from opentelemetry import trace

    OTEL_AVAILABLE = True
except ImportError:
    OTEL_AVAILABLE = False
    trace = None  # type: ignore

SPAN_EVENT_PREFIX = "os_gateway"


def is_otel_available() -> bool:
    """Check if OpenTelemetry is available."""
    return OTEL_AVAILABLE


def get_current_span() -> Any:
    """
    Get the current OpenTelemetry span.

    Returns:
        Current span if OTEL available and span exists, None otherwise
    """
    if not OTEL_AVAILABLE:
        return None
    return trace.get_current_span()


def add_attributes_to_span(
    generator: OsGatewayAttributeGenerator,
    name: str | None = None,
) -> bool:
    """
    Add the generator's attributes as an event on the current span.

    Args:
        generator: Generator whose finalized attributes are recorded
        name: Span event name (defaults to "os_gateway.<event_type>")

    Returns:
        True if an event was recorded, False otherwise
    """
    if not OTEL_AVAILABLE:
        return False

    span = get_current_span()
    if not span or not span.is_recording():
        return False

    event_name = name or f"{SPAN_EVENT_PREFIX}.{generator.event_kind.value}"
    span.add_event(event_name, attributes=generator.to_dict())
    logger.debug(f"Recorded {len(generator)} gateway attributes on span event {event_name}")
    return True

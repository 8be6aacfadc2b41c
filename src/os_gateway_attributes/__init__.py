"""
Object Store Gateway Attributes.

Generates the event attributes a contract response must carry so that
Object Store Gateway grants or revokes access to scope record data.

Features:
- Fixed vocabulary of gateway attribute keys and event types
- Immutable fluent builder for access grant and access revoke events
- Optional access grant id to link a grant with a later revoke
- Deterministic output ordered by ascending key
- Optional OpenTelemetry integration

Basic Usage:
    from os_gateway_attributes import OsGatewayAttributeGenerator

    response_attributes = []

    OsGatewayAttributeGenerator.access_grant(
        # Scope Address
        "scope1qzn7jghj8puprmdcvunm3330jutsj803zz",
        # Grantee Address
        "tp12vu3ww5tfta78fl3fvehacunrud4gtqqcpfwnr",
    ).with_access_grant_id("my_unique_id").merge_into(response_attributes)

Revoking Every Grant For An Account:
    attributes = OsGatewayAttributeGenerator.access_revoke(
        "scope1qzn7jghj8puprmdcvunm3330jutsj803zz",
        "tp12vu3ww5tfta78fl3fvehacunrud4gtqqcpfwnr",
    ).into_attributes()
"""

from .event_types import OS_GATEWAY_EVENT_TYPES, EventKind, OsGatewayEventTypes
from .generator import Attribute, OsGatewayAttributeGenerator
from .keys import ALL_KEYS, OS_GATEWAY_KEYS, REQUIRED_KEYS, AttributeKey, OsGatewayKeys
from .telemetry import add_attributes_to_span, get_current_span, is_otel_available

__version__ = "0.1.0"

__all__ = [
    # Core
    "OsGatewayAttributeGenerator",
    "Attribute",
    # Keys
    "AttributeKey",
    "OsGatewayKeys",
    "OS_GATEWAY_KEYS",
    "ALL_KEYS",
    "REQUIRED_KEYS",
    # Event types
    "EventKind",
    "OsGatewayEventTypes",
    "OS_GATEWAY_EVENT_TYPES",
    # Telemetry (OpenTelemetry integration)
    "is_otel_available",
    "get_current_span",
    "add_attributes_to_span",
]

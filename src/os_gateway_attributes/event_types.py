"""
Event type values recognized by Object Store Gateway.

The value stored under the event type key tells the gateway whether the event
is an access grant or an access revocation.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class EventKind(str, Enum):
    """The two processing modes the gateway supports."""

    ACCESS_GRANT = "access_grant"
    ACCESS_REVOKE = "access_revoke"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class OsGatewayEventTypes:
    """Immutable record of every event type value literal."""

    access_grant: str
    access_revoke: str


OS_GATEWAY_EVENT_TYPES = OsGatewayEventTypes(
    access_grant=EventKind.ACCESS_GRANT.value,
    access_revoke=EventKind.ACCESS_REVOKE.value,
)

"""
Attribute keys recognized by Object Store Gateway.

These literals are the wire contract between an emitting contract and the
gateway that digests its events. The gateway keys off the exact strings, so
they must never change once published.

Usage:
    from os_gateway_attributes.keys import OS_GATEWAY_KEYS, AttributeKey

    OS_GATEWAY_KEYS.scope_address  # "object_store_gateway_scope_address"
    AttributeKey.EVENT_TYPE.value  # "object_store_gateway_event_type"
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class AttributeKey(str, Enum):
    """Closed set of attribute keys understood by the gateway."""

    # Selects which gateway functionality processes the event
    EVENT_TYPE = "object_store_gateway_event_type"
    # The scope the event refers to
    SCOPE_ADDRESS = "object_store_gateway_scope_address"
    # The account the event takes action upon
    TARGET_ACCOUNT = "object_store_gateway_target_account_address"
    # Optional id linking a grant to a later revoke
    ACCESS_GRANT_ID = "object_store_gateway_access_grant_id"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class OsGatewayKeys:
    """
    Immutable record of every gateway key literal.

    Attributes:
        event_type: Key whose value selects grant or revoke processing
        scope_address: Key holding the scope address
        target_account: Key holding the grantee or revokee account address
        access_grant_id: Key holding the optional access grant id. On a grant
            the gateway creates the grant with this id (or rejects a
            duplicate); on a revoke only the grant with this id is removed.
    """

    event_type: str
    scope_address: str
    target_account: str
    access_grant_id: str


OS_GATEWAY_KEYS = OsGatewayKeys(
    event_type=AttributeKey.EVENT_TYPE.value,
    scope_address=AttributeKey.SCOPE_ADDRESS.value,
    target_account=AttributeKey.TARGET_ACCOUNT.value,
    access_grant_id=AttributeKey.ACCESS_GRANT_ID.value,
)

ALL_KEYS = frozenset(key.value for key in AttributeKey)

# Present in every finalized attribute set
REQUIRED_KEYS = frozenset(
    {
        AttributeKey.EVENT_TYPE.value,
        AttributeKey.SCOPE_ADDRESS.value,
        AttributeKey.TARGET_ACCOUNT.value,
    }
)

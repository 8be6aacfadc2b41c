"""
Attribute generation for Object Store Gateway events.

This module defines OsGatewayAttributeGenerator - an immutable builder that
produces every attribute a contract response needs in order to signal an
access grant or an access revocation to Object Store Gateway.

Builders are only obtained through the two named constructors, both of which
populate the event type, scope address and target account. A finalized
attribute set therefore always holds those three keys plus, when supplied,
the access grant id.

Usage:
    from os_gateway_attributes import OsGatewayAttributeGenerator

    attributes = (
        OsGatewayAttributeGenerator.access_grant(
            "scope1qzn7jghj8puprmdcvunm3330jutsj803zz",
            "tp12vu3ww5tfta78fl3fvehacunrud4gtqqcpfwnr",
        )
        .with_access_grant_id("my_unique_id")
        .into_attributes()
    )

Attribute Ordering:
    Pairs are always emitted in ascending order of their key literal, no matter
    which order the fluent calls were made in. Identical inputs yield
    identical output, which keeps event logs reproducible.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from .event_types import EventKind
from .keys import AttributeKey

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Attribute:
    """
    A single key/value pair destined for a contract response.

    Attributes:
        key: Attribute key literal
        value: Attribute value, passed through verbatim
    """

    key: str
    value: str

    def to_tuple(self) -> tuple[str, str]:
        return (self.key, self.value)


@dataclass(frozen=True, slots=True)
class OsGatewayAttributeGenerator:
    """
    Creates and tracks all attributes needed to interact with Object Store Gateway.

    Instances are immutable: every fluent call returns a new generator and
    leaves the original untouched. Repeating a fluent call replaces the value
    submitted by the previous call.

    Do not instantiate directly. Use access_grant() or access_revoke(), which
    guarantee that every required attribute is present.
    """

    _attributes: tuple[tuple[str, str], ...] = ()

    @classmethod
    def access_grant(
        cls, scope_address: str, target_account_address: str
    ) -> OsGatewayAttributeGenerator:
        """
        Generate the attributes that ask the gateway to grant access to an account.

        The gateway disregards the event unless the signer of the contract
        payload is the value owner of the scope, and an account registered to
        the gateway instance was used as an additional audience when the
        scope's records were stored in Object Store.

        Args:
            scope_address: Bech32 address of the scope the grant refers to
            target_account_address: Bech32 address of the account that will be
                able to retrieve all record data for the scope

        Returns:
            Generator holding the three required attributes
        """
        logger.debug(
            f"Building access grant attributes for scope {scope_address} "
            f"and account {target_account_address}"
        )
        return cls._for_event(EventKind.ACCESS_GRANT, scope_address, target_account_address)

    @classmethod
    def access_revoke(
        cls, scope_address: str, target_account_address: str
    ) -> OsGatewayAttributeGenerator:
        """
        Generate the attributes that ask the gateway to revoke access from an account.

        The gateway disregards the event unless the signer of the contract
        payload is the value owner of the scope, or is the target account
        itself.

        Without an access grant id every grant for the (scope, account) pair
        is removed. See with_access_grant_id() to target a single grant.

        Args:
            scope_address: Bech32 address of the scope the revoke refers to
            target_account_address: Bech32 address of the account that will no
                longer be able to retrieve records for the scope

        Returns:
            Generator holding the three required attributes
        """
        logger.debug(
            f"Building access revoke attributes for scope {scope_address} "
            f"and account {target_account_address}"
        )
        return cls._for_event(EventKind.ACCESS_REVOKE, scope_address, target_account_address)

    def with_access_grant_id(self, access_grant_id: str) -> OsGatewayAttributeGenerator:
        """
        Include a unique access grant id in the event.

        On an access grant, the gateway records the grant under this id so a
        later revoke can target it directly. On an access revoke, only the
        grant with this id is removed instead of every grant for the scope and
        account.

        Args:
            access_grant_id: The id to attach; replaces any previous id

        Returns:
            New generator including the access grant id
        """
        return self._with(AttributeKey.ACCESS_GRANT_ID, access_grant_id)

    @classmethod
    def _for_event(
        cls, event_kind: EventKind, scope_address: str, target_account_address: str
    ) -> OsGatewayAttributeGenerator:
        return (
            cls()
            ._with(AttributeKey.EVENT_TYPE, event_kind.value)
            ._with(AttributeKey.SCOPE_ADDRESS, scope_address)
            ._with(AttributeKey.TARGET_ACCOUNT, target_account_address)
        )

    def _with(self, key: AttributeKey, value: str) -> OsGatewayAttributeGenerator:
        attributes = dict(self._attributes)
        attributes[key.value] = str(value)
        return type(self)(tuple(sorted(attributes.items())))

    def _get(self, key: AttributeKey) -> str | None:
        for attribute_key, value in self._attributes:
            if attribute_key == key.value:
                return value
        return None

    @property
    def event_kind(self) -> EventKind:
        return EventKind(self._get(AttributeKey.EVENT_TYPE))

    @property
    def scope_address(self) -> str:
        return self._get(AttributeKey.SCOPE_ADDRESS) or ""

    @property
    def target_account_address(self) -> str:
        return self._get(AttributeKey.TARGET_ACCOUNT) or ""

    @property
    def access_grant_id(self) -> str | None:
        """The attached access grant id, or None when omitted."""
        return self._get(AttributeKey.ACCESS_GRANT_ID)

    def __len__(self) -> int:
        return len(self._attributes)

    def __contains__(self, key: object) -> bool:
        if isinstance(key, AttributeKey):
            key = key.value
        return any(attribute_key == key for attribute_key, _ in self._attributes)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self.into_attributes())

    def into_attributes(self) -> list[tuple[str, str]]:
        """
        Finalize into (key, value) pairs.

        Returns:
            Every attribute, ordered by ascending key
        """
        return sorted(self._attributes)

    def to_attributes(self) -> list[Attribute]:
        """Finalize into Attribute records, ordered by ascending key."""
        return [Attribute(key, value) for key, value in self.into_attributes()]

    def to_dict(self) -> dict[str, str]:
        return dict(self.into_attributes())

    def to_json(self) -> str:
        """
        Serialize the attributes to a JSON object.

        Returns:
            Compact JSON string (single line, keys in ascending order)
        """
        return json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False)

    def merge_into(self, attributes: list[Any]) -> list[Any]:
        """
        Append the finalized pairs to a caller-owned attribute list.

        Existing entries are left in place; the gateway pairs follow them in
        ascending key order.

        Args:
            attributes: The caller's response attributes

        Returns:
            The same list, for chaining
        """
        attributes.extend(self.into_attributes())
        return attributes

"""Outbound role resolution: local role -> LTI roles sent at launch."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence

logger = logging.getLogger("ltibridge.roles.outbound")

Lookup = Callable[[str], str | None]


def upconvert_legacy(role: str, *legacy_maps: Mapping[str, str] | None) -> str | None:
    """Return the canonical URN for a legacy role token, or ``None``."""
    for legacy_map in legacy_maps:
        if legacy_map and role in legacy_map:
            return legacy_map[role]
    return None


def _joined(aliases: Sequence[str] | None) -> str | None:
    if not aliases:
        return None
    return ",".join(aliases)


def resolve_outbound(
    local_role: str | None,
    tool_map: Mapping[str, Sequence[str]] | None,
    tenant_prop_map: Mapping[str, Sequence[str]] | None,
    default_map: Mapping[str, Sequence[str]] | None,
    tool_legacy_map: Mapping[str, str] | None = None,
    default_legacy_map: Mapping[str, str] | None = None,
) -> str | None:
    """Map a local role to the comma-joined LTI role string for a launch.

    Sources are tried in order and the first hit wins outright:

    1. the tool's own map, with each alias up-converted through the legacy maps
    2. the tenant property map
    3. the built-in default map
    4. the legacy maps applied to ``local_role`` itself

    Returns ``None`` when the role is unmapped.
    """
    if not local_role:
        return None

    def from_tool(role: str) -> str | None:
        aliases = (tool_map or {}).get(role)
        if not aliases:
            return None
        converted: list[str] = []
        for alias in aliases:
            urn = upconvert_legacy(alias, tool_legacy_map, default_legacy_map) or alias
            if urn not in converted:
                converted.append(urn)
        return _joined(converted)

    def from_tenant(role: str) -> str | None:
        return _joined((tenant_prop_map or {}).get(role))

    def from_default(role: str) -> str | None:
        return _joined((default_map or {}).get(role))

    def from_legacy(role: str) -> str | None:
        return upconvert_legacy(role, tool_legacy_map, default_legacy_map)

    lookups: tuple[tuple[str, Lookup], ...] = (
        ("tool", from_tool),
        ("tenant", from_tenant),
        ("default", from_default),
        ("legacy", from_legacy),
    )
    for source, lookup in lookups:
        lti_role = lookup(local_role)
        if lti_role is not None:
            logger.debug(
                "Outbound role %r mapped from %s map to %r",
                local_role,
                source,
                lti_role,
                extra={"local_role": local_role, "lti_roles": lti_role, "source": source},
            )
            return lti_role

    logger.debug("Outbound role %r is unmapped", local_role)
    return None

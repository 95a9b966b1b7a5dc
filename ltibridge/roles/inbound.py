"""Inbound role resolution: LTI roles from a launch -> one local role.

Incoming role lists mix context and institution roles, and often vendor
URNs nobody maps (``urn:canvas:instructor``).  A site only supports some
local roles ("Student"/"Instructor" in a course, "access"/"maintain" in a
project), so the answer is the first role the site actually has, walking
tokens in the order sent and each token's candidates in map order.
Specific-over-general ordering lives in the maps, not here.
"""

from __future__ import annotations

import logging
from collections.abc import Collection, Mapping, Sequence

from ltibridge.roles.outbound import upconvert_legacy

logger = logging.getLogger("ltibridge.roles.inbound")


def split_roles(incoming_roles: str | None) -> list[str]:
    """Split a comma-separated role claim into trimmed, non-empty tokens."""
    if not incoming_roles:
        return []
    return [t.strip() for t in incoming_roles.split(",") if t.strip()]


def candidates_for(urn: str, *role_maps: Mapping[str, Sequence[str]] | None) -> Sequence[str]:
    """Return the candidates from the first map with a non-empty entry."""
    for role_map in role_maps:
        if role_map:
            found = role_map.get(urn)
            if found:
                return found
    return ()


def resolve_inbound(
    incoming_roles: str | None,
    valid_local_roles: Collection[str],
    tenant_map: Mapping[str, Sequence[str]] | None,
    tenant_prop_map: Mapping[str, Sequence[str]] | None,
    default_map: Mapping[str, Sequence[str]] | None,
    tool_legacy_map: Mapping[str, str] | None = None,
    default_legacy_map: Mapping[str, str] | None = None,
) -> str | None:
    """Pick the local role for an incoming comma-separated LTI role list.

    Returns ``None`` when no token maps to a role in ``valid_local_roles``.
    """
    for token in split_roles(incoming_roles):
        urn = upconvert_legacy(token, tool_legacy_map, default_legacy_map) or token
        for candidate in candidates_for(urn, tenant_map, tenant_prop_map, default_map):
            if candidate in valid_local_roles:
                logger.debug(
                    "Inbound role %r resolved to %r",
                    token,
                    candidate,
                    extra={"local_role": candidate, "lti_roles": incoming_roles},
                )
                return candidate

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("No local role for %r among %s", incoming_roles, sorted(valid_local_roles))
    return None

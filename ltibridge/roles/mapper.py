"""Role mapping service wiring tenant configuration to the resolvers."""

from __future__ import annotations

from collections.abc import Collection

from ltibridge.config import Settings, settings as default_settings
from ltibridge.roles.inbound import resolve_inbound
from ltibridge.roles.outbound import resolve_outbound
from ltibridge.roles.parsing import parse_inbound_map, parse_legacy_map, parse_outbound_map
from ltibridge.roles.vocab import (
    LTI_INBOUND_ROLE_MAP_DEFAULT,
    LTI_LEGACY_ROLE_MAP_DEFAULT,
    LTI_OUTBOUND_ROLE_MAP_DEFAULT,
)


class RoleMapper:
    """Maps roles in both directions for one tenant.

    Holds only the configuration strings; the maps are parsed again on every
    call so a mapper can be shared between threads.
    """

    def __init__(self, config: Settings | None = None) -> None:
        config = config or default_settings
        self.tenant_outbound = config.outbound_role_map
        self.tenant_inbound = config.inbound_role_map
        self.tenant_legacy = config.legacy_role_map

    def outbound(self, local_role: str, tool_outbound_map: str | None = None) -> str | None:
        """Return the LTI roles to send for ``local_role``, or ``None``."""
        return resolve_outbound(
            local_role,
            parse_outbound_map(tool_outbound_map),
            parse_outbound_map(self.tenant_outbound),
            parse_outbound_map(LTI_OUTBOUND_ROLE_MAP_DEFAULT),
            parse_legacy_map(self.tenant_legacy),
            parse_legacy_map(LTI_LEGACY_ROLE_MAP_DEFAULT),
        )

    def inbound(
        self,
        incoming_roles: str,
        valid_local_roles: Collection[str],
        tenant_inbound_map: str | None = None,
    ) -> str | None:
        """Return the local role for an incoming LTI role claim, or ``None``.

        ``tenant_inbound_map`` is the per-tenant override stored with the
        tenant record; the configured property map sits below it.
        """
        return resolve_inbound(
            incoming_roles,
            valid_local_roles,
            parse_inbound_map(tenant_inbound_map),
            parse_inbound_map(self.tenant_inbound),
            parse_inbound_map(LTI_INBOUND_ROLE_MAP_DEFAULT),
            parse_legacy_map(self.tenant_legacy),
            parse_legacy_map(LTI_LEGACY_ROLE_MAP_DEFAULT),
        )

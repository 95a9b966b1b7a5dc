"""Bidirectional mapping between local roles and LTI role URNs."""

from ltibridge.roles.inbound import resolve_inbound
from ltibridge.roles.mapper import RoleMapper
from ltibridge.roles.outbound import resolve_outbound
from ltibridge.roles.parsing import parse_inbound_map, parse_legacy_map, parse_outbound_map

__all__ = [
    "RoleMapper",
    "parse_inbound_map",
    "parse_legacy_map",
    "parse_outbound_map",
    "resolve_inbound",
    "resolve_outbound",
]

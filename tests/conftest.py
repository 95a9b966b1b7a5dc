"""Shared fixtures for ltibridge tests."""

from __future__ import annotations

import pytest

from ltibridge.roles.inbound import resolve_inbound
from ltibridge.roles.outbound import resolve_outbound
from ltibridge.roles.parsing import parse_inbound_map, parse_legacy_map, parse_outbound_map
from ltibridge.roles.vocab import (
    LTI_INBOUND_ROLE_MAP_DEFAULT,
    LTI_LEGACY_ROLE_MAP_DEFAULT,
    LTI_OUTBOUND_ROLE_MAP_DEFAULT,
)

PROP_LEGACY_MAP = "urn:lti:instrole:dude=http://purl.imsglobal.org/vocab/lis/v2/membership#Instructor#Dude"
PROP_OUTBOUND_MAP = (
    "Dude:Dude,http://purl.imsglobal.org/vocab/lis/v2/institution/person#Abides;"
    "Staff:Staff,Dude,http://purl.imsglobal.org/vocab/lis/v2/institution/person#Staff;"
)


@pytest.fixture
def project_roles() -> set[str]:
    return {"access", "maintain"}


@pytest.fixture
def course_roles() -> set[str]:
    # Keep the blank in "Teaching Assistant"
    return {"Student", "Instructor", "Teaching Assistant"}


@pytest.fixture
def lti_roles() -> set[str]:
    return {
        "Instructor",
        "Teaching Assistant",
        "ContentDeveloper",
        "Faculty",
        "Member",
        "Learner",
        "Mentor",
        "Staff",
        "Alumni",
        "ProspectiveStudent",
        "Guest",
        "Other",
        "Administrator",
        "Manager",
        "Observer",
        "Officer",
        "None",
    }


@pytest.fixture
def map_outbound():
    """Outbound mapping with a tenant property map and legacy override in place."""

    def _map(local_role: str, tool_map: str | None = None) -> str | None:
        return resolve_outbound(
            local_role,
            parse_outbound_map(tool_map),
            parse_outbound_map(PROP_OUTBOUND_MAP),
            parse_outbound_map(LTI_OUTBOUND_ROLE_MAP_DEFAULT),
            parse_legacy_map(PROP_LEGACY_MAP),
            parse_legacy_map(LTI_LEGACY_ROLE_MAP_DEFAULT),
        )

    return _map


@pytest.fixture
def map_inbound():
    """Inbound mapping with no tenant property map, as on a fresh install."""

    def _map(incoming: str | None, site_roles: set[str], tenant_map: str | None = None) -> str | None:
        return resolve_inbound(
            incoming,
            site_roles,
            parse_inbound_map(tenant_map),
            None,
            parse_inbound_map(LTI_INBOUND_ROLE_MAP_DEFAULT),
            parse_legacy_map(PROP_LEGACY_MAP),
            parse_legacy_map(LTI_LEGACY_ROLE_MAP_DEFAULT),
        )

    return _map

"""Loaders for the delimited role map configuration strings.

Formats (no escaping of ``;``, ``:``, ``,`` or ``=`` is possible):

    legacy    ``token=urn;token2=urn2``
    outbound  ``localRole:alias1,alias2;localRole2:alias3``
    inbound   ``urn:localRole1,localRole2;urn2:localRole3``

Malformed entries are skipped, never fatal, since these strings are usually
edited by hand.  Every call builds a new dict.
"""

from __future__ import annotations

import logging

logger = logging.getLogger("ltibridge.roles.parsing")

LegacyMap = dict[str, str]
RoleMap = dict[str, list[str]]


def _entries(spec: str | None, delimiter: str = ";") -> list[str]:
    if spec is None or not spec.strip():
        return []
    return [e.strip() for e in spec.split(delimiter) if e.strip()]


def _aliases(value: str) -> list[str]:
    """Split an alias list on commas, keeping blanks inside names."""
    return [a.strip() for a in value.split(",") if a.strip()]


def _comma_entries(spec: str) -> list[str]:
    """Split the older one-pair-per-comma form.

    A segment without its own ``localRole:`` prefix (a second alias, or a URL
    alias such as ``http://...``) cannot be told apart from a new entry, so it
    is dropped rather than read as a key.
    """
    entries = []
    for segment in _entries(spec, ","):
        _, sep, rest = segment.partition(":")
        if not sep or rest.startswith("//"):
            logger.debug("Dropping %r from comma-delimited outbound role map", segment)
            continue
        entries.append(segment)
    return entries


def parse_legacy_map(spec: str | None) -> LegacyMap:
    """Parse ``key=value;...`` into a legacy token -> canonical URN map."""
    result: LegacyMap = {}
    for entry in _entries(spec):
        key, sep, value = entry.partition("=")
        key, value = key.strip(), value.strip()
        if not sep or not key or not value:
            logger.debug("Skipping malformed legacy role entry %r", entry)
            continue
        result[key] = value
    return result


def parse_outbound_map(spec: str | None) -> RoleMap:
    """Parse an outbound role map.

    The key is everything before the first ``:`` so that aliases may be URNs.
    A string without any ``;`` is read in the older comma-delimited form,
    one ``localRole:alias`` pair per comma; use ``;`` between entries to give
    a role more than one alias.
    """
    if spec is not None and ";" not in spec:
        entries = _comma_entries(spec)
    else:
        entries = _entries(spec)

    result: RoleMap = {}
    for entry in entries:
        key, sep, value = entry.partition(":")
        key = key.strip()
        aliases = _aliases(value)
        if not sep or not key or not aliases:
            logger.debug("Skipping malformed outbound role entry %r", entry)
            continue
        result[key] = aliases
    return result


def parse_inbound_map(spec: str | None) -> RoleMap:
    """Parse an inbound role map.

    The key is everything before the last ``:`` because keys are URNs.
    Repeated keys append their candidates to the earlier entry.
    """
    result: RoleMap = {}
    for entry in _entries(spec):
        key, sep, value = entry.rpartition(":")
        key = key.strip()
        candidates = _aliases(value)
        if not sep or not key or not candidates:
            logger.debug("Skipping malformed inbound role entry %r", entry)
            continue
        existing = result.setdefault(key, [])
        for candidate in candidates:
            if candidate not in existing:
                existing.append(candidate)
    return result

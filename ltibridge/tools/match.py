"""Best tool match: pick the registered tool for a launch URL.

A record matches when the URL starts with its launch prefix.  Records scoped
to the current site win over global ones even when their prefix is shorter,
so a site can override a global registration; within the same scope the
longest prefix wins and, on a tie, the last record seen.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger("ltibridge.tools.match")


class ToolRecord(BaseModel):
    """A registered external tool as supplied by the tool repository."""

    model_config = ConfigDict(frozen=True)

    launch: str
    site_id: str = ""
    data: dict[str, Any] = Field(default_factory=dict)

    @property
    def is_global(self) -> bool:
        return self.site_id == ""


@runtime_checkable
class ToolRepository(Protocol):
    """Persistence collaborator that lists tools visible to a site."""

    def list_tools(self, site_id: str | None) -> Sequence[ToolRecord]:
        """Return local tools for ``site_id`` plus global tools."""
        ...


def find_best_match(
    target_url: str | None,
    tools: Iterable[ToolRecord],
    current_scope: str | None = None,
) -> ToolRecord | None:
    """Return the most specific tool record for ``target_url``, or ``None``.

    With ``current_scope=None`` any non-empty ``site_id`` counts as local;
    otherwise records scoped to a different site are ignored.
    """
    if not target_url:
        return None

    best_local: ToolRecord | None = None
    best_global: ToolRecord | None = None
    for tool in tools:
        if not tool.launch or not target_url.startswith(tool.launch):
            continue
        if tool.is_global:
            if best_global is None or len(tool.launch) >= len(best_global.launch):
                best_global = tool
        elif current_scope is None or tool.site_id == current_scope:
            if best_local is None or len(tool.launch) >= len(best_local.launch):
                best_local = tool

    best = best_local or best_global
    if best is None:
        logger.debug("No tool registered for %s", target_url)
    else:
        logger.debug(
            "Matched %s to %s (site=%r)",
            target_url,
            best.launch,
            best.site_id,
            extra={"tool_id": best.data.get("id")},
        )
    return best


def find_best_tool(
    target_url: str | None, repository: ToolRepository, site_id: str | None
) -> ToolRecord | None:
    """Fetch the tools visible to ``site_id`` and pick the best match."""
    return find_best_match(target_url, repository.list_tools(site_id), site_id)

"""Resource link id history.

When a content item is copied, the copy remembers every ``content:<id>`` it
descends from (in its JSON ``settings`` under ``id_history``) so launches
carrying an old resource link id can still be routed to it.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping, MutableMapping
from typing import Any

from ltibridge.fields import CONTENT_ID_PREFIX, LTI_ID, LTI_ID_HISTORY, LTI_SETTINGS

logger = logging.getLogger("ltibridge.history")


def _settings(content: Mapping[str, Any]) -> dict[str, Any]:
    raw = content.get(LTI_SETTINGS)
    if isinstance(raw, Mapping):
        return dict(raw)
    if not raw:
        return {}
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError:
        logger.warning("Ignoring unparseable settings on content %s", content.get(LTI_ID))
        return {}
    return parsed if isinstance(parsed, dict) else {}


def _split(history: str | None) -> list[str]:
    if not history:
        return []
    return [h.strip() for h in history.split(",") if h.strip()]


def _natural_key(item: str) -> tuple[str, int, str]:
    prefix, _, suffix = item.rpartition(":")
    return prefix, int(suffix) if suffix.isdigit() else -1, suffix


def _join(items: Iterable[str]) -> str:
    return ",".join(sorted(set(items), key=_natural_key))


def resource_link_history(content: Mapping[str, Any]) -> str:
    """Return the history of ``content`` including its own id."""
    items = _split(_settings(content).get(LTI_ID_HISTORY))
    if content.get(LTI_ID) is not None:
        items.append(f"{CONTENT_ID_PREFIX}{content[LTI_ID]}")
    return _join(items)


def track_resource_link_id(
    new_content: MutableMapping[str, Any], old_content: Mapping[str, Any]
) -> bool:
    """Fold ``old_content``'s history into ``new_content``'s settings.

    Returns False, leaving ``new_content`` untouched, when every id of
    ``old_content`` is already recorded however the stored list is ordered.
    """
    settings = _settings(new_content)
    current = _split(settings.get(LTI_ID_HISTORY))
    incoming = _split(resource_link_history(old_content))
    if set(incoming) <= set(current):
        return False
    merged = _join(current + incoming)
    settings[LTI_ID_HISTORY] = merged
    new_content[LTI_SETTINGS] = json.dumps(settings)
    return True

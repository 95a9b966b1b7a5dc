"""Launch codes tie a launch to one content item and its placement secret."""

from __future__ import annotations

import hashlib
import hmac
from collections.abc import Mapping
from typing import Any

from ltibridge.fields import LAUNCH_CODE_PREFIX, LTI_ID, LTI_PLACEMENTSECRET


def get_launch_code_key(content: Mapping[str, Any]) -> str:
    """Return the session key for a content item, e.g. ``launch_code:42``."""
    return f"{LAUNCH_CODE_PREFIX}{content.get(LTI_ID)}"


def get_launch_code(content: Mapping[str, Any]) -> str | None:
    """HMAC-SHA256 of the launch code key, keyed by the placement secret.

    Returns ``None`` when the content has no id or no placement secret.
    """
    content_id = content.get(LTI_ID)
    secret = content.get(LTI_PLACEMENTSECRET)
    if content_id is None or not secret:
        return None
    return hmac.new(
        str(secret).encode("utf-8"),
        get_launch_code_key(content).encode("utf-8"),
        hashlib.sha256,
    ).hexdigest()


def check_launch_code(content: Mapping[str, Any], launch_code: str | None) -> bool:
    """Return True if ``launch_code`` was issued for this content and secret."""
    expected = get_launch_code(content)
    if expected is None or not launch_code:
        return False
    return hmac.compare_digest(expected.encode("utf-8"), launch_code.encode("utf-8"))

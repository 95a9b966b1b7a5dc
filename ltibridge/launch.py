"""Small helpers used while building a launch."""

from __future__ import annotations

import re

# k=v;k=v;k=v with an optional trailing semicolon, one '=' per segment
_SEMICOLON_CUSTOM = re.compile(r"[^=;\n]+=[^=;\n]*(?:;[^=;\n]+=[^=;\n]*)*;?")


def adjust_custom(custom: str | None) -> str | None:
    """Turn semicolon-separated custom parameters into one per line.

    Older tool registrations stored ``x=1;y=2;z=3``; the launch code expects
    ``x=1\\ny=2\\nz=3``.  Anything that is not unambiguously in the old form
    (blank, already multi-line, fewer than two ``=``, or a segment without
    exactly one ``=``) is returned unchanged.
    """
    if custom is None or not custom.strip():
        return custom
    if "\n" in custom or custom.count("=") < 2:
        return custom
    if not _SEMICOLON_CUSTOM.fullmatch(custom):
        return custom
    return custom.replace(";", "\n")


def strip_off_query(url: str | None) -> str | None:
    """Drop the query string from ``url``.

    Plain string surgery: host, port and path are left exactly as given.
    """
    if url is None:
        return None
    pos = url.find("?")
    if pos > 1:
        return url[:pos]
    return url

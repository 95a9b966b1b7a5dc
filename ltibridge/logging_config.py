"""Root logger setup driven by ``Settings.log_format`` and ``Settings.log_level``.

Role mapping records carry ``local_role``, ``lti_roles``, ``source`` and
``tool_id`` through ``extra=``; in JSON mode those become top-level keys.
"""

from __future__ import annotations

import logging
import traceback
from typing import Any

from pythonjsonlogger.json import JsonFormatter

from ltibridge.config import Settings, settings

TEXT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class RoleJsonFormatter(JsonFormatter):
    """One JSON object per line, with tracebacks as a list of lines."""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )

    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        super().add_fields(log_record, record, message_dict)
        if record.exc_info and record.exc_info[1] is not None:
            log_record.pop("exc_info", None)
            log_record["traceback"] = traceback.format_exception(*record.exc_info)


def setup_logging(config: Settings | None = None) -> None:
    """Replace the root handlers with one configured from ``config``."""
    config = config or settings
    level = getattr(logging, config.log_level)

    handler = logging.StreamHandler()
    handler.setLevel(level)
    if config.log_format == "json":
        handler.setFormatter(RoleJsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))

    root = logging.getLogger()
    root.setLevel(level)
    # Drop earlier handlers so repeated setup (tests, CLI) does not double-log.
    root.handlers.clear()
    root.addHandler(handler)

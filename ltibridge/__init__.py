"""ltibridge: role mapping and launch security helpers for LTI integrations."""

__version__ = "0.1.0"

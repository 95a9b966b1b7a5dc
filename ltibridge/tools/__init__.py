from ltibridge.tools.match import ToolRecord, ToolRepository, find_best_match, find_best_tool

__all__ = ["ToolRecord", "ToolRepository", "find_best_match", "find_best_tool"]

"""
cora.utils – Small shared utilities (glob compilation and matching).
"""
from .globs import GlobPattern, compile_pattern, compile_patterns, matches_any

__all__ = ["GlobPattern", "compile_pattern", "compile_patterns", "matches_any"]

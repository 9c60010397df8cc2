"""Exclusion rules for filtering entries out of a folder tree."""

from .base_rules import BaseExclusionRules
from .pattern_rules import (
    PatternExclusionRules,
    anchor_to_root,
    match_at_any_depth,
    read_rules_file,
    should_ignore,
)

__all__ = [
    "BaseExclusionRules",
    "PatternExclusionRules",
    "anchor_to_root",
    "match_at_any_depth",
    "read_rules_file",
    "should_ignore",
]

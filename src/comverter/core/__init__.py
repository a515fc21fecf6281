"""核心模块 - 注释边界匹配与家族注册表"""

from . import families, matcher, validators
from .boundary import (
    CommentBoundary,
    PatternError,
    find_all_matches,
    find_first_match,
    matches_any,
)
from .families import is_single_line_comment
from .family_registry import BoundaryFamily, BoundaryFamilyRegistry, BoundaryMatch
from .validators import FailureHint

__all__ = [
    "families",
    "matcher",
    "validators",
    "CommentBoundary",
    "PatternError",
    "matches_any",
    "find_first_match",
    "find_all_matches",
    "is_single_line_comment",
    "BoundaryFamily",
    "BoundaryMatch",
    "BoundaryFamilyRegistry",
    "FailureHint",
]

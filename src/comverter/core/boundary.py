"""注释边界 - 单行注释定界符匹配器

一个边界（CommentBoundary）只回答一个问题：这一整行是否恰好是某种注释定界符，
例如 /**、*/、//、# 等。只有整行匹配才算匹配，部分匹配不算。
"""

import re
from collections.abc import Iterable

from rusty_results.prelude import Empty, Err, Ok, Option, Result, Some

from .validators import FailureHint, validate_name, validate_pattern


class PatternError(ValueError):
    """构造边界时正则无效（配置错误，启动时即失败）"""

    def __init__(self, hint: FailureHint):
        super().__init__(hint.message)
        self.hint = hint


class CommentBoundary:
    """基于正则的注释定界符：name(标识), pattern(编译后的正则), raw(原始正则)

    - 构造时编译一次，之后不可变
    - 匹配使用 fullmatch，即使正则本身没有写 ^ / $ 也不会匹配子串
    """

    __slots__ = ("_name", "_pattern", "_raw")

    def __init__(self, name: str, pattern: str):
        match validate_name(name, "边界名"):
            case Err(e):
                raise PatternError(e)

        match validate_pattern(pattern):
            case Err(e):
                raise PatternError(e)
            case Ok(compiled):
                pass

        self._name = name
        self._pattern = compiled
        self._raw = pattern

    @property
    def name(self) -> str:
        return self._name

    @property
    def pattern(self) -> re.Pattern:
        return self._pattern

    @property
    def raw(self) -> str:
        return self._raw

    def match(self, line: str) -> bool:
        """判断整行是否匹配该边界"""
        return self._pattern.fullmatch(line) is not None

    def find_match(self, line: str) -> str:
        """匹配时返回整行本身，否则返回空字符串"""
        return line if self.match(line) else ""

    def __repr__(self) -> str:
        return f"CommentBoundary({self._name!r}, {self._raw!r})"

    @classmethod
    def create(cls, name: str, pattern: str) -> Result["CommentBoundary", FailureHint]:
        """创建边界的工厂方法（不抛异常，供处理用户配置的代码使用）"""
        try:
            return Ok(cls(name, pattern))
        except PatternError as e:
            return Err(e.hint)


def matches_any(line: str, boundaries: Iterable[CommentBoundary]) -> bool:
    """任一边界匹配即返回 True"""
    return any(boundary.match(line) for boundary in boundaries)


def find_first_match(
    line: str, boundaries: Iterable[CommentBoundary]
) -> Option[CommentBoundary]:
    """按列表顺序返回第一个匹配的边界（列表顺序即优先级）"""
    for boundary in boundaries:
        if boundary.match(line):
            return Some(boundary)
    return Empty()


def find_all_matches(
    line: str, boundaries: Iterable[CommentBoundary]
) -> list[CommentBoundary]:
    """返回所有匹配的边界，保持列表顺序（用于诊断，不在热路径上）"""
    return [boundary for boundary in boundaries if boundary.match(line)]

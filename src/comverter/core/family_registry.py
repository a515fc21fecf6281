"""边界家族注册表 - 家族目录与跨家族查询（Repository Pattern）"""

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import NamedTuple

from rusty_results.prelude import Empty, Err, Ok, Option, Result, Some

from ..logger import logger
from . import matcher
from .boundary import CommentBoundary, find_first_match, matches_any
from .families import default_families
from .validators import FailureHint, validate_family_patterns, validate_name, validate_order


class BoundaryFamily(NamedTuple):
    name: str
    boundaries: list[CommentBoundary]


class BoundaryMatch(NamedTuple):
    """一次完整分类的结果：哪个家族，家族内哪个边界"""

    family: BoundaryFamily
    boundary: CommentBoundary


class BoundaryFamilyRegistry:
    """边界家族注册表

    - _families 保存 家族名 -> BoundaryFamily
    - _order 是显式的优先级列表，所有"返回唯一匹配家族"的查询都按它遍历，
      不依赖 dict 的存储顺序
    - 新家族追加到末尾；覆盖已有家族时保留其原有位置
    - 不做内部加锁：并发写入（或写入与读取并发）需要调用方自行同步
    """

    def __init__(self, load_defaults: bool = True):
        self._families: dict[str, BoundaryFamily] = {}
        self._order: list[str] = []
        if load_defaults:
            self._load_default_families()

    def _load_default_families(self) -> None:
        for name, boundaries in default_families().items():
            self.register(name, boundaries)

    def _ordered(self) -> Iterator[BoundaryFamily]:
        for name in self._order:
            yield self._families[name]

    def __contains__(self, name: object) -> bool:
        return name in self._families

    def __len__(self) -> int:
        return len(self._order)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._order))

    def family(self, name: str) -> Option[BoundaryFamily]:
        """按名称查找家族"""
        if name not in self._families:
            return Empty()
        return Some(self._families[name])

    def all(self) -> Mapping[str, BoundaryFamily]:
        """所有家族的只读视图（按优先级顺序）"""
        return MappingProxyType({family.name: family for family in self._ordered()})

    def priority(self) -> tuple[str, ...]:
        return tuple(self._order)

    def register(self, name: str, boundaries: list[CommentBoundary]) -> BoundaryFamily:
        """插入或整体替换一个家族（同名直接覆盖，后写者胜出，不做合并）"""
        family = BoundaryFamily(name, boundaries)
        if name in self._families:
            logger.debug(f"覆盖边界家族 {name}（{len(boundaries)} 个边界）")
        else:
            self._order.append(name)
            logger.debug(f"注册边界家族 {name}（{len(boundaries)} 个边界）")
        self._families[name] = family
        return family

    def register_patterns(
        self, name: str, patterns: Mapping[str, str]
    ) -> Result[BoundaryFamily, FailureHint]:
        """根据 {边界名: 正则} 构建并注册家族（用于处理配置输入，失败时不做任何修改）"""
        match validate_name(name, "家族名"):
            case Err(e):
                logger.warning(f"拒绝注册边界家族: {e.message}")
                return Err(e)

        match validate_family_patterns(patterns):
            case Err(e):
                logger.warning(f"拒绝注册边界家族 {name}: {e.message}")
                return Err(e)
            case Ok(compiled):
                pass

        boundaries = [CommentBoundary(b_name, regex.pattern) for b_name, regex in compiled]
        return Ok(self.register(name, boundaries))

    def unregister(self, name: str) -> None:
        """移除家族（不存在时静默忽略）"""
        if name not in self._families:
            return
        del self._families[name]
        self._order.remove(name)
        logger.debug(f"移除边界家族 {name}")

    def reorder(self, names: Iterable[str]) -> Result[tuple[str, ...], FailureHint]:
        """设置显式优先级列表（必须是已注册家族名的一个排列）"""
        match validate_order(names, self._order):
            case Err(e):
                logger.warning(e.message)
                return Err(e)
            case Ok(order):
                pass

        self._order = list(order)
        logger.debug(f"家族优先级: {', '.join(order)}")
        return Ok(order)

    def get_matching_family(self, line: str) -> Option[BoundaryFamily]:
        """按优先级返回第一个匹配该行的家族"""
        for family in self._ordered():
            if matches_any(line, family.boundaries):
                return Some(family)
        return Empty()

    def get_all_matching_families(self, line: str) -> dict[str, list[CommentBoundary]]:
        """返回所有匹配该行的家族（按优先级顺序，用于冲突诊断）"""
        return {
            family.name: family.boundaries
            for family in self._ordered()
            if matches_any(line, family.boundaries)
        }

    def matches_family(self, line: str, name: str) -> bool:
        """指定家族存在且匹配该行"""
        match self.family(name):
            case Some(family):
                return matches_any(line, family.boundaries)
            case _:
                return False

    def find_first_matching_boundary(self, line: str, name: str) -> Option[CommentBoundary]:
        """在指定家族内按顺序返回第一个匹配的边界"""
        match self.family(name):
            case Some(family):
                return find_first_match(line, family.boundaries)
            case _:
                return Empty()

    def classify(self, line: str) -> Option[BoundaryMatch]:
        """返回第一个匹配的家族及其内部第一个匹配的边界"""
        for family in self._ordered():
            match find_first_match(line, family.boundaries):
                case Some(boundary):
                    return Some(BoundaryMatch(family, boundary))
        return Empty()

    def suggest(self, name: str) -> list[str]:
        """给出与未知家族名相似的已注册家族名"""
        return matcher.suggest_names(name, self._order)

"""家族名匹配器 - 负责家族名模糊匹配和排序"""

from collections.abc import Iterable

from thefuzz import fuzz

from ..config import FUZZY_MATCH_THRESHOLD, MAX_SUGGESTIONS


def fuzzy_match(name1: str, name2: str) -> float:
    """计算两个名称的相似度（使用 Levenshtein Distance，忽略大小写）

    Args:
        name1: 第一个名称
        name2: 第二个名称

    Returns:
        相似度分数 (0-1)
    """
    return fuzz.ratio(name1.lower(), name2.lower()) / 100.0


def suggest_names(query: str, candidates: Iterable[str]) -> list[str]:
    """给出与 query 相似的候选名（按相似度从高到低，相同分数保持候选顺序）

    Args:
        query: 用户给出的（可能拼错的）名称
        candidates: 已知名称

    Returns:
        最多 MAX_SUGGESTIONS 个相似度不低于阈值的候选名
    """
    scored = []

    for candidate in candidates:
        score = fuzzy_match(query, candidate)
        if score >= FUZZY_MATCH_THRESHOLD:
            scored.append((candidate, score))

    scored.sort(key=lambda x: x[1], reverse=True)
    return [name for name, _ in scored[:MAX_SUGGESTIONS]]

"""边界验证函数 - 配置数据验证层"""

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from rusty_results.prelude import Err, Ok, Result


@dataclass(frozen=True)
class FailureHint:
    """带建议的错误类型"""

    message: str
    suggestion: str | None = None


def validate_name(name: str, kind: str = "名称") -> Result[str, FailureHint]:
    """验证边界名 / 家族名（非空，不含空白字符）"""
    if not name:
        return Err(FailureHint(f"{kind}不能为空"))
    if any(char.isspace() for char in name):
        return Err(
            FailureHint(
                f"{kind} '{name}' 包含空白字符",
                suggestion="使用驼峰命名，例如 JavadocExactHeader",
            )
        )
    return Ok(name)


def validate_pattern(pattern: str) -> Result[re.Pattern, FailureHint]:
    """验证并编译正则表达式（空模式视为无效，因为它只能匹配空行）"""
    if not pattern:
        return Err(FailureHint("正则表达式不能为空"))

    try:
        compiled = re.compile(pattern)
    except re.error as e:
        return Err(
            FailureHint(
                f"正则表达式 '{pattern}' 无法编译: {e}",
                suggestion="检查括号是否配对、特殊字符是否已转义",
            )
        )

    return Ok(compiled)


def validate_family_patterns(
    patterns: Mapping[str, str],
) -> Result[list[tuple[str, re.Pattern]], FailureHint]:
    """验证一个家族的全部边界定义 {边界名: 正则}（收集所有错误，不 fail fast）

    返回值保持传入顺序，顺序即匹配优先级。
    """
    compiled: list[tuple[str, re.Pattern]] = []
    errors = []

    for name, pattern in patterns.items():
        match validate_name(name, "边界名"):
            case Err(e):
                errors.append(e.message)
                continue

        match validate_pattern(pattern):
            case Err(e):
                errors.append(f"{name}: {e.message}")
            case Ok(regex):
                compiled.append((name, regex))

    if errors:
        return Err(
            FailureHint(
                "边界定义验证失败: " + "; ".join(errors),
                suggestion="修正上述边界后重新注册整个家族",
            )
        )

    return Ok(compiled)


def validate_order(
    names: Iterable[str], registered: Iterable[str]
) -> Result[tuple[str, ...], FailureHint]:
    """验证优先级列表恰好是已注册家族名的一个排列"""
    order = list(names)
    known = set(registered)
    errors = []

    seen: set[str] = set()
    for name in order:
        if name in seen:
            errors.append(f"'{name}' 重复出现")
        seen.add(name)

    unknown = [name for name in order if name not in known]
    if unknown:
        errors.append("未注册的家族: " + ", ".join(unknown))

    missing = sorted(known - seen)
    if missing:
        errors.append("缺少家族: " + ", ".join(missing))

    if errors:
        return Err(
            FailureHint(
                "优先级列表无效: " + "; ".join(errors),
                suggestion="列出每个已注册家族且只列一次",
            )
        )

    return Ok(tuple(order))

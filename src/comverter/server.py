"""MCP 服务器入口 - 以工具形式提供注释边界分类"""

import argparse

from dotenv import load_dotenv
from mcp.server.fastmcp import FastMCP
from rusty_results.prelude import Err, Ok, Some

from .config import SERVER_NAME
from .core.family_registry import BoundaryFamilyRegistry
from .logger import logger

load_dotenv()

mcp = FastMCP(SERVER_NAME)
_registry: BoundaryFamilyRegistry = None  # type: ignore


def _unknown_family_message(registry: BoundaryFamilyRegistry, name: str) -> str:
    message = f"未知的边界家族: {name}"
    suggestions = registry.suggest(name)
    if suggestions:
        message += f"\n你是不是想找: {', '.join(suggestions)}"
    return message


@mcp.tool()
async def classify_line_tool(line: str) -> str:
    """判断一行文本是否为注释定界符，并给出所属家族

    Args:
        line: 已经去掉首尾空白的单行文本
    """
    match _registry.classify(line):
        case Some((family, boundary)):
            return f"家族: {family.name}\n边界: {boundary.name}"
        case _:
            return f"'{line}' 不是已知的注释定界符"


@mcp.tool()
async def list_families_tool() -> str:
    """按优先级列出所有边界家族及其边界"""
    families = _registry.all()
    if not families:
        return "没有已注册的边界家族"

    output = f"共 {len(families)} 个边界家族:\n"
    for idx, family in enumerate(families.values(), start=1):
        output += f"{idx}. {family.name}\n"
        for boundary in family.boundaries:
            output += f"   - {boundary.name}: {boundary.raw}\n"
    return output


@mcp.tool()
async def match_family_tool(line: str, family: str) -> str:
    """判断一行文本是否匹配指定家族

    Args:
        line: 已经去掉首尾空白的单行文本
        family: 家族名，例如 Javadoc、Doxygen
    """
    if family not in _registry:
        return _unknown_family_message(_registry, family)

    match _registry.find_first_matching_boundary(line, family):
        case Some(boundary):
            return f"匹配 {family}（{boundary.name}）"
        case _:
            return f"不匹配 {family}"


@mcp.tool()
async def register_family_tool(name: str, patterns: dict[str, str]) -> str:
    """注册（或整体替换）一个边界家族

    Args:
        name: 家族名
        patterns: {边界名: 整行正则}，按从最具体到最宽泛的顺序排列
    """
    match _registry.register_patterns(name, patterns):
        case Ok(family):
            return f"已注册边界家族 {family.name}（{len(family.boundaries)} 个边界）"
        case Err(e):
            error_msg = f"注册边界家族 {name} 失败: {e.message}"
            if e.suggestion:
                error_msg += f"\n建议: {e.suggestion}"
            return error_msg


def build_registry(
    disabled: list[str] | None = None, order: list[str] | None = None
) -> BoundaryFamilyRegistry:
    """根据启动参数构建注册表实例"""
    registry = BoundaryFamilyRegistry()

    for name in disabled or []:
        if name not in registry:
            logger.warning(f"忽略 --disable {_unknown_family_message(registry, name)}")
        registry.unregister(name)

    if order:
        match registry.reorder(order):
            case Err(e):
                raise SystemExit(f"错误: {e.message}")

    logger.info(f"边界家族优先级: {', '.join(registry.priority())}")
    return registry


def main():
    """MCP 服务器入口函数"""
    parser = argparse.ArgumentParser(description="Comverter MCP Server")
    parser.add_argument(
        "--disable",
        action="append",
        default=[],
        metavar="FAMILY",
        help="启动时移除的边界家族（可重复）",
    )
    parser.add_argument(
        "--order",
        type=lambda value: [name.strip() for name in value.split(",") if name.strip()],
        default=None,
        metavar="NAME,...",
        help="显式的家族优先级（逗号分隔，需列出全部家族）",
    )
    args = parser.parse_args()

    global _registry
    _registry = build_registry(args.disable, args.order)

    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()

"""测试 MCP 工具与注册表构建"""

import pytest

from comverter import server
from comverter.core import families
from comverter.core.family_registry import BoundaryFamilyRegistry


@pytest.fixture
def registry(monkeypatch):
    """为每个测试提供独立的注册表实例"""
    registry = BoundaryFamilyRegistry()
    monkeypatch.setattr(server, "_registry", registry)
    return registry


@pytest.mark.asyncio
async def test_classify_line(registry):
    result = await server.classify_line_tool("/***")
    assert "家族: Javadoc" in result
    assert "边界: JavadocMultipleAsterisk" in result


@pytest.mark.asyncio
async def test_classify_line_no_match(registry):
    result = await server.classify_line_tool("int x = 0;")
    assert "不是已知的注释定界符" in result


@pytest.mark.asyncio
async def test_list_families(registry):
    result = await server.list_families_tool()
    assert result.startswith("共 6 个边界家族")
    assert result.index("1. Javadoc") < result.index("6. Hash")
    assert r"JavadocExactHeader: ^/\*\*$" in result


@pytest.mark.asyncio
async def test_list_families_empty(monkeypatch):
    monkeypatch.setattr(server, "_registry", BoundaryFamilyRegistry(load_defaults=False))
    assert await server.list_families_tool() == "没有已注册的边界家族"


@pytest.mark.asyncio
async def test_match_family(registry):
    assert await server.match_family_tool("*/", "CBlock") == "匹配 CBlock（CBlockCommentFooter）"
    assert await server.match_family_tool("/**", "CBlock") == "不匹配 CBlock"


@pytest.mark.asyncio
async def test_match_family_unknown_suggests(registry):
    result = await server.match_family_tool("/**", "javdoc")
    assert "未知的边界家族: javdoc" in result
    assert "Javadoc" in result


@pytest.mark.asyncio
async def test_register_family(registry):
    result = await server.register_family_tool("Lua", {"LuaDashes": r"^-{2,}$"})
    assert "已注册边界家族 Lua" in result
    assert registry.get_matching_family("---").unwrap().name == "Lua"


@pytest.mark.asyncio
async def test_register_family_invalid(registry):
    result = await server.register_family_tool("Lua", {"LuaDashes": "("})
    assert "注册边界家族 Lua 失败" in result
    assert "建议:" in result
    assert "Lua" not in registry


class TestBuildRegistry:
    """测试启动参数到注册表的转换"""

    def test_defaults(self):
        registry = server.build_registry()
        assert len(registry) == 6

    def test_disable(self):
        registry = server.build_registry(disabled=[families.PYTHON, "Unknown"])
        assert families.PYTHON not in registry
        assert registry.get_matching_family("#").unwrap().name == families.HASH

    def test_order(self):
        order = [
            families.DOXYGEN,
            families.JAVADOC,
            families.CBLOCK,
            families.SINGLE_LINE,
            families.PYTHON,
            families.HASH,
        ]
        registry = server.build_registry(order=order)
        assert registry.get_matching_family("///").unwrap().name == families.DOXYGEN

    def test_invalid_order_exits(self):
        with pytest.raises(SystemExit):
            server.build_registry(order=[families.JAVADOC])


if __name__ == "__main__":
    pytest.main([__file__, "-v"])

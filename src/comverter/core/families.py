"""默认边界家族（编译期内置配置，不从外部文件加载）

一个边界家族是一组相关的注释边界，例如 Javadoc 家族包含 /**、/***、*/、**/ 等。
家族内的边界按从最具体到最宽泛的顺序排列，first-match 查询在第一个匹配处停止。
"""

from .boundary import CommentBoundary, matches_any

# 家族名
JAVADOC = "Javadoc"
CBLOCK = "CBlock"
SINGLE_LINE = "SingleLine"
DOXYGEN = "Doxygen"
PYTHON = "Python"
HASH = "Hash"

# Javadoc
JavadocExactHeader = CommentBoundary("JavadocExactHeader", r"^/\*\*$")
JavadocMultipleAsterisk = CommentBoundary("JavadocMultipleAsterisk", r"^/\*\*\*+$")
JavadocExactFooter = CommentBoundary("JavadocExactFooter", r"^\*/$")
JavadocMultipleFooter = CommentBoundary("JavadocMultipleFooter", r"^\*{2,}/$")

# C 风格块注释
CBlockCommentHeader = CommentBoundary("CBlockCommentHeader", r"^/\*$")
CBlockCommentFooter = CommentBoundary("CBlockCommentFooter", r"^\*/$")

# 正斜杠单行注释
ForwardSlashTwice = CommentBoundary("ForwardSlashTwice", r"^//$")
ForwardSlashMultiple = CommentBoundary("ForwardSlashMultiple", r"^/{3,}$")

# Doxygen
DoxygenQtStyle = CommentBoundary("DoxygenQtStyle", r"^/!\*$")
DoxygenBangStyle = CommentBoundary("DoxygenBangStyle", r"^/\*!$")
DoxygenTripleSlash = CommentBoundary("DoxygenTripleSlash", r"^///$")
DoxygenBangSlash = CommentBoundary("DoxygenBangSlash", r"^//!$")

# Python：整行恰好是 """ 或 '''
PythonTripleQuote = CommentBoundary("PythonTripleQuote", "^(?:\"{3}|'{3})$")
PythonHashComment = CommentBoundary("PythonHashComment", r"^#+$")

# shell / ruby / perl 等
HashComment = CommentBoundary("HashComment", r"^#$")
HashMultiple = CommentBoundary("HashMultiple", r"^#{2,}$")


def default_families() -> dict[str, list[CommentBoundary]]:
    """返回默认家族（按注册顺序，即默认优先级）

    每次调用返回新的列表，注册表之间互不影响。
    """
    return {
        JAVADOC: [
            JavadocExactHeader,
            JavadocMultipleAsterisk,
            JavadocExactFooter,
            JavadocMultipleFooter,
        ],
        CBLOCK: [CBlockCommentHeader, CBlockCommentFooter],
        SINGLE_LINE: [ForwardSlashTwice, ForwardSlashMultiple],
        DOXYGEN: [
            DoxygenQtStyle,
            DoxygenBangStyle,
            DoxygenTripleSlash,
            DoxygenBangSlash,
        ],
        PYTHON: [PythonTripleQuote, PythonHashComment],
        HASH: [HashComment, HashMultiple],
    }


SINGLE_LINE_MARKERS = (
    ForwardSlashTwice,
    ForwardSlashMultiple,
    DoxygenTripleSlash,
    DoxygenBangSlash,
    HashComment,
    HashMultiple,
)


def is_single_line_comment(line: str) -> bool:
    """判断整行是否为任意一种单行注释标记（//、///、//!、#、## 等）"""
    return matches_any(line, SINGLE_LINE_MARKERS)

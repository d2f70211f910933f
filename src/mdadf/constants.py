from enum import Enum

LOGGER_NAME = 'mdadf'
"""Library logger name identifier."""

ADF_DOCUMENT_VERSION = 1
"""The Atlassian Document Format version stamped on every `doc` node."""

MARKDOWN_PARSER_PRESET = 'gfm-like'
"""markdown-it-py preset used to parse Markdown. It enables tables, strikethrough and linkify on top of
CommonMark."""

TABLE_DEFAULT_ATTRIBUTES = {'isNumberColumnEnabled': False, 'layout': 'default'}
"""Attributes attached to every converted table."""


class NodeType(Enum):
    """ADF node types produced by the converter."""

    DOC = 'doc'
    PARAGRAPH = 'paragraph'
    HEADING = 'heading'
    BULLET_LIST = 'bulletList'
    ORDERED_LIST = 'orderedList'
    LIST_ITEM = 'listItem'
    CODE_BLOCK = 'codeBlock'
    BLOCKQUOTE = 'blockquote'
    RULE = 'rule'
    TABLE = 'table'
    TABLE_ROW = 'tableRow'
    TABLE_HEADER = 'tableHeader'
    TABLE_CELL = 'tableCell'
    TEXT = 'text'
    HARD_BREAK = 'hardBreak'
    INLINE_CARD = 'inlineCard'


class MarkType(Enum):
    """ADF marks applied to text nodes."""

    STRONG = 'strong'
    EM = 'em'
    CODE = 'code'
    STRIKE = 'strike'
    LINK = 'link'

import dataclasses
import logging

from markdown_it.tree import SyntaxTreeNode

from mdadf.constants import LOGGER_NAME, MarkType
from mdadf.models import AdfNode, Mark, Marks
from mdadf.parser import is_autolink

logger = logging.getLogger(LOGGER_NAME)

EMPHASIS_MARKS = {
    'em': MarkType.EM,
    'strong': MarkType.STRONG,
    's': MarkType.STRIKE,
}
"""Inline node types that only contribute a mark to the text they wrap."""

TEXT_NODE_TYPES = ('text', 'text_special')


def convert_inline_children(node: SyntaxTreeNode, marks: Marks = ()) -> list[AdfNode]:
    """Convert the inline children of a node to a flat list of ADF leaf nodes.

    Args:
        node: a block node holding inline content (paragraph, heading, table cell) or an inline container.
        marks: the marks active at this point of the tree, outermost first.

    Returns:
        `text`, `hardBreak` and `inlineCard` nodes, with adjacent text nodes sharing the same marks merged.
    """
    content: list[AdfNode] = []
    for child in node.children:
        content.extend(_convert_inline_node(child, marks))
    return merge_text_nodes(content)


def _convert_inline_node(node: SyntaxTreeNode, marks: Marks) -> list[AdfNode]:
    if node.type in TEXT_NODE_TYPES:
        if not node.content:
            return []
        return [AdfNode.text_leaf(node.content, marks)]

    elif node.type == 'softbreak':
        return [AdfNode.text_leaf(' ')]

    elif node.type == 'hardbreak':
        return [AdfNode.hard_break()]

    elif node.type in EMPHASIS_MARKS:
        return convert_inline_children(node, marks + (Mark(EMPHASIS_MARKS[node.type]),))

    elif node.type == 'code_inline':
        if not node.content:
            return []
        return [AdfNode.text_leaf(node.content, marks + (Mark(MarkType.CODE),))]

    elif node.type == 'link':
        href = str(node.attrGet('href') or '')
        if is_autolink(node):
            return [AdfNode.inline_card(href)]
        return convert_inline_children(node, marks + (Mark(MarkType.LINK, href=href),))

    elif node.type == 'image':
        # ADF has no inline images, keep a link to the image instead
        src = str(node.attrGet('src') or '')
        text = _plain_text(node) or src
        if not text:
            return []
        return [AdfNode.text_leaf(text, marks + (Mark(MarkType.LINK, href=src),))]

    elif node.type == 'html_inline':
        return []

    elif node.type == 'inline' or node.children:
        return convert_inline_children(node, marks)

    logger.debug(f'Dropping unsupported inline element: {node.type}')
    return []


def _plain_text(node: SyntaxTreeNode) -> str:
    """Returns the text of an inline subtree without any formatting, e.g. the alt text of an image."""
    parts = []
    for child in node.children:
        if child.type in TEXT_NODE_TYPES or child.type == 'code_inline':
            parts.append(child.content)
        elif child.type == 'softbreak':
            parts.append(' ')
        elif child.children:
            parts.append(_plain_text(child))
    return ''.join(parts)


def merge_text_nodes(nodes: list[AdfNode]) -> list[AdfNode]:
    """Merge consecutive text nodes that carry the same marks.

    The parser can split a single run of text into several tokens, e.g. around the places linkify inspected for a URL.
    Merged nodes are new objects; the nodes given to this function are never modified.

    Args:
        nodes: a flat list of inline ADF nodes.

    Returns:
        A new list where every run of text nodes with equal marks is collapsed into one text node.
    """
    if len(nodes) <= 1:
        return list(nodes)

    merged = [nodes[0]]
    for node in nodes[1:]:
        previous = merged[-1]
        if previous.is_text and node.is_text and previous.marks == node.marks:
            merged[-1] = dataclasses.replace(previous, text=(previous.text or '') + (node.text or ''))
            continue
        merged.append(node)
    return merged

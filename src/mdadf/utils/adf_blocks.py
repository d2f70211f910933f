import logging

from markdown_it.tree import SyntaxTreeNode

from mdadf.constants import LOGGER_NAME, NodeType
from mdadf.models import AdfNode
from mdadf.utils.adf_inline import convert_inline_children
from mdadf.utils.adf_tables import convert_table

logger = logging.getLogger(LOGGER_NAME)

LIST_TYPES = {
    'bullet_list': NodeType.BULLET_LIST,
    'ordered_list': NodeType.ORDERED_LIST,
}


def convert_blocks(node: SyntaxTreeNode) -> list[AdfNode]:
    """Convert the block children of a node to ADF nodes.

    Children that produce nothing, e.g. empty paragraphs or raw HTML, are left out.

    Args:
        node: the document root or a container block (blockquote, list item).

    Returns:
        The converted ADF block nodes, in source order.
    """
    content = []
    for child in node.children:
        if (adf_node := convert_block(child)) is not None:
            content.append(adf_node)
    return content


def convert_block(node: SyntaxTreeNode) -> AdfNode | None:
    """Convert a single markdown block node to an ADF node.

    Args:
        node: a block node of the markdown syntax tree.

    Returns:
        The ADF node, or `None` if the block has nothing to contribute.
    """
    if node.type == 'paragraph':
        paragraph_content = convert_inline_children(node)
        if not paragraph_content:
            return None
        return AdfNode(NodeType.PARAGRAPH, content=paragraph_content)

    elif node.type == 'heading':
        level = int(node.tag[1:])
        return AdfNode(
            NodeType.HEADING, attrs={'level': level}, content=convert_inline_children(node)
        )

    elif node.type in LIST_TYPES:
        return AdfNode(LIST_TYPES[node.type], content=convert_list_items(node))

    elif node.type == 'fence':
        return _code_block(node.content, _fence_language(node.info))

    elif node.type == 'code_block':
        return _code_block(node.content)

    elif node.type == 'blockquote':
        return AdfNode(NodeType.BLOCKQUOTE, content=convert_blocks(node))

    elif node.type == 'hr':
        return AdfNode(NodeType.RULE)

    elif node.type == 'table':
        return convert_table(node)

    elif node.children:
        # only the first converted child of an unknown block is kept
        children = convert_blocks(node)
        if children:
            logger.debug(
                f'Unsupported markdown element {node.type}: keeping {children[0].type.value}, '
                f'dropping {len(children) - 1} other element(s)'
            )
            return children[0]
        return None

    logger.debug(f'Dropping unsupported markdown element: {node.type}')
    return None


def convert_list_items(node: SyntaxTreeNode) -> list[AdfNode]:
    """Convert the items of a bullet or ordered list to ADF list items.

    Each item keeps all of its blocks, nested lists included.

    Args:
        node: a `bullet_list` or `ordered_list` node.

    Returns:
        One `listItem` node per list item.
    """
    return [
        AdfNode(NodeType.LIST_ITEM, content=convert_blocks(child))
        for child in node.children
        if child.type == 'list_item'
    ]


def _fence_language(info: str) -> str | None:
    words = info.split(maxsplit=1)
    return words[0] if words else None


def _code_block(code: str, language: str | None = None) -> AdfNode:
    if code.endswith('\n'):
        code = code[:-1]
    return AdfNode(
        NodeType.CODE_BLOCK,
        attrs={'language': language} if language else None,
        content=[AdfNode.text_leaf(code)] if code else [],
    )

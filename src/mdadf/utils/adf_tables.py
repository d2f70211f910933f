from collections.abc import Iterator

from markdown_it.tree import SyntaxTreeNode

from mdadf.constants import TABLE_DEFAULT_ATTRIBUTES, NodeType
from mdadf.models import AdfNode
from mdadf.utils.adf_inline import convert_inline_children

TABLE_CELL_TYPES = ('th', 'td')


def convert_table(node: SyntaxTreeNode) -> AdfNode:
    """Convert a markdown table node to an ADF table node.

    The first row becomes a row of `tableHeader` cells, every other row a row of `tableCell` cells.

    Args:
        node: a `table` node.

    Returns:
        An ADF `table` node.
    """
    rows = []
    for index, row in enumerate(_table_rows(node)):
        cell_type = NodeType.TABLE_HEADER if index == 0 else NodeType.TABLE_CELL
        cells = [
            _convert_table_cell(cell, cell_type)
            for cell in row.children
            if cell.type in TABLE_CELL_TYPES
        ]
        rows.append(AdfNode(NodeType.TABLE_ROW, content=cells))

    return AdfNode(NodeType.TABLE, attrs=dict(TABLE_DEFAULT_ATTRIBUTES), content=rows)


def _table_rows(node: SyntaxTreeNode) -> Iterator[SyntaxTreeNode]:
    # rows are grouped in `thead` and `tbody` sections
    for child in node.children:
        if child.type == 'tr':
            yield child
            continue
        for row in child.children:
            if row.type == 'tr':
                yield row


def _convert_table_cell(cell: SyntaxTreeNode, cell_type: NodeType) -> AdfNode:
    # every cell holds exactly one paragraph, even an empty one
    paragraph = AdfNode(NodeType.PARAGRAPH, content=convert_inline_children(cell))
    return AdfNode(cell_type, content=[paragraph])

import logging

from markdown_it.tree import SyntaxTreeNode

from mdadf.constants import LOGGER_NAME, NodeType
from mdadf.models import AdfNode
from mdadf.parser import parse_markdown
from mdadf.utils.adf_blocks import convert_blocks

logger = logging.getLogger(LOGGER_NAME)


def convert(markdown: str | None) -> AdfNode:
    """Convert Markdown text to an ADF (Atlassian Document Format) document.

    Uses markdown-it-py with the GitHub Flavored Markdown like preset to parse the text, then maps the syntax tree
    to ADF nodes. The conversion never fails: elements ADF can't represent are degraded or dropped, and text nested
    too deeply to walk is kept as a single plain-text paragraph.

    Args:
        markdown: Markdown or plain text.

    Returns:
        The `doc` node of the ADF document.
    """
    if not markdown or not markdown.strip():
        return AdfNode.document()

    try:
        return convert_document(parse_markdown(markdown))
    except RecursionError:
        logger.debug(
            f'Markdown nested too deeply, keeping {len(markdown)} characters as plain text'
        )
        return AdfNode.document(
            [AdfNode(NodeType.PARAGRAPH, content=[AdfNode.text_leaf(markdown.strip())])]
        )


def convert_document(root: SyntaxTreeNode) -> AdfNode:
    """Convert an already parsed markdown syntax tree to an ADF document.

    Args:
        root: the root node returned by `mdadf.parser.parse_markdown`.

    Returns:
        The `doc` node of the ADF document.
    """
    return AdfNode.document(convert_blocks(root))


def text_to_adf(text: str | None) -> dict:
    """Convert Markdown text to the JSON-shaped ADF dictionary accepted by Jira and Confluence REST APIs.

    Args:
        text: Markdown or plain text.

    Returns:
        ADF document structure.
    """
    return convert(text).as_dict()

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from mdadf.constants import MARKDOWN_PARSER_PRESET


def create_parser() -> MarkdownIt:
    """Creates the Markdown parser used to build the tree handed to the converter.

    The `gfm-like` preset recognizes tables, strikethrough and bare URLs (linkify) in addition to CommonMark.

    Returns:
        A new markdown-it-py parser instance.
    """
    return MarkdownIt(MARKDOWN_PARSER_PRESET)


def parse_markdown(text: str, parser: MarkdownIt | None = None) -> SyntaxTreeNode:
    """Parses Markdown into a markdown-it syntax tree.

    Args:
        text: the Markdown text.
        parser: an optional pre-configured parser, e.g. one with additional plugins enabled.

    Returns:
        The root node of the syntax tree.
    """
    md = parser if parser is not None else create_parser()
    return SyntaxTreeNode(md.parse(text))


def is_autolink(node: SyntaxTreeNode) -> bool:
    """Determines whether a link node is an autolink that should be rendered as a card.

    The parser marks the links it creates itself, `<https://...>` autolinks and bare URLs found by linkify, with
    `info == 'auto'`. E-mail autolinks get a `mailto:` destination from the parser and are kept as regular links.

    Args:
        node: a `link` node.

    Returns:
        `True` if the node is a non e-mail autolink; `False` for explicit `[text](url)` links and e-mail addresses.
    """
    if node.type != 'link' or node.info != 'auto':
        return False
    href = str(node.attrGet('href') or '')
    return not href.lower().startswith('mailto:')

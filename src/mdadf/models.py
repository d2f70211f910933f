from dataclasses import dataclass, field
from typing import Any

from mdadf.constants import ADF_DOCUMENT_VERSION, MarkType, NodeType


@dataclass(frozen=True)
class Mark:
    """An inline formatting mark attached to a text node.

    Marks are immutable so a mark context can be shared between sibling branches of the inline tree.
    """

    type: MarkType
    href: str | None = None
    """The link destination. Only used by `link` marks."""

    def as_dict(self) -> dict:
        data: dict[str, Any] = {'type': self.type.value}
        if self.href is not None:
            data['attrs'] = {'href': self.href}
        return data


Marks = tuple[Mark, ...]
"""An ordered mark context, outermost formatting first."""


@dataclass
class AdfNode:
    """A node of an Atlassian Document Format tree.

    The node `type` decides which of the optional fields are meaningful: containers use `content`, `text` leaves use
    `text` and `marks`, and some types carry `attrs`.
    """

    type: NodeType
    content: list['AdfNode'] | None = None
    attrs: dict[str, Any] | None = None
    text: str | None = None
    marks: Marks = field(default_factory=tuple)

    @classmethod
    def text_leaf(cls, text: str, marks: Marks = ()) -> 'AdfNode':
        return cls(NodeType.TEXT, text=text, marks=marks)

    @classmethod
    def hard_break(cls) -> 'AdfNode':
        return cls(NodeType.HARD_BREAK)

    @classmethod
    def inline_card(cls, url: str) -> 'AdfNode':
        return cls(NodeType.INLINE_CARD, attrs={'url': url})

    @classmethod
    def document(cls, content: list['AdfNode'] | None = None) -> 'AdfNode':
        return cls(NodeType.DOC, content=content if content is not None else [])

    @property
    def is_text(self) -> bool:
        return self.type is NodeType.TEXT

    def as_dict(self) -> dict:
        """Dumps the node, and its descendants, into the JSON-shaped dictionary expected by Atlassian APIs.

        Empty `attrs` and `marks` are omitted; `content` is kept whenever it is a list, even an empty one.
        """

        data: dict[str, Any] = {'type': self.type.value}
        if self.type is NodeType.DOC:
            data['version'] = ADF_DOCUMENT_VERSION
        if self.attrs:
            data['attrs'] = dict(self.attrs)
        if self.content is not None:
            data['content'] = [node.as_dict() for node in self.content]
        if self.text is not None:
            data['text'] = self.text
        if self.marks:
            data['marks'] = [mark.as_dict() for mark in self.marks]
        return data

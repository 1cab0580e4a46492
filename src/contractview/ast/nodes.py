#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/contractview/ast/nodes.py
"""Node classes for contract document representation.

A contract document is a sequence of nodes, each of which is one of exactly
two variants:

- ``TextNode``: a run of literal text with optional marks, a color, and
  optional nested children rendered after the text.
- ``ElementNode``: a typed container (``block``, ``h1``, ``p``, ``clause``,
  ``mention`` ...) with children, or a literal ``text`` fallback when it has
  no children.

Input usually arrives untyped (decoded JSON or YAML). The variant of such a
value is decided purely by which keys it carries: a mapping with a ``text``
key and no ``type`` key is a text node, anything else is an element node.
``classify`` applies that rule once, at the boundary, and builds the typed
tree; every other consumer works with the typed nodes.

Examples
--------
    >>> from contractview.ast.nodes import classify
    >>> node = classify({"type": "p", "children": [{"text": "Hello", "bold": True}]})
    >>> type(node).__name__, type(node.children[0]).__name__
    ('ElementNode', 'TextNode')

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

logger = logging.getLogger(__name__)

# Keys understood on element nodes, mapped to attribute names
_ELEMENT_KEYS: dict[str, str] = {
    "type": "type",
    "text": "text",
    "bold": "bold",
    "italic": "italic",
    "underline": "underline",
    "color": "color",
    "id": "id",
    "value": "value",
    "title": "title",
    "variableType": "variable_type",
}

_TEXT_KEYS: dict[str, str] = {
    "text": "text",
    "bold": "bold",
    "italic": "italic",
    "underline": "underline",
    "color": "color",
}


@dataclass(frozen=True)
class Marks:
    """Boolean emphasis flags attachable to any node.

    Parameters
    ----------
    bold : bool, default = False
    italic : bool, default = False
    underline : bool, default = False

    """

    bold: bool = False
    italic: bool = False
    underline: bool = False

    def __bool__(self) -> bool:
        return self.bold or self.italic or self.underline

    def union(self, other: Marks) -> Marks:
        """Return the marks set on either ``self`` or ``other``."""
        return Marks(
            bold=self.bold or other.bold,
            italic=self.italic or other.italic,
            underline=self.underline or other.underline,
        )

    @classmethod
    def from_source(cls, source: Any) -> Marks:
        """Read marks from a node, a mapping, or any object with mark attributes.

        Missing or falsy values count as unset.
        """
        if isinstance(source, Marks):
            return source
        if source is None:
            return cls()
        if isinstance(source, Mapping):
            return cls(
                bold=bool(source.get("bold")),
                italic=bool(source.get("italic")),
                underline=bool(source.get("underline")),
            )
        return cls(
            bold=bool(getattr(source, "bold", False)),
            italic=bool(getattr(source, "italic", False)),
            underline=bool(getattr(source, "underline", False)),
        )


class Node(ABC):
    """Base class for both node variants.

    Nodes support the visitor pattern; ``accept`` forwards an explicit render
    context so that visitors never need hidden state to know where they are
    in the tree.
    """

    children: Optional[list[Node]]
    bold: bool
    italic: bool
    underline: bool
    color: Optional[str]

    @abstractmethod
    def accept(self, visitor: Any, context: Any = None) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with ``visit_text`` and ``visit_element`` methods
        context : Any, optional
            Context passed through unchanged to the visitor

        Returns
        -------
        Any
            Result from the visitor's processing

        """

    @property
    def marks(self) -> Marks:
        """Marks carried by this node."""
        return Marks(bold=self.bold, italic=self.italic, underline=self.underline)


@dataclass
class TextNode(Node):
    """A run of literal text.

    Parameters
    ----------
    text : str
        Literal text content
    bold, italic, underline : bool, default = False
        Marks applied to the text and to every nested child
    color : str or None, default = None
        CSS-compatible text color
    children : list of Node or None, default = None
        Nodes rendered after the text, inside the same mark wrappers

    """

    text: str
    bold: bool = False
    italic: bool = False
    underline: bool = False
    color: Optional[str] = None
    children: Optional[list[Node]] = None

    def accept(self, visitor: Any, context: Any = None) -> Any:
        """Dispatch to ``visitor.visit_text``."""
        return visitor.visit_text(self, context)


@dataclass
class ElementNode(Node):
    """A typed container node.

    Parameters
    ----------
    type : str or None, default = None
        Element tag. One of the known element types or any other string;
        ``None`` only for malformed input that carried no type at all
    children : list of Node or None, default = None
        Child nodes. When absent, ``text`` is rendered as a literal leaf
    text : str or None, default = None
        Fallback content used only when ``children`` is absent
    bold, italic, underline : bool, default = False
        Marks applied to the whole rendered content
    color : str or None, default = None
        Background color of a mention
    id : str or None, default = None
        Mention identifier; mentions sharing an id are one variable
    value : str or None, default = None
        Literal mention value used to seed the mention store
    title : str or None, default = None
        Optional descriptive title carried by the source document
    variable_type : str or None, default = None
        Optional kind of variable a mention stands for
    extra : dict, default = empty dict
        Keys not understood by this library, kept for serialization

    """

    type: Optional[str] = None
    children: Optional[list[Node]] = None
    text: Optional[str] = None
    bold: bool = False
    italic: bool = False
    underline: bool = False
    color: Optional[str] = None
    id: Optional[str] = None
    value: Optional[str] = None
    title: Optional[str] = None
    variable_type: Optional[str] = None
    extra: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, context: Any = None) -> Any:
        """Dispatch to ``visitor.visit_element``."""
        return visitor.visit_element(self, context)

    @property
    def is_mention(self) -> bool:
        return self.type == "mention"

    @property
    def is_editable_mention(self) -> bool:
        """Whether this is a mention bound to the mention store (it has a non-empty id)."""
        return self.is_mention and bool(self.id)


def is_text_node(node: Any) -> bool:
    """Return True when ``node`` is a text node.

    Typed nodes are checked by class. Mappings are checked by key presence: a
    ``text`` key and no ``type`` key makes a text node, whatever else is present.
    """
    if isinstance(node, Node):
        return isinstance(node, TextNode)
    if isinstance(node, Mapping):
        return "text" in node and "type" not in node
    return False


def classify(node: Any) -> TextNode | ElementNode:
    """Build a typed node from untyped input.

    Never raises for malformed input. A mapping with neither ``text`` nor
    ``type`` becomes an ``ElementNode`` without a type, which the renderer
    handles through its fallback rule. A bare string becomes a ``TextNode``;
    any other value becomes an empty ``ElementNode``.

    Parameters
    ----------
    node : Node, Mapping, or str
        Node to classify. Typed nodes are returned unchanged.

    Returns
    -------
    TextNode or ElementNode

    """
    if isinstance(node, (TextNode, ElementNode)):
        return node
    if isinstance(node, str):
        return TextNode(text=node)
    if not isinstance(node, Mapping):
        logger.debug("Absorbing non-mapping node of type %s as an empty element", type(node).__name__)
        return ElementNode()

    if is_text_node(node):
        return _build_text_node(node)
    return _build_element_node(node)


def classify_all(nodes: Iterable[Any] | None) -> list[TextNode | ElementNode]:
    """Classify every item of a node sequence. ``None`` yields an empty list."""
    if nodes is None:
        return []
    return [classify(node) for node in nodes]


def _coerce_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def _build_children(data: Mapping[str, Any]) -> Optional[list[Node]]:
    raw = data.get("children")
    if raw is None:
        return None
    if isinstance(raw, (list, tuple)):
        return list(classify_all(raw))
    logger.debug("Ignoring non-list children value of type %s", type(raw).__name__)
    return None


def _build_text_node(data: Mapping[str, Any]) -> TextNode:
    return TextNode(
        text=_coerce_str(data.get("text")) or "",
        bold=bool(data.get("bold")),
        italic=bool(data.get("italic")),
        underline=bool(data.get("underline")),
        color=_coerce_str(data.get("color")),
        children=_build_children(data),
    )


def _build_element_node(data: Mapping[str, Any]) -> ElementNode:
    if "type" not in data and "text" not in data:
        logger.debug("Malformed node without 'text' or 'type' keys: %s", list(data))

    extra = {key: value for key, value in data.items() if key not in _ELEMENT_KEYS and key != "children"}
    return ElementNode(
        type=_coerce_str(data.get("type")),
        children=_build_children(data),
        text=_coerce_str(data.get("text")),
        bold=bool(data.get("bold")),
        italic=bool(data.get("italic")),
        underline=bool(data.get("underline")),
        color=_coerce_str(data.get("color")),
        id=_coerce_str(data.get("id")),
        value=_coerce_str(data.get("value")),
        title=_coerce_str(data.get("title")),
        variable_type=_coerce_str(data.get("variableType")),
        extra=extra,
    )


def walk(nodes: Iterable[Node]) -> Iterator[Node]:
    """Yield every node in pre-order, left to right.

    Descends into the children of both variants, since text nodes may carry
    nested children too.
    """
    for node in nodes:
        yield node
        if node.children:
            yield from walk(node.children)

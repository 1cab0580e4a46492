#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/contractview/renderers/elements.py
"""Element dispatch: one rendering rule per element type.

The dispatcher is total. Every known type has a rule, and any other type
(including a missing one) falls through to a generic container tagged with
the literal type, so forward-compatible documents never fail to render.

Children are rendered first, depth-first, with the current element as their
parent type; marks are then applied once to the assembled content.

"""

from __future__ import annotations

import logging
from functools import partial
from typing import Callable

from contractview.ast.nodes import ElementNode, Node, TextNode, walk
from contractview.constants import (
    CLASS_BLOCK,
    CLASS_CLAUSE,
    CLASS_ELEMENT_PREFIX,
    CLASS_ELEMENT_TEXT,
    CLASS_LIST,
    CLASS_LIST_CONTENT,
    CLASS_LIST_ITEM,
    CLASS_MENTION,
    CLASS_MENTION_INPUT,
    CLASS_SUBTITLE,
    CLASS_TEXT,
    CLASS_TEXT_INLINE,
    CLASS_TITLE,
    MENTION_INPUT_MIN_WIDTH,
)
from contractview.options.contract import ContractRendererOptions
from contractview.renderers.context import RenderContext
from contractview.renderers.marks import apply_marks
from contractview.styled import StyledElement, StyledNode

logger = logging.getLogger(__name__)

RenderNode = Callable[[Node, RenderContext], StyledNode]

# Types rendered as a plain container: (tag, class)
_CONTAINERS: dict[str, tuple[str, str]] = {
    "block": ("div", CLASS_BLOCK),
    "h1": ("h1", CLASS_TITLE),
    "h4": ("h4", CLASS_SUBTITLE),
    "ul": ("ul", CLASS_LIST),
    "li": ("li", CLASS_LIST_ITEM),
    "lic": ("div", CLASS_LIST_CONTENT),
}


class ElementDispatcher:
    """Render element nodes according to their type.

    Parameters
    ----------
    render_node : callable
        Renders any child node in a given context; supplied by the tree
        renderer so that text and element children recurse through it
    options : ContractRendererOptions
        Rendering options

    """

    def __init__(self, render_node: RenderNode, options: ContractRendererOptions):
        self._render_node = render_node
        self.options = options
        self._rules: dict[str, Callable[[ElementNode, RenderContext], StyledElement]] = {
            "p": self.render_paragraph,
            "clause": self.render_clause,
            "mention": self.render_mention,
        }

    def render(self, node: ElementNode, context: RenderContext) -> StyledElement:
        """Render ``node`` in ``context``.

        Parameters
        ----------
        node : ElementNode
            Element to render
        context : RenderContext
            Context of the element's position; ``parent_type`` is its parent's type

        Returns
        -------
        StyledElement

        """
        node_type = node.type or ""
        if node_type in _CONTAINERS:
            tag, class_name = _CONTAINERS[node_type]
            return self._container(tag, class_name, node, self.render_content(node, context))

        rule = self._rules.get(node_type)
        if rule is None:
            return self.render_fallback(node, context)
        return rule(node, context)

    def render_content(self, node: ElementNode, context: RenderContext) -> list[StyledNode]:
        """Render the body of an element.

        Children are rendered with this element as their parent. An element
        without children renders its literal ``text`` as a single leaf.
        """
        if node.children is not None:
            child_context = context.for_children(node.type)
            return [self._render_node(child, child_context) for child in node.children]
        if node.text:
            return [StyledElement("span", classes=[CLASS_ELEMENT_TEXT], children=[node.text])]
        return []

    def render_paragraph(self, node: ElementNode, context: RenderContext) -> StyledElement:
        # A paragraph directly inside a paragraph would be invalid markup
        if context.parent_type == "p":
            return self._container("span", CLASS_TEXT_INLINE, node, self.render_content(node, context))
        return self._container("p", CLASS_TEXT, node, self.render_content(node, context))

    def render_clause(self, node: ElementNode, context: RenderContext) -> StyledElement:
        """Render a clause tagged with its own depth; its children are one level deeper."""
        depth = context.clause_depth
        content = self.render_content(node, context.enter_clause())
        element = self._container("section", CLASS_CLAUSE, node, content)
        element.attrs["data-depth"] = str(depth)
        return element

    def render_mention(self, node: ElementNode, context: RenderContext) -> StyledElement:
        """Render a mention.

        A mention with an id is editable: it renders an input showing the
        current store value, or its literal child text when it was never
        seeded, and edits go through the context's mutation hook. Marks do
        not apply to it. Any other mention renders its
        children statically, with marks.
        """
        style: dict[str, str] = {}
        if node.color:
            style["background-color"] = node.color
        style.update(
            {
                "color": self.options.mention_foreground,
                "padding": self.options.mention_padding,
                "border-radius": self.options.mention_border_radius,
                "display": "inline-block",
            }
        )

        if node.id and self.options.editable_mentions:
            value = context.mention_value(node.id, node.value or _literal_text(node))
            return StyledElement(
                "span",
                classes=[CLASS_MENTION],
                style=style,
                children=[self._mention_input(node.id, value, context)],
            )

        if not node.id:
            logger.debug("Mention without id rendered as static content")
        return StyledElement(
            "span",
            classes=[CLASS_MENTION],
            style=style,
            children=apply_marks(self.render_content(node, context), node),
        )

    def render_fallback(self, node: ElementNode, context: RenderContext) -> StyledElement:
        """Render an unknown or missing type as a generic container named after the type."""
        logger.debug("No rendering rule for element type %r, using generic container", node.type)
        class_name = f"{CLASS_ELEMENT_PREFIX}-{node.type}" if node.type else CLASS_ELEMENT_PREFIX
        return self._container("div", class_name, node, self.render_content(node, context))

    def _mention_input(self, mention_id: str, value: str, context: RenderContext) -> StyledElement:
        on_change = partial(context.on_mention_edit, mention_id) if context.on_mention_edit else None
        return StyledElement(
            "input",
            classes=[CLASS_MENTION_INPUT],
            attrs={"value": value, "data-mention-id": mention_id},
            style={
                "background": "transparent",
                "border": "none",
                "color": self.options.mention_foreground,
                "font": "inherit",
                "outline": "none",
                "width": f"{max(len(value), 1)}ch",
                "min-width": MENTION_INPUT_MIN_WIDTH,
                "padding": "0",
                "margin": "0",
            },
            on_change=on_change,
        )

    @staticmethod
    def _container(tag: str, class_name: str, node: ElementNode, content: list[StyledNode]) -> StyledElement:
        return StyledElement(tag, classes=[class_name], children=apply_marks(content, node))


def _literal_text(node: ElementNode) -> str:
    if node.children is None:
        return node.text or ""
    return "".join(child.text for child in walk(node.children) if isinstance(child, TextNode))

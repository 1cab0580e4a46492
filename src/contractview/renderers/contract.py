#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/contractview/renderers/contract.py
"""Contract document rendering.

This module provides the ContractRenderer class, the entry point that turns a
sequence of contract nodes into a styled output tree while keeping every
occurrence of a mention synchronized with the mention store.

A rendering session works like this:

1. ``render_nodes(nodes)`` classifies the input and seeds the mention store,
   but only when ``nodes`` is a different object than last time. Passing the
   same list again keeps runtime edits; passing a new list discards them.
2. The render pass takes one snapshot of the store, so every mention of an
   id shows the same value within a pass.
3. Editable mention inputs carry an ``on_change`` handler bound to
   ``on_mention_edit``. After an edit, the next render pass shows the new
   value at every occurrence of that id.

Examples
--------
    >>> from contractview.renderers.contract import ContractRenderer
    >>> renderer = ContractRenderer()
    >>> doc = [{"type": "p", "children": [
    ...     {"type": "mention", "id": "party", "value": "ACME", "children": [{"text": "ACME"}]},
    ... ]}]
    >>> output = renderer.render_nodes(doc)
    >>> renderer.on_mention_edit("party", "Globex")
    >>> html = renderer.render_to_string(doc)

"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import IO, Any, Optional, Union

from contractview.ast.nodes import ElementNode, Node, TextNode, classify_all
from contractview.ast.visitors import NodeVisitor
from contractview.constants import CLASS_RENDERER
from contractview.mentions import MentionStore
from contractview.options.contract import ContractRendererOptions
from contractview.renderers.base import BaseRenderer
from contractview.renderers.context import RenderContext
from contractview.renderers.elements import ElementDispatcher
from contractview.renderers.html import HtmlSerializer, wrap_in_document
from contractview.renderers.marks import apply_marks
from contractview.styled import StyledElement, StyledNode

logger = logging.getLogger(__name__)


class ContractRenderer(NodeVisitor, BaseRenderer):
    """Render contract nodes to a styled output tree.

    Parameters
    ----------
    options : ContractRendererOptions or None, default = None
        Rendering options
    store : MentionStore or None, default = None
        Mention store owned by this renderer. A fresh one is created when omitted.

    """

    def __init__(self, options: ContractRendererOptions | None = None, store: MentionStore | None = None):
        BaseRenderer._validate_options_type(options, ContractRendererOptions, "contract")
        options = options or ContractRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: ContractRendererOptions = options
        self.store = store if store is not None else MentionStore(log_duplicates=options.log_duplicate_mentions)
        self.elements = ElementDispatcher(self._render_node, options)
        self._source: Optional[Sequence[Any]] = None
        self._nodes: list[TextNode | ElementNode] = []

    @property
    def nodes(self) -> list[TextNode | ElementNode]:
        """Typed nodes of the current document."""
        return self._nodes

    def load(self, nodes: Sequence[Any]) -> bool:
        """Make ``nodes`` the current document.

        The store is re-seeded only when ``nodes`` is not the object loaded
        last time.

        Returns
        -------
        bool
            True when the store was re-seeded

        """
        if nodes is self._source:
            return False

        if self._source is not None:
            logger.debug("Input tree replaced, re-seeding mention store and discarding edits")
        self._source = nodes
        self._nodes = classify_all(nodes)
        self.store.seed(self._nodes)
        return True

    def reset(self) -> None:
        """Forget the current document and every mention value."""
        self._source = None
        self._nodes = []
        self.store.seed([])

    def on_mention_edit(self, mention_id: str, value: str) -> None:
        """Mutation hook for edits of an editable mention.

        Writes ``value`` for ``mention_id``; every occurrence of the id shows
        it on the next render pass.
        """
        self.store.update(mention_id, value)

    def render_nodes(self, nodes: Optional[Sequence[Any]] = None) -> list[StyledNode]:
        """Render a node sequence to styled output.

        Parameters
        ----------
        nodes : sequence of Node or Mapping, optional
            Top-level nodes. When omitted, the current document is rendered
            again (for instance after an edit).

        Returns
        -------
        list of StyledNode
            One output node per top-level input node

        """
        if nodes is not None:
            self.load(nodes)

        context = RenderContext(
            clause_depth=0,
            parent_type=None,
            mention_values=self.store.snapshot(),
            on_mention_edit=self.on_mention_edit,
        )
        return [self._render_node(node, context) for node in self._nodes]

    def render_to_string(self, nodes: Optional[Sequence[Any]] = None) -> str:
        """Render a node sequence to HTML text.

        The output is wrapped in a ``contract-renderer`` container, and in a
        complete page when ``options.standalone`` is set.
        """
        serializer = HtmlSerializer(escape=self.options.escape_html)
        root = StyledElement("div", classes=[CLASS_RENDERER], children=self.render_nodes(nodes))
        content = serializer.serialize_element(root)

        if self.options.standalone:
            return wrap_in_document(
                content, self.options.title, self.options.language, escape=self.options.escape_html
            )
        return content

    def render(self, nodes: Sequence[Any], output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render ``nodes`` to HTML and write it to ``output``."""
        self.write_text_output(self.render_to_string(nodes), output)

    def _render_node(self, node: Node, context: RenderContext) -> StyledNode:
        return node.accept(self, context)

    def visit_text(self, node: TextNode, context: Optional[RenderContext] = None) -> StyledNode:
        """Render a text node.

        The literal text is followed by any nested children, wrapped in a span
        carrying the non-semantic style; marks are applied around that span.
        """
        context = context or RenderContext()
        content: list[StyledNode] = [node.text] if node.text else []
        if node.children:
            content.extend(self.visit_children(node, context.for_children(None)))

        style: dict[str, str] = {}
        if node.color:
            style["color"] = node.color
        if "\n" in node.text:
            style["white-space"] = "pre-wrap"

        return apply_marks([StyledElement("span", style=style, children=content)], node)[0]

    def visit_element(self, node: ElementNode, context: Optional[RenderContext] = None) -> StyledNode:
        """Render an element node through the element dispatcher."""
        return self.elements.render(node, context or RenderContext())

#  Copyright (c) 2025 Tom Villani, Ph.D.
"""contractview - render structured contract documents with live mentions.

A contract document is a tree of text and element nodes (headings,
paragraphs, lists, nested clauses) containing mentions: inline variables
identified by an id. contractview renders such a tree into a styled output
tree, or HTML, and keeps every occurrence of a mention synchronized when one
of them is edited.

Examples
--------
Render to HTML:

    >>> from contractview import render_html
    >>> render_html([{"type": "h1", "children": [{"text": "Service Agreement"}]}])
    '<div class="contract-renderer"><h1 class="contract-title"><span>Service Agreement</span></h1></div>'

Edit a mention and re-render:

    >>> from contractview import ContractRenderer
    >>> renderer = ContractRenderer()
    >>> doc = [{"type": "mention", "id": "party", "value": "ACME", "children": []}]
    >>> output = renderer.render_nodes(doc)
    >>> renderer.on_mention_edit("party", "Globex")
    >>> output = renderer.render_nodes()

"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Optional

from contractview.ast import (
    ElementNode,
    Marks,
    Node,
    TextNode,
    classify,
    is_text_node,
    load_nodes,
    nodes_from_json,
    nodes_from_yaml,
)
from contractview.exceptions import (
    ContractViewError,
    InvalidOptionsError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from contractview.mentions import MentionStore, extract_mentions
from contractview.options import ContractRendererOptions
from contractview.renderers import ContractRenderer, ElementDispatcher, RenderContext, apply_marks
from contractview.styled import StyledElement, StyledNode, find_all, text_content

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())


def render_contract(
    nodes: Sequence[Any], options: Optional[ContractRendererOptions] = None
) -> list[StyledNode]:
    """Render a contract document to a styled output tree.

    Parameters
    ----------
    nodes : sequence of Node or Mapping
        Top-level nodes
    options : ContractRendererOptions, optional
        Rendering options

    Returns
    -------
    list of StyledNode

    """
    return ContractRenderer(options).render_nodes(nodes)


def render_html(nodes: Sequence[Any], options: Optional[ContractRendererOptions] = None) -> str:
    """Render a contract document to HTML text."""
    return ContractRenderer(options).render_to_string(nodes)


__all__ = [
    "ContractRenderer",
    "ContractRendererOptions",
    "ContractViewError",
    "ElementDispatcher",
    "ElementNode",
    "InvalidOptionsError",
    "Marks",
    "MentionStore",
    "Node",
    "ParsingError",
    "RenderContext",
    "RenderingError",
    "StyledElement",
    "StyledNode",
    "TextNode",
    "ValidationError",
    "apply_marks",
    "classify",
    "extract_mentions",
    "find_all",
    "is_text_node",
    "load_nodes",
    "nodes_from_json",
    "nodes_from_yaml",
    "render_contract",
    "render_html",
    "text_content",
]

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/contractview/ast/__init__.py
"""Node model for contract documents.

- nodes: the two node variants, marks, and the ``classify`` discriminator
- visitors: visitor base class for traversal with an explicit context
- serialization: JSON / YAML loading and dumping

Examples
--------
    >>> from contractview.ast import classify, is_text_node
    >>> is_text_node({"text": "a", "children": []})
    True
    >>> is_text_node({"type": "p", "text": "a"})
    False

"""

from __future__ import annotations

from contractview.ast.nodes import (
    ElementNode,
    Marks,
    Node,
    TextNode,
    classify,
    classify_all,
    is_text_node,
    walk,
)
from contractview.ast.serialization import (
    dict_to_nodes,
    load_nodes,
    node_to_dict,
    nodes_from_json,
    nodes_from_yaml,
    nodes_to_json,
)
from contractview.ast.visitors import NodeVisitor

__all__ = [
    "ElementNode",
    "Marks",
    "Node",
    "NodeVisitor",
    "TextNode",
    "classify",
    "classify_all",
    "dict_to_nodes",
    "is_text_node",
    "load_nodes",
    "node_to_dict",
    "nodes_from_json",
    "nodes_from_yaml",
    "nodes_to_json",
    "walk",
]

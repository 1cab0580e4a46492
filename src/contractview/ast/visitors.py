#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/contractview/ast/visitors.py
"""Visitor pattern implementation for contract node traversal.

Nodes come in two variants, so a visitor has two methods. Both receive the
node and an explicit context value; visitors that track position in the tree
(the renderer's clause depth and parent type) pass a derived context down
when they recurse instead of keeping it on ``self``.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from contractview.ast.nodes import ElementNode, Node, TextNode


class NodeVisitor(ABC):
    """Abstract base class for node visitors.

    Examples
    --------
    Count the mentions of a document:

        >>> class MentionCounter(NodeVisitor):
        ...     def __init__(self):
        ...         self.count = 0
        ...
        ...     def visit_text(self, node, context=None):
        ...         self.visit_children(node, context)
        ...
        ...     def visit_element(self, node, context=None):
        ...         if node.type == "mention":
        ...             self.count += 1
        ...         self.visit_children(node, context)

    """

    @abstractmethod
    def visit_text(self, node: TextNode, context: Any = None) -> Any:
        """Visit a TextNode.

        Parameters
        ----------
        node : TextNode
            The text node to visit
        context : Any, optional
            Context supplied by the caller

        Returns
        -------
        Any
            Result of processing this node

        """

    @abstractmethod
    def visit_element(self, node: ElementNode, context: Any = None) -> Any:
        """Visit an ElementNode.

        Parameters
        ----------
        node : ElementNode
            The element node to visit
        context : Any, optional
            Context supplied by the caller

        Returns
        -------
        Any
            Result of processing this node

        """

    def visit_children(self, node: Node, context: Any = None) -> list[Any]:
        """Visit each child of ``node`` with the same context and collect the results."""
        return [child.accept(self, context) for child in node.children or ()]

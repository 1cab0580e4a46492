#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/contractview/renderers/__init__.py
"""Renderers for contract documents.

- ContractRenderer: render nodes to a styled output tree, or to HTML text
- ElementDispatcher: the per-type rendering rules used by ContractRenderer
- HtmlSerializer: serialize a styled output tree to HTML
- apply_marks: wrap rendered content in bold/italic/underline elements

Examples
--------
    >>> from contractview.renderers import ContractRenderer
    >>> ContractRenderer().render_to_string([{"text": "Hello"}])
    '<div class="contract-renderer"><span>Hello</span></div>'

"""

from contractview.renderers.base import BaseRenderer
from contractview.renderers.context import RenderContext
from contractview.renderers.contract import ContractRenderer
from contractview.renderers.elements import ElementDispatcher
from contractview.renderers.html import HtmlSerializer, wrap_in_document
from contractview.renderers.marks import apply_marks

__all__ = [
    "BaseRenderer",
    "ContractRenderer",
    "ElementDispatcher",
    "HtmlSerializer",
    "RenderContext",
    "apply_marks",
    "wrap_in_document",
]

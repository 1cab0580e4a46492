#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/contractview/renderers/html.py
"""HTML serialization of the styled output tree.

Turns the ``StyledElement`` tree produced by the contract renderer into HTML
text, either as a fragment or as a minimal standalone page. No stylesheet is
emitted; pages are expected to supply their own rules for the class names.

"""

from __future__ import annotations

from collections.abc import Iterable

from contractview.constants import VOID_ELEMENTS
from contractview.styled import StyledElement, StyledNode
from contractview.utils.html_utils import escape_html


def format_style(style: dict[str, str]) -> str:
    """Format inline CSS properties as ``"prop: value; prop: value"``."""
    return "; ".join(f"{prop}: {value}" for prop, value in style.items())


class HtmlSerializer:
    """Serialize styled output to HTML.

    Parameters
    ----------
    escape : bool, default = True
        Escape text and attribute values

    Examples
    --------
        >>> HtmlSerializer().serialize([StyledElement("p", classes=["contract-text"], children=["a < b"])])
        '<p class="contract-text">a &lt; b</p>'

    """

    def __init__(self, escape: bool = True):
        self.escape = escape

    def serialize(self, nodes: Iterable[StyledNode]) -> str:
        return "".join(self.serialize_node(node) for node in nodes)

    def serialize_node(self, node: StyledNode) -> str:
        if isinstance(node, str):
            return escape_html(node, enabled=self.escape)
        return self.serialize_element(node)

    def serialize_element(self, element: StyledElement) -> str:
        attributes: list[tuple[str, str]] = []
        if element.classes:
            attributes.append(("class", " ".join(element.classes)))
        attributes.extend(element.attrs.items())
        if element.style:
            attributes.append(("style", format_style(element.style)))

        rendered_attrs = "".join(
            f' {name}="{escape_html(value, enabled=self.escape, quote=True)}"' for name, value in attributes
        )
        if element.tag in VOID_ELEMENTS:
            return f"<{element.tag}{rendered_attrs}>"
        return f"<{element.tag}{rendered_attrs}>{self.serialize(element.children)}</{element.tag}>"


def wrap_in_document(content: str, title: str, language: str, escape: bool = True) -> str:
    """Wrap an HTML fragment in a complete page.

    Parameters
    ----------
    content : str
        Serialized fragment
    title : str
        Page title
    language : str
        Value of the ``lang`` attribute
    escape : bool, default = True
        Escape the title and language

    """
    parts = [
        "<!DOCTYPE html>",
        f'<html lang="{escape_html(language, enabled=escape, quote=True)}">',
        "<head>",
        '<meta charset="UTF-8">',
        '<meta name="viewport" content="width=device-width, initial-scale=1.0">',
        f"<title>{escape_html(title, enabled=escape)}</title>",
        "</head>",
        "<body>",
        content,
        "</body>",
        "</html>",
    ]
    return "\n".join(parts) + "\n"

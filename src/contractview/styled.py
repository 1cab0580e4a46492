#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/contractview/styled.py
"""Styled output tree produced by the contract renderer.

The renderer does not produce markup directly. It produces a small tree of
``StyledElement`` objects and plain string leaves that a presentation layer
(the HTML serializer in ``contractview.renderers.html``, or a host UI
toolkit) maps onto its own widgets.

Examples
--------
    >>> from contractview.styled import StyledElement, text_content
    >>> bold = StyledElement("strong", children=["world"])
    >>> para = StyledElement("p", classes=["contract-text"], children=["Hello ", bold])
    >>> text_content(para)
    'Hello world'

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Callable, Optional, Union


@dataclass
class StyledElement:
    """One element of the output tree.

    Parameters
    ----------
    tag : str
        Element tag name (``div``, ``p``, ``strong``, ``input`` ...)
    classes : list of str, default = empty list
        Class names, in order
    attrs : dict, default = empty dict
        Other attributes (``data-depth``, ``value`` ...)
    style : dict, default = empty dict
        Inline CSS properties, in insertion order
    children : list of StyledNode, default = empty list
        Nested elements and text leaves
    on_change : callable or None, default = None
        Edit handler of an editable mention input. Calling it with a new value
        writes that value to the mention store.

    """

    tag: str
    classes: list[str] = field(default_factory=list)
    attrs: dict[str, str] = field(default_factory=dict)
    style: dict[str, str] = field(default_factory=dict)
    children: list[StyledNode] = field(default_factory=list)
    on_change: Optional[Callable[[str], None]] = field(default=None, compare=False, repr=False)

    def has_class(self, class_name: str) -> bool:
        return class_name in self.classes

    @property
    def first_child(self) -> Optional[StyledNode]:
        return self.children[0] if self.children else None


StyledNode = Union[str, StyledElement]


def iter_elements(nodes: Union[StyledNode, Iterable[StyledNode]]) -> Iterator[StyledElement]:
    """Yield every ``StyledElement`` in pre-order."""
    if isinstance(nodes, (str, StyledElement)):
        nodes = [nodes]
    for node in nodes:
        if isinstance(node, StyledElement):
            yield node
            yield from iter_elements(node.children)


def find_all(
    nodes: Union[StyledNode, Iterable[StyledNode]],
    tag: Optional[str] = None,
    class_name: Optional[str] = None,
) -> list[StyledElement]:
    """Return all elements matching ``tag`` and/or ``class_name``, in document order."""
    return [
        element
        for element in iter_elements(nodes)
        if (tag is None or element.tag == tag) and (class_name is None or class_name in element.classes)
    ]


def text_content(nodes: Union[StyledNode, Iterable[StyledNode]]) -> str:
    """Concatenate the visible text of an output tree.

    Input elements contribute their current ``value``.
    """
    if isinstance(nodes, str):
        return nodes
    if isinstance(nodes, StyledElement):
        if nodes.tag == "input":
            return nodes.attrs.get("value", "")
        return text_content(nodes.children)
    return "".join(text_content(node) for node in nodes)

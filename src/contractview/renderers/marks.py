#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/contractview/renderers/marks.py
"""Mark composition.

Marks are applied as semantic wrappers around already-rendered content, in a
fixed order: bold innermost, then italic, then underline outermost::

    <u><em><strong>content</strong></em></u>
"""

from __future__ import annotations

from typing import Any

from contractview.ast.nodes import Marks
from contractview.constants import MARK_TAGS
from contractview.styled import StyledElement, StyledNode


_MARK_BY_TAG: dict[str, str] = {tag: mark for mark, tag in MARK_TAGS}


def _is_mark_wrapper(node: StyledNode) -> bool:
    return (
        isinstance(node, StyledElement)
        and node.tag in _MARK_BY_TAG
        and not node.classes
        and not node.attrs
        and not node.style
    )


def _unwrap_marks(content: list[StyledNode]) -> tuple[list[StyledNode], Marks]:
    """Strip the mark wrappers enclosing ``content`` as a whole and return the marks they carried."""
    found = Marks()
    while len(content) == 1 and _is_mark_wrapper(content[0]):
        wrapper = content[0]
        found = found.union(Marks(**{_MARK_BY_TAG[wrapper.tag]: True}))
        content = wrapper.children
    return content, found


def apply_marks(content: list[StyledNode], marks: Any) -> list[StyledNode]:
    """Wrap ``content`` in one element per set mark.

    Content that is already wrapped in marks as a whole is re-wrapped with
    the union of its marks and ``marks``, so repeated calls nest exactly as
    a single call with every mark would.

    Parameters
    ----------
    content : list of StyledNode
        Already-rendered content, treated as one unit
    marks : Marks, Mapping, or node
        Anything ``Marks.from_source`` understands

    Returns
    -------
    list of StyledNode
        ``content`` itself when no mark is set, otherwise a one-element list
        holding the outermost wrapper

    Examples
    --------
        >>> wrapped = apply_marks(["x"], {"bold": True, "underline": True})
        >>> wrapped[0].tag, wrapped[0].children[0].tag
        ('u', 'strong')
        >>> rewrapped = apply_marks(apply_marks(["x"], {"underline": True}), {"bold": True})
        >>> rewrapped == wrapped
        True

    """
    resolved = Marks.from_source(marks)
    if not resolved:
        return content

    inner, existing = _unwrap_marks(content)
    resolved = existing.union(resolved)

    wrapped = inner
    for mark, tag in MARK_TAGS:
        if getattr(resolved, mark):
            wrapped = [StyledElement(tag, children=list(wrapped))]
    return wrapped

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/contractview/renderers/context.py
"""Render context threaded through every recursive render call.

The context carries what a node needs to know about its position in the
tree: the type of its immediate parent, how many clauses enclose it, and the
mention values of the current render pass. It is immutable; entering a child
or a deeper clause derives a new context, so sibling subtrees never observe
each other's depth.

"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Callable, Optional

MentionEditHandler = Callable[[str, str], None]

_EMPTY_VALUES: Mapping[str, str] = MappingProxyType({})


@dataclass(frozen=True)
class RenderContext:
    """Ambient state of one position in the tree during a render pass.

    Parameters
    ----------
    clause_depth : int, default = 0
        Number of ``clause`` ancestors
    parent_type : str or None, default = None
        Type of the immediate parent element, None at the root and below text nodes
    mention_values : Mapping, default = empty mapping
        Snapshot of the mention store taken once for the whole render pass
    on_mention_edit : callable or None, default = None
        Mutation hook bound to editable mention inputs

    """

    clause_depth: int = 0
    parent_type: Optional[str] = None
    mention_values: Mapping[str, str] = field(default_factory=lambda: _EMPTY_VALUES, compare=False)
    on_mention_edit: Optional[MentionEditHandler] = field(default=None, compare=False)

    def for_children(self, parent_type: Optional[str]) -> RenderContext:
        """Context for the children of a node of type ``parent_type``."""
        if parent_type == self.parent_type:
            return self
        return replace(self, parent_type=parent_type)

    def enter_clause(self) -> RenderContext:
        """Context one clause deeper, used for the children of a clause."""
        return replace(self, clause_depth=self.clause_depth + 1)

    def mention_value(self, mention_id: str, fallback: Optional[str]) -> str:
        """Current value of ``mention_id``, or ``fallback`` when the store has no entry."""
        if mention_id in self.mention_values:
            return self.mention_values[mention_id]
        return fallback or ""

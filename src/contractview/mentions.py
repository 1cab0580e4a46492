#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/contractview/mentions.py
"""Mention value store.

A mention is an element node of type ``mention``. Mentions that share an
``id`` are the same variable: every occurrence must display the same value,
and an edit to any one of them must show up in all of them.

The store is seeded from the tree with a first-wins policy: the value of the
first mention met in a pre-order, left-to-right traversal is kept and later
duplicates are ignored. Runtime edits through ``update`` always overwrite.

The map is copy-on-write. ``update`` replaces the internal dict instead of
mutating it, so a snapshot taken by a render pass is never partially updated.

"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any, Callable, Optional

from contractview.ast.nodes import ElementNode, Node, classify_all, walk
from contractview.exceptions import ValidationError

logger = logging.getLogger(__name__)

MentionListener = Callable[[str, str], None]


def extract_mentions(nodes: Iterable[Any], log_duplicates: bool = True) -> dict[str, str]:
    """Collect the initial value of every mention id in the tree.

    Only mentions carrying both a non-empty ``id`` and a non-empty ``value``
    are recorded. When an id occurs more than once, the first occurrence wins.

    Parameters
    ----------
    nodes : iterable of Node or Mapping
        Top-level nodes of the document. Untyped mappings are classified first.
    log_duplicates : bool, default = True
        Log at debug level when a later duplicate carries a different value

    Returns
    -------
    dict
        Mapping of mention id to value

    Examples
    --------
        >>> extract_mentions([
        ...     {"type": "mention", "id": "a", "value": "first", "children": []},
        ...     {"type": "mention", "id": "a", "value": "second", "children": []},
        ... ])
        {'a': 'first'}

    """
    mentions: dict[str, str] = {}
    typed: list[Node] = list(classify_all(nodes))
    for node in walk(typed):
        if not isinstance(node, ElementNode) or not node.is_mention:
            continue
        if not node.id or not node.value:
            logger.debug("Skipping mention without id or value (id=%r)", node.id)
            continue
        if node.id not in mentions:
            mentions[node.id] = node.value
        elif log_duplicates and mentions[node.id] != node.value:
            logger.debug(
                "Duplicate mention id %r with value %r ignored, keeping %r", node.id, node.value, mentions[node.id]
            )
    return mentions


class MentionStore:
    """Mutable id to value map shared by every mention of one rendering session.

    Parameters
    ----------
    nodes : iterable of Node or Mapping, optional
        Document to seed the store from. An unseeded store is empty.
    log_duplicates : bool, default = True
        Forwarded to ``extract_mentions`` on every seed

    Examples
    --------
        >>> store = MentionStore([{"type": "mention", "id": "party", "value": "ACME", "children": []}])
        >>> store.update("party", "Globex")
        >>> store.read()["party"]
        'Globex'

    """

    def __init__(self, nodes: Optional[Iterable[Any]] = None, log_duplicates: bool = True):
        self._lock = threading.Lock()
        self._values: dict[str, str] = {}
        self._listeners: list[MentionListener] = []
        self.log_duplicates = log_duplicates
        if nodes is not None:
            self.seed(nodes)

    def seed(self, nodes: Iterable[Any]) -> dict[str, str]:
        """Discard every value, including runtime edits, and seed from ``nodes``.

        Returns
        -------
        dict
            A copy of the seeded values

        """
        seeded = extract_mentions(nodes, log_duplicates=self.log_duplicates)
        with self._lock:
            self._values = seeded
        logger.debug("Seeded mention store with %d id(s)", len(seeded))
        return dict(seeded)

    def update(self, mention_id: str, value: str) -> None:
        """Set the value of ``mention_id`` and notify every listener.

        Raises
        ------
        ValidationError
            If ``mention_id`` is empty

        """
        if not mention_id:
            raise ValidationError("Mention id must be a non-empty string", "mention_id", mention_id)

        with self._lock:
            values = dict(self._values)
            values[mention_id] = value
            self._values = values
            listeners = list(self._listeners)

        logger.debug("Mention %r updated to %r", mention_id, value)
        for listener in listeners:
            listener(mention_id, value)

    def read(self) -> Mapping[str, str]:
        """Return a read-only snapshot of the current values.

        Later updates never show through an existing snapshot.
        """
        return MappingProxyType(self._values)

    snapshot = read

    def get(self, mention_id: str, default: Optional[str] = None) -> Optional[str]:
        return self._values.get(mention_id, default)

    def subscribe(self, listener: MentionListener) -> Callable[[], None]:
        """Register ``listener(id, value)`` to be called after every update.

        Returns
        -------
        callable
            Calling it removes the listener again

        """
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def __contains__(self, mention_id: object) -> bool:
        return mention_id in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({dict(self._values)!r})"

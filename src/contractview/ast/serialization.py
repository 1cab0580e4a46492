#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/contractview/ast/serialization.py
"""Conversion between contract nodes and their JSON / YAML form.

The interchange form is the plain mapping shape the nodes are discriminated
from: a text node never carries a ``type`` key and an element node always
does. Optional keys that are unset are omitted.

Examples
--------
Load a document and write it back:

    >>> from contractview.ast.serialization import nodes_from_json, nodes_to_json
    >>> nodes = nodes_from_json('[{"type": "p", "children": [{"text": "Hi"}]}]')
    >>> nodes_to_json(nodes)
    '[{"type": "p", "children": [{"text": "Hi"}]}]'

"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any, Union

import yaml

from contractview.ast.nodes import ElementNode, Node, TextNode, classify_all
from contractview.constants import MARK_NAMES
from contractview.exceptions import ParsingError

logger = logging.getLogger(__name__)

YAML_EXTENSIONS = (".yaml", ".yml")


def node_to_dict(node: Node) -> dict[str, Any]:
    """Convert a node to its mapping form.

    Parameters
    ----------
    node : Node
        Text or element node

    Returns
    -------
    dict
        JSON-ready mapping

    """
    result: dict[str, Any]
    if isinstance(node, TextNode):
        result = {"text": node.text}
    elif isinstance(node, ElementNode):
        # Malformed input without a type is written back with an empty tag so
        # that it keeps classifying as an element.
        result = {"type": node.type if node.type is not None else ""}
        for key, attr in (("id", "id"), ("value", "value"), ("title", "title"), ("variableType", "variable_type")):
            value = getattr(node, attr)
            if value is not None:
                result[key] = value
        if node.text is not None:
            result["text"] = node.text
    else:
        raise TypeError(f"Cannot serialize object of type {type(node).__name__}")

    for mark in MARK_NAMES:
        if getattr(node, mark):
            result[mark] = True
    if node.color is not None:
        result["color"] = node.color
    if isinstance(node, ElementNode):
        result.update(node.extra)
    if node.children is not None:
        result["children"] = [node_to_dict(child) for child in node.children]
    return result


def nodes_to_json(nodes: Iterable[Node], indent: int | None = None) -> str:
    """Serialize a node sequence to a JSON array."""
    return json.dumps([node_to_dict(node) for node in nodes], indent=indent, ensure_ascii=False)


def _extract_node_list(data: Any, source: str | None) -> list[Any]:
    if isinstance(data, list):
        return data
    if isinstance(data, Mapping) and isinstance(data.get("children"), list) and "type" not in data:
        # Document wrapper: {"title": ..., "children": [...]}
        return data["children"]
    raise ParsingError(
        f"Expected a list of nodes or a document with a 'children' list, got {type(data).__name__}",
        source=source,
    )


def dict_to_nodes(data: Any, source: str | None = None) -> list[TextNode | ElementNode]:
    """Classify already-decoded data into typed nodes.

    Parameters
    ----------
    data : list or Mapping
        A list of node mappings, or a document wrapper with a ``children`` list
    source : str, optional
        Name of the input, used in error messages

    Raises
    ------
    ParsingError
        If the top-level value has the wrong shape

    """
    return classify_all(_extract_node_list(data, source))


def nodes_from_json(text: str | bytes, source: str | None = None) -> list[TextNode | ElementNode]:
    """Decode a JSON document into typed nodes.

    Raises
    ------
    ParsingError
        If the text is not valid JSON or has the wrong shape

    """
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ParsingError(f"Invalid JSON input: {e}", source=source, original_error=e) from e
    return dict_to_nodes(data, source=source)


def nodes_from_yaml(text: str | bytes, source: str | None = None) -> list[TextNode | ElementNode]:
    """Decode a YAML document into typed nodes.

    Raises
    ------
    ParsingError
        If the text is not valid YAML or has the wrong shape

    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ParsingError(f"Invalid YAML input: {e}", source=source, original_error=e) from e
    if data is None:
        return []
    return dict_to_nodes(data, source=source)


def load_nodes(path: Union[str, Path]) -> list[TextNode | ElementNode]:
    """Load a contract document from a ``.json``, ``.yaml`` or ``.yml`` file.

    Parameters
    ----------
    path : str or Path
        File to read. Files with any other extension are read as JSON.

    Raises
    ------
    ParsingError
        If the file cannot be read or decoded

    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ParsingError(f"Could not read input file: {e}", source=str(path), original_error=e) from e
    except UnicodeDecodeError as e:
        raise ParsingError(f"Input file is not valid UTF-8: {e}", source=str(path), original_error=e) from e

    logger.debug("Loading contract nodes from %s", path)
    if path.suffix.lower() in YAML_EXTENSIONS:
        return nodes_from_yaml(text, source=str(path))
    return nodes_from_json(text, source=str(path))

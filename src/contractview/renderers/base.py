#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/contractview/renderers/base.py
"""Base class for contract renderers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path
from typing import IO, Any, Union

from contractview.exceptions import InvalidOptionsError, RenderingError
from contractview.options.base import BaseRendererOptions
from contractview.utils.io_utils import write_content


class BaseRenderer(ABC):
    """Abstract base class for renderers of contract node sequences.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Renderer-specific options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        self.options = options

    @abstractmethod
    def render(self, nodes: Sequence[Any], output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render ``nodes`` and write the result to ``output``.

        Parameters
        ----------
        nodes : sequence of Node or Mapping
            Top-level document nodes
        output : str, Path, or file-like object
            Output destination

        Raises
        ------
        RenderingError
            If the output cannot be written

        """

    def render_to_string(self, nodes: Sequence[Any]) -> str:
        """Render ``nodes`` to a string, for renderers with text output."""
        raise NotImplementedError(f"{self.__class__.__name__} does not support rendering to a string.")

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Raise ``InvalidOptionsError`` unless ``options`` is None or an ``expected_type``."""
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                renderer_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def write_text_output(text: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Write ``text`` to a path or a text/binary stream.

        Raises
        ------
        RenderingError
            If writing fails

        """
        try:
            write_content(text, output)
        except (OSError, TypeError) as e:
            target = str(output) if isinstance(output, (str, Path)) else None
            raise RenderingError(f"Could not write rendered output: {e}", output_path=target, original_error=e) from e

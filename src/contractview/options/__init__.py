#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for contractview renderers."""

from contractview.options.base import BaseRendererOptions, CloneFrozenMixin
from contractview.options.contract import ContractRendererOptions

__all__ = ["BaseRendererOptions", "CloneFrozenMixin", "ContractRendererOptions"]

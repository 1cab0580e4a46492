"""Options for the contract renderer."""

from __future__ import annotations

from dataclasses import dataclass, field

from contractview.constants import (
    DEFAULT_LANGUAGE,
    DEFAULT_MENTION_BORDER_RADIUS,
    DEFAULT_MENTION_FOREGROUND,
    DEFAULT_MENTION_PADDING,
    DEFAULT_TITLE,
)
from contractview.options.base import BaseRendererOptions


@dataclass(frozen=True)
class ContractRendererOptions(BaseRendererOptions):
    """Configuration options for rendering contract documents.

    Parameters
    ----------
    editable_mentions : bool, default=True
        Render mentions that carry an id as inputs bound to the mention store.
        When False, every mention renders its children as static content.
    mention_foreground : str, default="white"
        Text color used on top of a mention's background color.
    mention_padding : str, default="2px 6px"
        CSS padding of a mention.
    mention_border_radius : str, default="4px"
        CSS border radius of a mention.
    log_duplicate_mentions : bool, default=True
        Log when a duplicate mention id carries a value that seeding ignores.
    standalone : bool, default=False
        Wrap serialized HTML in a complete page.
    title : str, default="Contract"
        Page title used in standalone mode.
    language : str, default="en"
        Page language used in standalone mode.

    """

    editable_mentions: bool = field(
        default=True,
        metadata={"help": "Render mentions with an id as inputs bound to the mention store", "importance": "core"},
    )
    mention_foreground: str = field(
        default=DEFAULT_MENTION_FOREGROUND,
        metadata={"help": "Text color drawn on top of a mention's background", "importance": "advanced"},
    )
    mention_padding: str = field(
        default=DEFAULT_MENTION_PADDING,
        metadata={"help": "CSS padding of mentions", "importance": "advanced"},
    )
    mention_border_radius: str = field(
        default=DEFAULT_MENTION_BORDER_RADIUS,
        metadata={"help": "CSS border radius of mentions", "importance": "advanced"},
    )
    log_duplicate_mentions: bool = field(
        default=True,
        metadata={"help": "Log duplicate mention ids whose values are ignored at seeding", "importance": "advanced"},
    )
    standalone: bool = field(
        default=False,
        metadata={"help": "Generate a complete HTML page instead of a fragment", "importance": "core"},
    )
    title: str = field(
        default=DEFAULT_TITLE,
        metadata={"help": "Page title in standalone mode", "importance": "core"},
    )
    language: str = field(
        default=DEFAULT_LANGUAGE,
        metadata={"help": "Page language in standalone mode", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If ``language`` is empty.

        """
        if not self.language:
            raise ValueError("language must be a non-empty string")

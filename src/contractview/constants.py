#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the contractview library.

Constants are organized by category:
1. Marks - Mark names and their wrapper tags
2. Class Names - CSS class names attached to rendered elements
3. Mention Styling - Presentational defaults for mentions
4. Configuration - Config file discovery
"""

from __future__ import annotations

# =============================================================================
# Marks
# =============================================================================

MARK_NAMES: tuple[str, ...] = ("bold", "italic", "underline")

# Wrapper tag per mark, in application order (innermost first)
MARK_TAGS: tuple[tuple[str, str], ...] = (
    ("bold", "strong"),
    ("italic", "em"),
    ("underline", "u"),
)

# =============================================================================
# Class Names
# =============================================================================

CLASS_RENDERER = "contract-renderer"
CLASS_BLOCK = "contract-block"
CLASS_TITLE = "contract-title"
CLASS_SUBTITLE = "contract-subtitle"
CLASS_TEXT = "contract-text"
CLASS_TEXT_INLINE = "contract-text-inline"
CLASS_LIST = "contract-list"
CLASS_LIST_ITEM = "contract-list-item"
CLASS_LIST_CONTENT = "contract-list-content"
CLASS_CLAUSE = "contract-clause"
CLASS_MENTION = "contract-mention"
CLASS_MENTION_INPUT = "contract-mention-input"
CLASS_ELEMENT_PREFIX = "contract-element"
CLASS_ELEMENT_TEXT = "element-text"

# =============================================================================
# Mention Styling
# =============================================================================

DEFAULT_MENTION_FOREGROUND = "white"
DEFAULT_MENTION_PADDING = "2px 6px"
DEFAULT_MENTION_BORDER_RADIUS = "4px"
MENTION_INPUT_MIN_WIDTH = "20px"

# =============================================================================
# Rendering Defaults
# =============================================================================

DEFAULT_TITLE = "Contract"
DEFAULT_LANGUAGE = "en"

VOID_ELEMENTS: frozenset[str] = frozenset({"input", "br", "hr", "img", "meta", "link"})

# =============================================================================
# Configuration
# =============================================================================

CONFIG_ENV_VAR = "CONTRACTVIEW_CONFIG"
CONFIG_FILENAMES: tuple[str, ...] = (
    ".contractview.toml",
    ".contractview.yaml",
    ".contractview.yml",
    ".contractview.json",
)
PYPROJECT_SECTION = "contractview"

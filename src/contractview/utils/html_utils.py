"""HTML-related utility helpers."""

from __future__ import annotations

from html import escape as _html_escape


def escape_html(text: str, *, enabled: bool = True, quote: bool = False) -> str:
    """Escape HTML special characters when enabled.

    ``quote`` also escapes quote characters, for attribute values.
    """
    if not enabled:
        return text
    return _html_escape(text, quote=quote)

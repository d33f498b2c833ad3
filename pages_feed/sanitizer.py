"""
Sanitizer — Turns HTML-bearing page content into text safe for XML embedding.

Two independent steps, always applied in this order and each exactly once:

  strip_markup()    Remove tags, decode the six entities page bodies commonly
                    carry, collapse whitespace.
  escape_for_xml()  Escape the five XML reserved characters.

Tag removal is a plain `<...>` pattern with no HTML parsing: a `>` inside a
quoted attribute value ends the tag early.
"""

import re
from typing import Optional

_TAG_PATTERN = re.compile(r"<[^>]*>")
_WHITESPACE_PATTERN = re.compile(r"\s+")

_ENTITIES = {
    "&nbsp;": " ",
    "&amp;": "&",
    "&lt;": "<",
    "&gt;": ">",
    "&quot;": '"',
    "&#39;": "'",
}
_ENTITY_PATTERN = re.compile("|".join(re.escape(entity) for entity in _ENTITIES))

# Ampersand must come first so later replacements are not escaped again
_XML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
)


def strip_markup(html: Optional[str]) -> str:
    """Reduce an HTML fragment to a single line of plain text.

    Each tag becomes a space, the six known entities are decoded in a single
    pass (so "&amp;lt;" becomes "&lt;", not "<"), whitespace runs collapse to
    one space, and the result is trimmed. Numeric entities other than &#39;
    are left as-is.
    """
    if not html:
        return ""
    text = _TAG_PATTERN.sub(" ", html)
    text = _ENTITY_PATTERN.sub(lambda match: _ENTITIES[match.group(0)], text)
    return _WHITESPACE_PATTERN.sub(" ", text).strip()


def escape_for_xml(text: Optional[str]) -> str:
    if not text:
        return ""
    for char, entity in _XML_ESCAPES:
        text = text.replace(char, entity)
    return text


def clean_description(html: Optional[str]) -> str:
    """strip_markup() then escape_for_xml(), for <description> content."""
    return escape_for_xml(strip_markup(html))

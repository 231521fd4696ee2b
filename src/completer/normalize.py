from __future__ import annotations
import re

from .config import KEY_QUALIFIERS, PLACEHOLDER_MARKERS, RESERVED_UNDERSCORES

# whole-word qualifier plus the whitespace around it
_QUALIFIER_RE = re.compile(r"\s*\b(?:%s)\b\s*" % "|".join(KEY_QUALIFIERS))


def strip_reserved_underscores(text: str) -> str:
    """
    Remove every "__" from text.

    Standard-library declarations use compiler-reserved parameter names such
    as "__pos"; they are shown as "pos". This is plain substring removal, so
    any identifier containing "__" loses it too.
    """
    return text.replace(RESERVED_UNDERSCORES, "")


def strip_placeholder_markers(text: str) -> str:
    """Remove all four placeholder marker characters."""
    for marker in PLACEHOLDER_MARKERS:
        text = text.replace(marker, "")
    return text


def strip_qualifiers(text: str) -> str:
    """Drop const/volatile words (and their surrounding whitespace): "const Foo&" -> "Foo&"."""
    return _QUALIFIER_RE.sub("", text)

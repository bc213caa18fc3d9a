"""Locating a key's textual span inside a YAML block."""
import re
from typing import Optional

from ..models import KeySpan

# A value continues over lines that are blank or start with a space, a
# list marker or a comment; any other character at column 0 ends it.
KEY_VALUE_PATTERN = r"(^|\n){key}[^\S\n]*:(?:[^\S\n]*?\n(?=[\n\- #]))?([\s\S]*?(?:\n(?![\n\- #])|\Z))"

class KeySpanMatcher:
    """Finds and splices the span covering ``key:`` through its value."""

    @staticmethod
    def pattern(key: str) -> re.Pattern:
        """Compile the span pattern for ``key``, matched literally."""
        return re.compile(KEY_VALUE_PATTERN.format(key=re.escape(key)))

    @staticmethod
    def find(key: str, text: str) -> Optional[KeySpan]:
        """Find the first top-level occurrence of ``key`` in ``text``.

        Args:
            key: Key name, matched literally.
            text: YAML block to search.

        Returns:
            Optional[KeySpan]: The located span, or None if the key is absent.
        """
        match = KeySpanMatcher.pattern(key).search(text)
        if match is None:
            return None
        return KeySpan(
            start=match.start(),
            end=match.end(),
            prefix=match.group(1),
            value=match.group(2),
        )

    @staticmethod
    def replace(span: KeySpan, text: str, replacement: str = "") -> str:
        """Replace a span with new text, keeping its prefix newline.

        An empty replacement deletes the key and its value.
        """
        return text[:span.start] + span.prefix + replacement + text[span.end:]

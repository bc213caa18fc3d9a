"""Format-preserving update of keys in a single YAML document."""
import logging
import re
from typing import Any, Dict, Mapping, Optional, Union

from ..codec.formatter import YamlFormatter
from ..codec.parser import YamlParser
from ..errors import MatchError, UnsupportedTypeError
from ..models import KeySpan, ValueKind
from ..options import UpdateOptions
from ..text.indent import IndentationRemapper
from ..text.span import KeySpanMatcher
from ..values import classify, deep_equal, find_key

logger = logging.getLogger(__name__)

TRAILING_NEWLINES = re.compile(r"\n+\Z")
BLANK_LINE_TAIL = re.compile(r"\n(\n*)\Z")

class KeyUpdater:
    """Inserts, updates or deletes keys while keeping surrounding text intact.

    Empty lines and trailing whitespace may disappear when adjacent lines
    are edited, and comments parsed as part of a deleted value are deleted
    with it. Everything outside the edited key's span is left untouched.
    """

    def __init__(self, options: Optional[Union[UpdateOptions, Dict[str, Any]]] = None):
        """Initialize the updater.

        Args:
            options: Formatting options, see UpdateOptions.
        """
        self.options = UpdateOptions.coerce(options)

    def update_document(self, updates: Mapping[str, Any], text: str) -> str:
        """Apply every update in order to one YAML document.

        Later keys operate on the text produced by earlier ones.
        """
        for key, value in updates.items():
            text = self.update_key(key, value, text)
        return text

    def update_key(self, key: str, value: Any, text: str) -> str:
        """Update, insert or delete the value of ``key`` in ``text``.

        Args:
            key: The key whose value should be replaced.
            value: The value to set, or None to remove the key.
            text: YAML document to update.

        Returns:
            str: The updated YAML document. If the key already holds an equal
                value, ``text`` is returned unchanged.

        Raises:
            ParseError: If ``text`` is not valid YAML.
            MatchError: If the key or its indentation cannot be located.
            UnsupportedTypeError: If the value or the document cannot be updated.
            SerializeError: If the value cannot be rendered as YAML.
        """
        updated = text if text.endswith("\n") else text + "\n"
        current = YamlParser.load(updated)
        kind = classify(value)

        if current is None:
            if kind is ValueKind.DELETE:
                return text
            logger.debug("Inserting %s into empty document", key)
            return ("" if updated == "\n" else updated) + self._format(key, value)

        if not isinstance(current, dict):
            raise UnsupportedTypeError(
                f"cannot update key {key} in YAML document of type {type(current).__name__}"
            )

        found, existing = find_key(current, key)
        if kind is ValueKind.DELETE:
            if not found:
                return text
            logger.debug("Deleting %s", key)
            return KeySpanMatcher.replace(self._locate(key, updated), updated)

        if kind is ValueKind.UNSUPPORTED:
            raise UnsupportedTypeError(
                f"cannot update YAML with value ({value!r}) of type {type(value).__name__}"
            )

        if not found:
            logger.debug("Appending %s", key)
            return self._insert(key, value, updated)

        if deep_equal(existing, value):
            logger.debug("%s is unchanged", key)
            return text

        existing_kind = classify(existing)
        span = self._locate(key, updated)
        if kind is ValueKind.SIMPLE or existing_kind in (ValueKind.SIMPLE, ValueKind.DELETE):
            logger.debug("Replacing %s", key)
            return KeySpanMatcher.replace(span, updated, self._format_in_place(key, value))
        if existing_kind is ValueKind.STRUCTURED:
            logger.debug("Merging %d nested key(s) into %s", len(value), key)
            return self._merge(key, value, span, updated)
        raise UnsupportedTypeError(
            f"cannot update current YAML key {key} of type {type(existing).__name__}"
        )

    def _format(self, key: str, value: Any) -> str:
        return YamlFormatter.format_key(key, value, self.options.keep_array_indent)

    def _format_in_place(self, key: str, value: Any) -> str:
        # keep a key PyYAML would quote (8080, on) spelled as in the document
        text = self._format(key, value)
        rendered = YamlFormatter.format(key).rstrip("\n")
        if rendered != key and text.startswith(rendered + ":"):
            return key + text[len(rendered):]
        return text

    def _locate(self, key: str, text: str) -> KeySpan:
        span = KeySpanMatcher.find(key, text)
        if span is None:
            raise MatchError(f"failed to match key {key} in current YAML: {text}", key, text)
        return span

    def _insert(self, key: str, value: Any, text: str) -> str:
        # blank lines at the end of the document stay after the new key
        tail = BLANK_LINE_TAIL.search(text)
        blank_lines = tail.group(1) if tail else ""
        return TRAILING_NEWLINES.sub("\n", text) + self._format(key, value) + blank_lines

    def _merge(self, key: str, updates: Mapping[str, Any], span: KeySpan, text: str) -> str:
        block = IndentationRemapper.remap(
            key, span.value, lambda nested: self.update_document(updates, nested)
        )
        return KeySpanMatcher.replace(span, text, f"{key}:\n{block}")

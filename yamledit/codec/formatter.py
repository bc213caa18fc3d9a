"""Canonical YAML rendering of keys and values."""
import re
from collections.abc import Mapping
from typing import Any

import yaml

from ..errors import SerializeError

INDENTED_SEQUENCE_ITEM = re.compile(r"^( *)  - ", re.MULTILINE)
DOCUMENT_END = "\n...\n"

class _IndentedSequenceDumper(yaml.SafeDumper):
    """Safe dumper that indents block sequences under their parent key."""

    def increase_indent(self, flow=False, indentless=False):
        return super().increase_indent(flow, False)

def _plain(value: Any) -> Any:
    """Convert mappings and tuples to the containers SafeDumper represents."""
    if isinstance(value, Mapping):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value

def align_sequences(text: str, keep_array_indent: bool = False) -> str:
    """Remove the extra indent before list markers unless asked to keep it.

    Args:
        text: YAML rendered with indented sequences.
        keep_array_indent: Retain two spaces before each ``-`` if True.

    Returns:
        str: YAML with list markers aligned to the parent key's column.
    """
    if keep_array_indent:
        return text
    return INDENTED_SEQUENCE_ITEM.sub(r"\1- ", text)

class YamlFormatter:
    """Renders keys and values through PyYAML."""

    @staticmethod
    def _dump(value: Any) -> str:
        return yaml.dump(
            _plain(value),
            Dumper=_IndentedSequenceDumper,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )

    @staticmethod
    def format_key(key: str, value: Any, keep_array_indent: bool = False) -> str:
        """Format a single key and value as a newline-terminated YAML string.

        Args:
            key: Key to serialize.
            value: Value to serialize.
            keep_array_indent: Retain the two-space indent before list markers.

        Returns:
            str: YAML text such as ``"artist: Arcade Fire\\n"``.

        Raises:
            SerializeError: If the value cannot be represented in YAML.
        """
        try:
            text = YamlFormatter._dump({key: value})
        except yaml.YAMLError as e:
            raise SerializeError(f"failed to create YAML for {{{key}: {value!r}}}: {e}") from e
        return align_sequences(text, keep_array_indent)

    @staticmethod
    def format(value: Any, keep_array_indent: bool = False) -> str:
        """Format any value as a newline-terminated YAML string.

        Raises:
            SerializeError: If the value cannot be represented in YAML.
        """
        try:
            text = YamlFormatter._dump(value)
        except yaml.YAMLError as e:
            raise SerializeError(f"failed to create YAML for '{value!r}': {e}") from e
        # top-level scalars carry an explicit document end marker
        if text.endswith(DOCUMENT_END):
            text = text[:-len(DOCUMENT_END) + 1]
        return align_sequences(text, keep_array_indent)

"""YAML and JSON decoding for the updaters."""
import json
import logging
import re
from typing import Any, Dict

import yaml

from ..errors import DecodeError, ParseError

logger = logging.getLogger(__name__)

BOOL_TAG = "tag:yaml.org,2002:bool"

class CoreBoolLoader(yaml.SafeLoader):
    """Safe loader resolving only true/false as booleans.

    ``on``, ``off``, ``yes`` and ``no`` stay strings, so keys such as a CI
    workflow's ``on:`` are found under their textual name.
    """

CoreBoolLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != BOOL_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
CoreBoolLoader.add_implicit_resolver(
    BOOL_TAG,
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)

class YamlParser:
    """Parser for YAML text used as an oracle by the updaters."""

    @staticmethod
    def load(text: str) -> Any:
        """Parse a single YAML document.

        Args:
            text: YAML text of one document.

        Returns:
            Any: The parsed value, or None for an empty document.

        Raises:
            ParseError: If the YAML is malformed.
        """
        try:
            return yaml.load(text, Loader=CoreBoolLoader)
        except yaml.YAMLError as e:
            raise ParseError(f"failed to parse YAML '{text}': {e}", text) from e

class UpdateDecoder:
    """Decoder for JSON-encoded update sets."""

    @staticmethod
    def decode(updates_json: str) -> Dict[str, Any]:
        """Decode a JSON object into an update set.

        Key order of the JSON object is preserved.

        Raises:
            DecodeError: If the string is not valid JSON or not a JSON object.
        """
        try:
            updates = json.loads(updates_json)
        except ValueError as e:
            raise DecodeError(f"failed to parse update JSON '{updates_json}': {e}") from e
        if not isinstance(updates, dict):
            raise DecodeError(f"update JSON '{updates_json}' is not an object")
        logger.debug("Decoded %d update(s)", len(updates))
        return updates

"""Errors raised while updating YAML text."""
from typing import Optional


class YamlEditError(Exception):
    """Base class for all YAML update errors."""


class DecodeError(YamlEditError, ValueError):
    """An encoded update set could not be decoded."""


class ParseError(YamlEditError):
    """YAML text could not be parsed.

    Attributes:
        text: The YAML fragment that failed to parse.
    """

    def __init__(self, message: str, text: str):
        super().__init__(message)
        self.text = text


class MatchError(YamlEditError):
    """A key the parser knows about could not be located in the text.

    Attributes:
        key: The key being updated.
        text: The YAML text that was searched.
    """

    def __init__(self, message: str, key: str, text: Optional[str] = None):
        super().__init__(message)
        self.key = key
        self.text = text


class UnsupportedTypeError(YamlEditError, TypeError):
    """A desired or current value cannot be reconciled."""


class SerializeError(YamlEditError):
    """A value could not be rendered as YAML."""

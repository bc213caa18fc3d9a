"""Data models shared by the matcher, remapper and updaters."""
from dataclasses import dataclass
from enum import Enum

class ValueKind(Enum):
    """How an update treats a value."""
    SIMPLE = "simple"
    STRUCTURED = "structured"
    DELETE = "delete"
    UNSUPPORTED = "unsupported"

@dataclass(frozen=True)
class KeySpan:
    """Located region of a key and its value inside YAML text.

    ``prefix`` is the newline preceding the key line, or the empty string
    when the key starts the text. ``value`` runs from after the colon
    through the terminating newline of the last continuation line.
    """
    start: int
    end: int
    prefix: str
    value: str

@dataclass(frozen=True)
class LineAnnotation:
    """Original line of a nested block and whether it carried the indent unit."""
    content: str
    indented: bool

@dataclass(frozen=True)
class Document:
    """One document of a YAML stream and the separator line before it."""
    body: str
    separator: str = ""

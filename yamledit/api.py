"""Public functions for updating YAML text in place."""
from typing import Any, Dict, Mapping, Optional, Union

from .codec.formatter import YamlFormatter
from .codec.parser import UpdateDecoder
from .options import UpdateOptions
from .updater.documents import DocumentSetUpdater
from .updater.key import KeyUpdater

Options = Optional[Union[UpdateOptions, Dict[str, Any]]]

def update_key(key: str, value: Any, text: str, options: Options = None) -> str:
    """Update, insert or delete one key of a single YAML document.

    Set ``value`` to None to remove the key.
    """
    return KeyUpdater(options).update_key(key, value, text)

def update_document(updates: Mapping[str, Any], text: str, options: Options = None) -> str:
    """Update, insert or delete the keys of ``updates`` in a single YAML document."""
    return KeyUpdater(options).update_document(updates, text)

def update_documents(updates: Mapping[str, Any], text: str, options: Options = None) -> str:
    """Update, insert or delete keys in YAML text holding one or more documents.

    Keys are updated in the first document they exist in and added to the
    first document otherwise, unless ``update_all`` is set, in which case
    every document receives every update.
    """
    return DocumentSetUpdater(options).update(updates, text)

def update_document_from_json(updates_json: str, text: str, options: Options = None) -> str:
    """Decode a JSON object of updates and apply it to a single YAML document.

    Raises:
        DecodeError: If ``updates_json`` is not a JSON object.
    """
    return update_document(UpdateDecoder.decode(updates_json), text, options)

def format_key(key: str, value: Any, options: Options = None) -> str:
    """Format a key and value as YAML."""
    return YamlFormatter.format_key(key, value, UpdateOptions.coerce(options).keep_array_indent)

def format_yaml(value: Any, options: Options = None) -> str:
    """Format a value as YAML."""
    return YamlFormatter.format(value, UpdateOptions.coerce(options).keep_array_indent)

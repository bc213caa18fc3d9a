"""Updates across the documents of a multi-document YAML stream."""
import logging
import re
from typing import Any, Dict, List, Mapping, Optional, Union

from ..codec.parser import YamlParser
from ..models import Document
from ..options import UpdateOptions
from ..values import find_key
from .key import KeyUpdater

logger = logging.getLogger(__name__)

SEPARATOR = re.compile(r"^(---(?:[ \t]+.*)?\n)", re.MULTILINE)
NON_WHITESPACE = re.compile(r"\S")

class DocumentSetUpdater:
    """Applies update sets to YAML text that may hold several documents.

    By default each key is updated in the first document that contains it
    and added to the first non-empty document when no document does. With
    ``update_all`` every key is applied to every document.
    """

    def __init__(self, options: Optional[Union[UpdateOptions, Dict[str, Any]]] = None):
        self.options = UpdateOptions.coerce(options)
        self.key_updater = KeyUpdater(self.options)

    @staticmethod
    def split(text: str) -> List[Document]:
        """Split a YAML stream into documents, keeping separator lines."""
        parts = SEPARATOR.split(text)
        documents = [Document(parts[0])]
        for i in range(1, len(parts), 2):
            documents.append(Document(parts[i + 1], parts[i]))
        return documents

    @staticmethod
    def join(documents: List[Document]) -> str:
        return "".join(d.separator + d.body for d in documents)

    @staticmethod
    def insertion_index(documents: List[Document]) -> int:
        """Index of the document new keys are added to.

        A leading separator leaves an empty first body, which is skipped.
        """
        if NON_WHITESPACE.search(documents[0].body) or len(documents) == 1:
            return 0
        return 1

    def update(self, updates: Mapping[str, Any], text: str) -> str:
        """Apply every update to the stream.

        Args:
            updates: Keys and their desired values, applied in order.
            text: YAML stream to update.

        Returns:
            str: The updated stream with separators preserved.

        Raises:
            ParseError: If any document is not valid YAML.
        """
        documents = self.split(text)
        default = self.insertion_index(documents)

        for key, value in updates.items():
            if self.options.update_all:
                targets = [
                    i for i, d in enumerate(documents)
                    if YamlParser.load(d.body) is not None
                ] or [default]
            else:
                targets = [self._find(key, documents, default)]
            for i in targets:
                logger.debug("Updating %s in document %d", key, i)
                doc = documents[i]
                documents[i] = Document(self.key_updater.update_key(key, value, doc.body), doc.separator)

        return self.join(documents)

    @staticmethod
    def _find(key: str, documents: List[Document], default: int) -> int:
        for i, doc in enumerate(documents):
            current = YamlParser.load(doc.body)
            if isinstance(current, dict) and find_key(current, key)[0]:
                return i
        return default

"""Re-deriving indentation for nested mapping blocks."""
import logging
import re
from typing import Callable, List, Tuple

from ..errors import MatchError
from ..models import LineAnnotation

logger = logging.getLogger(__name__)

# first properly indented line: spaces followed by real content
INDENT_UNIT = re.compile(r"^( +)[^\-# ]", re.MULTILINE)

class IndentationRemapper:
    """Strips a nested block's indentation, transforms it and reapplies it.

    Lines of the transformed block are matched back to the original lines by
    stripped content so comments and blank lines keep the indentation they
    had, even when they were not indented under the key.
    """

    @staticmethod
    def indent_unit(key: str, block: str) -> str:
        """Discover the leading whitespace used by ``block``.

        Raises:
            MatchError: If no line in the block is indented content.
        """
        match = INDENT_UNIT.search(block)
        if match is None:
            raise MatchError(f"failed to match indentation for elements of key {key}: {block}", key, block)
        return match.group(1)

    @staticmethod
    def annotate(block: str, unit: str) -> List[LineAnnotation]:
        """Record each line of ``block`` and whether it starts with ``unit``."""
        return [LineAnnotation(line, line.startswith(unit)) for line in block.split("\n")]

    @staticmethod
    def undent(annotations: List[LineAnnotation], unit: str) -> str:
        """Join annotated lines with ``unit`` stripped from the indented ones."""
        return "\n".join(
            a.content[len(unit):] if a.indented else a.content
            for a in annotations
        )

    @staticmethod
    def reindent(text: str, annotations: List[LineAnnotation], unit: str) -> str:
        """Indent the lines of ``text`` as their original counterparts were.

        Original lines are consumed in order; a line with no counterpart is
        indented unless it is blank.
        """
        lines = []
        cursor = 0
        for line in text.split("\n"):
            indented, cursor = IndentationRemapper._match(line, annotations, cursor)
            lines.append(unit + line if indented else line)
        return "\n".join(lines)

    @staticmethod
    def _match(line: str, annotations: List[LineAnnotation], cursor: int) -> Tuple[bool, int]:
        stripped = line.strip()
        for j in range(cursor, len(annotations)):
            if annotations[j].content.strip() == stripped:
                return annotations[j].indented, j + 1
        return bool(stripped), cursor

    @staticmethod
    def remap(key: str, block: str, transform: Callable[[str], str]) -> str:
        """Apply ``transform`` to the undented block and restore its indentation.

        Args:
            key: Key owning the block, used in error messages.
            block: Raw nested block text.
            transform: Update to apply to the undented block.

        Returns:
            str: The re-indented block, ending with a newline.

        Raises:
            MatchError: If the block's indentation cannot be determined.
        """
        unit = IndentationRemapper.indent_unit(key, block)
        logger.debug("Indent unit for %s is %d space(s)", key, len(unit))
        annotations = IndentationRemapper.annotate(block, unit)
        updated = transform(IndentationRemapper.undent(annotations, unit))
        indented = IndentationRemapper.reindent(updated, annotations, unit)
        # a trailing indented blank line may have been matched onto the last line
        return indented if indented.endswith("\n") else indented + "\n"

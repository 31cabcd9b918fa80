"""Line-oriented parser feeding the properties tree."""

import logging
import re
from typing import Iterable

from .exceptions import ParseError
from .tree import PropertiesNode

logger = logging.getLogger(__name__)

COMMENT_EXPR = re.compile(r"\s*(?<!\\)#.*$")
SECTION_EXPR = re.compile(r"^\[([\w.]+)\]$", re.ASCII)
ASSIGNMENT_EXPR = re.compile(r"^([\w.]+)\s*=\s*(.*)$", re.ASCII)


class PropertiesParser:
    """Parser turning properties text into a populated key tree."""

    def __init__(self, strict_keys: bool = False):
        """Initialize properties parser.

        Args:
            strict_keys: Reject keys and section names with empty segments  # (leading, trailing or doubled dots)
        """
        self.strict_keys = strict_keys

    def parse(self, lines: Iterable[str]) -> PropertiesNode:
        """Parse lines of text into a new tree.

        Args:
            lines: Lines of properties text  # (file object, list of str, ...)

        Returns:
            Root node of the populated tree

        Raises:
            ParseError: On the first line matching neither grammar
        """
        root = PropertiesNode()
        current_section = ""
        assignments = 0

        for line_number, text in enumerate(lines, start=1):
            line = COMMENT_EXPR.sub("", text.rstrip("\r\n")).strip()
            if not line:
                continue

            match = SECTION_EXPR.match(line)
            if match:
                self._check_key(match.group(1), text, line_number)
                current_section = match.group(1) + "."
                logger.debug("Entering section [%s] at line %d", match.group(1), line_number)
                continue

            match = ASSIGNMENT_EXPR.match(line)
            if match:
                self._check_key(match.group(1), text, line_number)
                root.put(current_section + match.group(1), match.group(2).replace("\\#", "#"))
                assignments += 1
                continue

            raise ParseError(text.rstrip("\r\n"), line_number)

        logger.debug("Parsed %d assignments", assignments)
        return root

    def _check_key(self, key: str, text: str, line_number: int) -> None:
        """Validate key segments when strict keys are enabled.

        Raises:
            ParseError: If a segment is empty
        """
        if self.strict_keys and "" in key.split("."):
            raise ParseError(text.rstrip("\r\n"), line_number)

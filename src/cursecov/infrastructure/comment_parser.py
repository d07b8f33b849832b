"""Comment extraction from JavaScript/TypeScript source via tree-sitter"""

import logging
from pathlib import Path
from typing import Dict, List, Union

from tree_sitter_language_pack import get_parser

from cursecov.domain.errors import DialectError, ParseError
from cursecov.domain.models.comment import Comment

logger = logging.getLogger(__name__)

EXTENSION_TO_DIALECT: Dict[str, str] = {
    ".js": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".jsx": "javascript",
    ".ts": "typescript",
    ".mts": "typescript",
    ".cts": "typescript",
    ".tsx": "tsx",
}

COMMENT_NODE_TYPES = {"comment", "html_comment"}


def dialect_for_path(path: Union[str, Path]) -> str:
    """Determine the source dialect from a file extension

    Args:
        path: Source file path

    Returns:
        Dialect name understood by CommentParser

    Raises:
        DialectError: If the extension is not supported
    """
    suffix = Path(path).suffix.lower()
    dialect = EXTENSION_TO_DIALECT.get(suffix)
    if dialect is None:
        supported = ", ".join(sorted(EXTENSION_TO_DIALECT))
        raise DialectError(
            f"Unsupported file extension '{suffix}' for {path} (supported: {supported})"
        )
    return dialect


def strip_delimiters(text: str) -> str:
    """Strip comment delimiters, keeping only the comment content

    `// foo` becomes ` foo`, `/* foo */` becomes ` foo `.
    """
    if text.startswith("//"):
        return text[2:]
    if text.startswith("/*"):
        return text[2:-2] if text.endswith("*/") and len(text) >= 4 else text[2:]
    if text.startswith("<!--"):
        return text[4:]
    return text


class CommentParser:
    """Parser returning the comments of a source text

    tree-sitter scans string, template and regex literals itself, so comment
    markers inside them are never reported as comments.
    """

    def __init__(self):
        self._parsers = {}

    def _get_parser(self, dialect: str):
        if dialect not in self._parsers:
            if dialect not in set(EXTENSION_TO_DIALECT.values()):
                raise DialectError(f"Unknown dialect: {dialect}")
            try:
                self._parsers[dialect] = get_parser(dialect)
            except Exception as e:
                raise ParseError(f"Cannot load {dialect} grammar: {e}") from e
        return self._parsers[dialect]

    def parse(self, source_text: str, dialect: str) -> List[Comment]:
        """Parse source text and collect its comments

        Args:
            source_text: Full source text
            dialect: One of javascript, typescript, tsx

        Returns:
            Comments in source order, delimiters stripped

        Raises:
            DialectError: If the dialect is unknown
            ParseError: If the source contains syntax errors
        """
        parser = self._get_parser(dialect)
        source_bytes = source_text.encode("utf-8")
        tree = parser.parse(source_bytes)

        root = tree.root_node
        if root.has_error:
            raise ParseError(f"Syntax error in {dialect} source near {self._error_location(root)}")

        comments: List[Comment] = []
        # Iterative pre-order walk; deeply nested sources would overflow recursion
        stack = [root]
        while stack:
            node = stack.pop()
            if node.type in COMMENT_NODE_TYPES:
                text = source_bytes[node.start_byte : node.end_byte].decode("utf-8")
                comments.append(Comment(text=strip_delimiters(text)))
                continue
            stack.extend(reversed(node.children))

        logger.debug(f"Found {len(comments)} comments in {dialect} source")
        return comments

    def _error_location(self, root) -> str:
        stack = [root]
        while stack:
            node = stack.pop()
            if node.type == "ERROR" or node.is_missing:
                row, column = node.start_point
                return f"line {row + 1}, column {column + 1}"
            stack.extend(reversed([child for child in node.children if child.has_error or child.is_missing]))
        row, column = root.start_point
        return f"line {row + 1}, column {column + 1}"

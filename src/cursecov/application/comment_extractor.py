"""Comment extractor - reads a source file and returns its comments"""

import logging
from pathlib import Path
from typing import List, Optional

from cursecov.domain.errors import FilesystemError, ParseError
from cursecov.domain.models.comment import Comment
from cursecov.infrastructure.comment_parser import CommentParser, dialect_for_path

logger = logging.getLogger(__name__)


class CommentExtractor:
    """Extracts comments from files on disk"""

    def __init__(self, parser: Optional[CommentParser] = None):
        """Initialize comment extractor

        Args:
            parser: Comment parser (a new CommentParser if None)
        """
        self.parser = parser or CommentParser()

    def extract(self, path: Path) -> List[Comment]:
        """Extract the comments of a single file

        The dialect is checked before the file is opened, so unsupported
        files are never read.

        Args:
            path: Source file path

        Returns:
            Comments in source order

        Raises:
            DialectError: If the file extension is not supported
            FilesystemError: If the file cannot be read as UTF-8 text
            ParseError: If the source has syntax errors
        """
        dialect = dialect_for_path(path)

        try:
            with open(path, "r", encoding="utf-8") as f:
                source_text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise FilesystemError(f"Cannot read {path}: {e}") from e

        try:
            comments = self.parser.parse(source_text, dialect)
        except ParseError as e:
            raise ParseError(f"{path}: {e}") from e
        logger.debug(f"Extracted {len(comments)} comments from {path}")
        return comments

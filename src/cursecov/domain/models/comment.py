"""Comment model - represents a comment extracted from source code"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Comment:
    """A single source comment"""

    text: str  # Comment content, delimiters (//, /*, */) stripped

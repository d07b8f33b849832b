"""File set resolution from include/ignore glob patterns"""

import fnmatch
import logging
import os
import re
from pathlib import Path
from typing import Iterable, List, Set

from cursecov.domain.errors import FilesystemError, PatternError

logger = logging.getLogger(__name__)

_MAGIC = re.compile(r"[*?\[]")


class FileResolver:
    """Expand glob patterns into a set of files

    Supported syntax: `*` and `?` within one path component, `[...]` and
    `[!...]` character classes, and `**` as a whole component matching zero
    or more directories.
    """

    def resolve(self, include_patterns: Iterable[str], ignore_patterns: Iterable[str]) -> Set[Path]:
        """Resolve the files to analyze

        Args:
            include_patterns: Glob patterns of files to include
            ignore_patterns: Glob patterns of files to subtract

        Returns:
            Included paths minus ignored paths

        Raises:
            PatternError: If a pattern is invalid
            FilesystemError: If a directory cannot be read
        """
        included = self.expand_all(include_patterns)
        ignored = self.expand_all(ignore_patterns)
        resolved = included - ignored

        if ignored:
            logger.debug(f"Ignored {len(included) - len(resolved)} of {len(included)} files")
        logger.info(f"Resolved {len(resolved)} files to analyze")
        return resolved

    def expand_all(self, patterns: Iterable[str]) -> Set[Path]:
        paths: Set[Path] = set()
        for pattern in patterns:
            paths |= self.expand(pattern)
        return paths

    def expand(self, pattern: str) -> Set[Path]:
        """Expand a single glob pattern

        Args:
            pattern: Glob pattern

        Returns:
            Matching file paths (empty if nothing matches)
        """
        parts = self._split(pattern)
        for part in parts:
            self._validate_part(pattern, part)

        absolute = pattern.replace("\\", "/").startswith("/")
        literal: List[str] = []
        for part in parts:
            if _MAGIC.search(part):
                break
            literal.append(part)
        rest = parts[len(literal):]

        base = ("/" if absolute else "") + "/".join(literal)
        if not rest:
            matches = {Path(os.path.normpath(base))} if Path(base).is_file() else set()
            logger.debug(f"Pattern {pattern!r} matched {len(matches)} files")
            return matches

        matches = set()
        base_dir = Path(base or ".")
        if not base_dir.is_dir():
            logger.debug(f"Pattern {pattern!r} matched 0 files")
            return matches

        max_depth = None if "**" in rest else len(rest) - 1

        def onerror(error: OSError):
            raise FilesystemError(f"Cannot read directory {error.filename}: {error.strerror}") from error

        for dirpath, dirnames, filenames in os.walk(base_dir, onerror=onerror):
            relative_dir = os.path.relpath(dirpath, base_dir).replace(os.sep, "/")
            prefix = "" if relative_dir == "." else relative_dir + "/"
            if max_depth is not None and prefix.count("/") >= max_depth:
                dirnames[:] = []
            dirnames.sort()
            names = prefix.split("/")[:-1]
            for filename in filenames:
                if self._match_parts(rest, names + [filename]):
                    matches.add(Path(os.path.normpath(os.path.join(base or ".", prefix + filename))))

        logger.debug(f"Pattern {pattern!r} matched {len(matches)} files")
        return matches

    def _split(self, pattern: str) -> List[str]:
        # Empty and "." components carry no meaning for matching
        return [part for part in pattern.replace("\\", "/").split("/") if part not in ("", ".")]

    def _validate_part(self, pattern: str, part: str) -> None:
        if "**" in part and part != "**":
            raise PatternError(f"Invalid pattern {pattern!r}: '**' must form a whole path component")
        index = 0
        while index < len(part):
            if part[index] == "[":
                end = self._class_end(part, index)
                if end < 0:
                    raise PatternError(f"Invalid pattern {pattern!r}: unclosed character class")
                index = end
            index += 1

    def _class_end(self, part: str, start: int) -> int:
        """Index of the ']' closing the class opened at start, or -1"""
        index = start + 1
        if index < len(part) and part[index] == "!":
            index += 1
        # A leading ']' is a literal member of the class
        if index < len(part) and part[index] == "]":
            index += 1
        return part.find("]", index)

    def _match_parts(self, parts: List[str], names: List[str]) -> bool:
        """Match path components against pattern components

        `**` consumes zero or more components; any other component is matched
        with fnmatch.
        """
        if not parts:
            return not names
        if parts[0] == "**":
            return any(self._match_parts(parts[1:], names[index:]) for index in range(len(names) + 1))
        return (
            bool(names)
            and fnmatch.fnmatchcase(names[0], parts[0])
            and self._match_parts(parts[1:], names[1:])
        )

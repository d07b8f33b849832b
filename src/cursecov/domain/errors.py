"""Error hierarchy for cursecov

Every error here is fatal for an analysis run. Falling below the coverage
threshold is not an error, see GateResult.
"""


class CursecovError(Exception):
    """Base class for all cursecov errors."""

    pass


class PatternError(CursecovError):
    """Glob pattern is syntactically invalid."""

    pass


class FilesystemError(CursecovError):
    """A path, directory or file could not be read."""

    pass


class DialectError(CursecovError):
    """File extension is not mapped to a known source dialect."""

    pass


class ParseError(CursecovError):
    """Source text could not be parsed."""

    pass


class ConfigurationError(CursecovError):
    """Configuration validation error."""

    pass

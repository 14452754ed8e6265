"""Errors raised while reading and analyzing PDB files.

Each error carries the exact message shown to the user, so ``str(error)``
is what the command line prints on stderr.
"""

from .config import (
    COORDINATE_MSG,
    FILE_OPEN_MSG,
    SHORT_LINE_MSG,
    USAGE_MSG,
    ZERO_ATOMS_MSG,
)


class AnalyzeProteinError(Exception):
    """Base class for every fatal analyzer error."""


class UsageError(AnalyzeProteinError):
    def __init__(self):
        super().__init__(USAGE_MSG)


class FileOpenError(AnalyzeProteinError):
    def __init__(self, path):
        self.path = str(path)
        super().__init__(FILE_OPEN_MSG.format(path=self.path))


class MalformedLineError(AnalyzeProteinError, ValueError):
    def __init__(self, length):
        self.length = length
        super().__init__(SHORT_LINE_MSG.format(length=length))


class CoordinateParseError(AnalyzeProteinError, ValueError):
    def __init__(self, field):
        self.field = field
        super().__init__(COORDINATE_MSG.format(field=field))


class EmptyResultError(AnalyzeProteinError, ValueError):
    def __init__(self, path):
        self.path = str(path)
        super().__init__(ZERO_ATOMS_MSG.format(path=self.path))

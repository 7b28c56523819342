from __future__ import annotations


class ImporterError(Exception):
    """Base class for failures that abort an import run."""


class SourceReadError(ImporterError):
    pass


class SourceParseError(ImporterError):
    pass


class BackupError(ImporterError):
    """The existing target could not be copied; the new target is not written."""


class TargetWriteError(ImporterError):
    pass

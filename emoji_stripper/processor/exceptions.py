class ProcessorError(Exception):
    """Base exception for all file-processing errors."""


class ConfigurationError(ProcessorError):
    """Raised when the requested target or flag combination is invalid."""


class FileReadError(ProcessorError):
    """Raised when a file cannot be read from disk or decoded as text."""


class BackupError(ProcessorError):
    """Raised when a backup copy cannot be created or verified."""


class FileWriteError(ProcessorError):
    """Raised when transformed content cannot be written to its destination."""

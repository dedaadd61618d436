class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class EmptyBatchError(ProcessorError):
    """Raised when a batch contains no files."""


class FileSkippedError(ProcessorError):
    """Raised by a pipeline step when a file must be left out of the result."""


class FileReadError(ProcessorError):
    """Raised when a file cannot be read from disk."""

class ProcessorError(Exception):
    """Base exception for all processor-related errors."""


class FetchError(ProcessorError):
    """Raised when the uploaded object cannot be read from the bucket."""


class CsvAppendError(ProcessorError):
    """Raised when a row cannot be added to the output CSV object."""


class FileStateMarkerError(ProcessorError):
    """Raised when a source object cannot be renamed to its terminal state.

    `fatal` is set because an object left under its original name will be
    picked up again by the next trigger and may loop forever.
    """

    def __init__(self, message: str, *, fatal: bool = True) -> None:
        super().__init__(message)
        self.fatal = fatal

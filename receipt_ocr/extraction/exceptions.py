class ExtractionError(Exception):
    """Raised when structured extraction from an image fails."""


class ExtractionParseError(ExtractionError):
    """Raised when the model response is not a usable JSON object."""


class ExtractionNetworkError(ExtractionError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""

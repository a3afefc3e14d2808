"""Custom exceptions for the requirements NLP pipeline."""


class ArchitectureNLPError(Exception):
    """Base exception for the NLP pipeline."""


class RequirementsProcessingError(ArchitectureNLPError):
    """Raised when a pipeline stage fails while processing requirements text."""

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(f"Failed to process requirements: {cause}")

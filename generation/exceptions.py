"""
Custom exceptions for content generation.

InvalidArgumentError is surfaced to the caller, ProviderUnavailableError is
always absorbed by the fallback path, InternalGenerationError means the
fallback path itself broke.
"""


class GenerationError(Exception):
    """
    Base exception for content generation failures.

    All generation-specific exceptions inherit from this.
    """
    pass


class InvalidArgumentError(GenerationError):
    """
    Raised when the request cannot be processed as given.

    Example: empty or whitespace-only prompt. No provider call is made.
    """
    pass


class ProviderUnavailableError(GenerationError):
    """
    Raised when the generative-text provider call fails.

    Covers network errors, auth errors, rate limits, timeouts and empty or
    malformed completions. Never propagated to HTTP callers.
    """
    pass


class InternalGenerationError(GenerationError):
    """
    Raised when fallback content could not be produced.

    Attributes:
        original_error: The underlying exception
    """

    def __init__(self, original_error: Exception):
        self.original_error = original_error
        super().__init__(f"Fallback generation failed: {str(original_error)}")

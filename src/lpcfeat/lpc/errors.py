"""LPC-specific exception types."""

from __future__ import annotations


class FeatureExtractionError(Exception):
    """Raised when an extraction call fails for any reason.

    The underlying fault is chained as ``__cause__`` and also kept on
    :attr:`cause` for callers that only hold the wrapper.
    """

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"LPC feature extraction failed: {cause}")
        self.cause = cause

class AnalysisError(Exception):
    """Raised when bid analysis fails."""


class AnalysisValidationError(AnalysisError):
    """Raised when the model's answer does not have the expected shape."""


class AnalysisNetworkError(AnalysisError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""


class InvalidBidInputError(AnalysisError):
    """Raised when the submitted bids cannot be compared."""

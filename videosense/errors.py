"""Errors raised while analysing a video."""


class AnalysisFailed(RuntimeError):
    """Raised when a video could not be analysed. The message is shown to the user."""

    def __init__(self, message: str = "Failed to analyze video"):
        super().__init__(message)


class InvalidVideoUrl(AnalysisFailed):
    """Raised when no video identifier can be extracted from the URL."""

    def __init__(self, message: str = "Invalid YouTube URL"):
        super().__init__(message)


class MetadataFetchError(AnalysisFailed):
    """Raised when the oEmbed endpoint does not return video metadata."""

    def __init__(self, message: str = "Failed to fetch video metadata"):
        super().__init__(message)


class QuotaExceeded(AnalysisFailed):
    """Raised when the completion API rejects the request for quota or billing reasons."""

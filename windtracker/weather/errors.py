# ABOUTME: Exception hierarchy for wind API fetch failures
# ABOUTME: Every subclass is transient and recovered by falling back to the simulator


class FetchError(Exception):
    """Base exception for wind API fetch failures."""
    pass


class FetchTimeoutError(FetchError):
    """Raised when the API does not answer within the fetch timeout."""
    pass


class HttpStatusError(FetchError):
    """Raised when the API answers with a non-2xx status."""

    def __init__(self, status_code: int, message: str = ""):
        self.status_code = status_code
        super().__init__(message or f"HTTP {status_code}")


class MalformedPayloadError(FetchError):
    """Raised when a 2xx response body does not have the expected shape."""
    pass

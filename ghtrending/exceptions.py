"""ghtrending exception classes."""


class TrendingError(Exception):
    """Base exception for all ghtrending errors."""

    def __init__(self, code: str, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(f"[{code}] {message}")


class ConfigurationError(TrendingError):
    """Raised when client configuration is invalid."""

    def __init__(self, message: str) -> None:
        super().__init__("CONFIGURATION_ERROR", message)


class ValidationError(TrendingError):
    """Raised when a query carries an invalid filter value."""

    def __init__(self, message: str) -> None:
        super().__init__("VALIDATION_ERROR", message)


class FetchError(TrendingError):
    """Raised when the trending page cannot be fetched."""

    pass


class UpstreamStatusError(TrendingError):
    """Raised on a non-2xx response when status checking is enabled."""

    def __init__(self, status_code: int, url: str) -> None:
        super().__init__("UPSTREAM_STATUS", f"HTTP {status_code} from {url}")
        self.status_code = status_code
        self.url = url


class ExtractionError(TrendingError):
    """Raised when the trending page cannot be parsed or traversed."""

    def __init__(self, message: str) -> None:
        super().__init__("EXTRACTION_ERROR", message)

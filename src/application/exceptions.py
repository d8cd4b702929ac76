from typing import Optional


class ExternalServiceError(Exception):
    """Base exception for failures of services this API depends on."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class LLMProviderError(ExternalServiceError):
    """Raised when the LLM vendor API rejects or fails a request."""

    pass


class AnalyticsBackendError(ExternalServiceError):
    """Raised when the analytics backend returns an error or is unreachable."""

    pass


class MCPConnectionError(ExternalServiceError):
    """Raised when the hotel MCP server cannot be reached."""

    pass

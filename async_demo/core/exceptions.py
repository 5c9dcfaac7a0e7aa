"""
Custom exception hierarchy for the demo service.

Remote failures are raised as RemoteFetchError and surfaced to callers of the
combined handler as UpstreamError.
"""

from typing import Optional


class DemoError(Exception):
    """Base exception for all service errors."""

    pass


class ConfigurationError(DemoError):
    """Raised when configuration validation fails or required config is missing."""

    pass


class RemoteFetchError(DemoError):
    """Raised when the external JSON API call fails or returns an unusable body."""

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.url = url
        self.status_code = status_code

    def __str__(self) -> str:
        parts = [super().__str__()]
        if self.url:
            parts.append(f"URL: {self.url}")
        if self.status_code:
            parts.append(f"Status: {self.status_code}")
        return " | ".join(parts)


class UpstreamError(DemoError):
    """Raised when a branch of the combined request fails."""

    def __init__(self, message: str, source: Optional[str] = None):
        super().__init__(message)
        self.source = source

    def __str__(self) -> str:
        if self.source:
            return f"{super().__str__()} | Source: {self.source}"
        return super().__str__()

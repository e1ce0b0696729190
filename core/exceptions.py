"""Custom Exception Hierarchy for the fal.ai image MCP server
This module defines a typed exception hierarchy that enables precise error
handling and structured tool responses across the application.

Exception Handling Flow:
    1. Validation, provider or storage layer raises a typed exception
    2. The image tool handler catches it (see features/image/tools.py)
    3. Handler converts it to an MCP error response with guidance text
    4. Client receives ``isError`` plus a human-readable message
"""

from __future__ import annotations


class ServiceError(Exception):
    """Base exception for all service layer errors."""


class ValidationError(ServiceError):
    """Raised when tool arguments fail validation."""

    def __init__(self, message: str, field: str | None = None):
        self.message = message
        self.field = field
        super().__init__(self.message)


class ProviderError(ServiceError):
    """Raised when the external generation provider fails."""

    def __init__(
        self,
        message: str,
        provider: str | None = None,
        original_error: Exception | None = None,
        status_code: int | None = None,
    ):
        self.message = message
        self.provider = provider
        self.original_error = original_error
        self.status_code = status_code
        super().__init__(self.message)


class ConfigurationError(ServiceError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, message: str, key: str | None = None):
        self.message = message
        self.key = key
        super().__init__(self.message)


class PersistenceError(ServiceError):
    """Raised when a generated image cannot be saved locally."""

    def __init__(self, message: str, url: str | None = None):
        self.message = message
        self.url = url
        super().__init__(self.message)


class FetchError(PersistenceError):
    """Raised when downloading a generated image returns a non-success status."""

    def __init__(self, message: str, url: str | None = None, status_code: int | None = None):
        super().__init__(message, url=url)
        self.status_code = status_code


class UnknownToolError(ServiceError):
    """Raised when a tool call names a capability this server does not expose."""

    def __init__(self, name: str):
        self.name = name
        self.message = f"Unknown tool: {name}"
        super().__init__(self.message)

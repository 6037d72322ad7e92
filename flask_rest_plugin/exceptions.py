"""
Custom exceptions for the REST plugin.
"""
from typing import Optional

from werkzeug.exceptions import BadRequest


class RestPluginError(Exception):
    """Base exception for REST plugin errors."""

    pass


class ConfigurationError(RestPluginError, ValueError):
    """Raised at registration time when the plugin is misconfigured."""

    pass


class UnsupportedFormatError(RestPluginError):
    """Raised when a request asks for a format missing from the format table."""

    def __init__(self, token: str, status_code: int = 404):
        self.token = token
        self.status_code = status_code
        self.message = f"Unsupported format: {token}"
        super().__init__(self.message)


class EntityParsingError(RestPluginError, BadRequest):
    """Raised when the request body cannot be decoded for the active format."""

    def __init__(self, message="Failed to parse request body", original_exception: Optional[Exception] = None):
        self.message = message
        self.original_exception = original_exception
        super().__init__(description=message)

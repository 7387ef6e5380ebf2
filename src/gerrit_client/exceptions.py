"""Exception classes for the Gerrit client."""

from typing import Optional

import httpx


class GerritClientError(Exception):
    """Base exception for all Gerrit client errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self):
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class ConfigurationError(GerritClientError):
    """Exception raised when client configuration is invalid.

    Raised before any network I/O takes place.
    """

    pass


class URLValidationError(ConfigurationError):
    """Exception raised when a base URL cannot be resolved."""

    pass


class AuthConfigurationError(ConfigurationError):
    """Exception raised when authentication settings are incomplete or unknown."""

    pass


class RequestBuildError(GerritClientError):
    """Exception raised when an outgoing request cannot be constructed."""

    pass


class ResponseError(GerritClientError):
    """Base exception for failures that come with a server response attached."""

    def __init__(
        self,
        message: str,
        response: Optional[httpx.Response] = None,
        details: Optional[str] = None,
    ):
        super().__init__(message, details)
        self.response = response


class GerritAPIError(ResponseError):
    """Exception raised when the server answers with a non-2xx status.

    The raw response stays available on ``response`` so callers can look at
    headers or discriminate on ``status_code``.
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        response: Optional[httpx.Response] = None,
    ):
        super().__init__(message, response)
        self.status_code = status_code

    def __str__(self):
        return f"{self.status_code}: {self.message}"

    @classmethod
    def from_response(cls, response: httpx.Response, message: str) -> "GerritAPIError":
        """Build the most specific error class for the response status."""
        error_cls = _STATUS_ERRORS.get(response.status_code, cls)
        return error_cls(response.status_code, message, response)

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404

    @property
    def is_conflict(self) -> bool:
        return self.status_code == 409


class NotFoundError(GerritAPIError):
    """Exception raised when the requested resource does not exist (404)."""

    pass


class ConflictError(GerritAPIError):
    """Exception raised when the request conflicts with server state (409)."""

    pass


_STATUS_ERRORS = {404: NotFoundError, 409: ConflictError}


class DecodeError(ResponseError):
    """Exception raised when a successful response body cannot be decoded."""

    pass

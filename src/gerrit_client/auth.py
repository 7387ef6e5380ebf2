"""Authentication strategies for Gerrit REST access.

Gerrit accepts HTTP basic or digest credentials (the HTTP password of an
account) and, on some deployments, a session cookie. Each strategy is an
``httpx.Auth`` so that challenge/response schemes such as digest run inside
the transport's auth flow.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Generator, Union

import httpx

from .exceptions import AuthConfigurationError

logger = logging.getLogger(__name__)


class AuthScheme(str, Enum):
    """Supported authentication schemes."""

    BASIC = "basic"
    DIGEST = "digest"
    COOKIE = "cookie"


class CookieAuth(httpx.Auth):
    """Send the credentials as a single session cookie.

    The cookie name is the configured username and its value the secret,
    matching the server's session cookie convention (e.g. ``GerritAccount``).
    """

    def __init__(self, name: str, value: str):
        self.name = name
        self.value = value

    def auth_flow(
        self, request: httpx.Request
    ) -> Generator[httpx.Request, httpx.Response, None]:
        cookie = f"{self.name}={self.value}"
        existing = request.headers.get("Cookie")
        request.headers["Cookie"] = f"{existing}; {cookie}" if existing else cookie
        yield request


@dataclass(frozen=True)
class Credentials:
    """Immutable authentication state: scheme plus username and secret."""

    scheme: AuthScheme
    username: str
    secret: str

    def __repr__(self) -> str:
        return f"Credentials(scheme={self.scheme.value!r}, username={self.username!r})"

    @classmethod
    def create(
        cls, scheme: Union[str, AuthScheme], username: str, secret: str
    ) -> "Credentials":
        """Validate and build credentials.

        Args:
            scheme: One of "basic", "digest" or "cookie"
            username: Account username (or cookie name for cookie auth)
            secret: HTTP password (or cookie value for cookie auth)

        Raises:
            AuthConfigurationError: If any value is empty or the scheme is unknown
        """
        if not scheme or not username or not secret:
            raise AuthConfigurationError(
                "Authentication scheme, username and secret cannot be empty"
            )

        try:
            resolved = AuthScheme(scheme)
        except ValueError:
            allowed = ", ".join(s.value for s in AuthScheme)
            raise AuthConfigurationError(
                f"Unsupported authentication scheme '{scheme}'", f"expected one of {allowed}"
            )

        return cls(scheme=resolved, username=username, secret=secret)

    def to_httpx_auth(self) -> httpx.Auth:
        """Return the transport-level strategy for these credentials."""
        if self.scheme is AuthScheme.COOKIE:
            return CookieAuth(self.username, self.secret)
        if self.scheme is AuthScheme.DIGEST:
            return httpx.DigestAuth(self.username, self.secret)
        return httpx.BasicAuth(self.username, self.secret)

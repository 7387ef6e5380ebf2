"""Base REST client shared by the Gerrit and Gitiles clients.

Every endpoint method funnels through ``call``: the request is built
(URL, query or body, headers, auth snapshot), sent on the injected
``httpx.AsyncClient`` and its body decoded into the destination the caller
named.
"""

import json
import logging
import threading
from dataclasses import dataclass
from typing import Any, Optional, Tuple, Type, TypeVar, Union
from urllib.parse import urlsplit

import httpx
from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticSerializationError, to_json

from ..auth import AuthScheme, Credentials
from ..config import TransportConfig
from ..destinations import ByteSink, Destination, Discard, ScalarText, Structured, Writer
from ..exceptions import DecodeError, GerritAPIError, RequestBuildError
from ..magic_prefix import strip_magic_prefix
from ..query_options import encode_options
from ..url_resolver import resolve_base_url

logger = logging.getLogger(__name__)

T = TypeVar("T")

AUTHENTICATED_PREFIX = "a"

JSON_CONTENT_TYPE = "application/json"
TEXT_CONTENT_TYPE = "text/plain; charset=UTF-8"

QUERY_METHODS = frozenset({"GET", "HEAD"})
BODY_METHODS = frozenset({"POST", "PUT"})
SUPPORTED_METHODS = QUERY_METHODS | BODY_METHODS | {"DELETE"}


@dataclass
class PreparedRequest:
    """An outgoing request together with the auth strategy to send it with."""

    request: httpx.Request
    auth: Optional[httpx.Auth] = None

    @property
    def authenticated(self) -> bool:
        return self.auth is not None


def serialize_body(payload: Any) -> Tuple[bytes, str]:
    """Serialize a POST/PUT payload.

    Args:
        payload: A ``str`` (sent verbatim), a pydantic model or any
            JSON-serializable value

    Returns:
        Tuple of (body bytes, content type)

    Raises:
        RequestBuildError: If the payload cannot be serialized
    """
    if isinstance(payload, str):
        return payload.encode("utf-8"), TEXT_CONTENT_TYPE

    try:
        if isinstance(payload, BaseModel):
            body = payload.model_dump_json(by_alias=True, exclude_none=True).encode()
        else:
            body = to_json(payload, by_alias=True, exclude_none=True)
    except (PydanticSerializationError, TypeError, ValueError) as e:
        raise RequestBuildError(
            f"Cannot serialize {type(payload).__name__} request body", str(e)
        )

    return body, JSON_CONTENT_TYPE


def error_message(response: httpx.Response) -> str:
    """Extract the server's error text, falling back to the reason phrase."""
    text = strip_magic_prefix(response.content).decode("utf-8", errors="replace")
    text = text.strip().strip('"').strip()
    return text or response.reason_phrase or f"HTTP {response.status_code}"


def decode_scalar_text(body: bytes) -> str:
    """Decode a scalar text body.

    Gerrit answers most text endpoints with a JSON string literal, which is
    unescaped. Any other body only has surrounding quotes and newlines trimmed.
    """
    text = body.decode("utf-8", errors="replace")
    literal = text.strip()
    if len(literal) >= 2 and literal.startswith('"') and literal.endswith('"'):
        try:
            value = json.loads(literal)
        except ValueError:
            pass
        else:
            if isinstance(value, str):
                return value
    return text.strip('"\n')


class BaseRESTClient:
    """HTTP core with pluggable authentication and typed decoding."""

    def __init__(
        self,
        base_url: str,
        transport_config: Optional[TransportConfig] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """Initialize the client. No network I/O takes place here.

        Args:
            base_url: Server URL, optionally with a path prefix
            transport_config: Pool and timeout policy for the HTTP client
                this instance creates
            http_client: Pre-built HTTP client to use instead. It is left
                open by ``close``.

        Raises:
            URLValidationError: If the base URL is not an absolute http(s) URL
        """
        self.base_url = resolve_base_url(base_url)
        self.transport_config = transport_config or TransportConfig()
        self._session: Optional[httpx.AsyncClient] = http_client
        self._owns_session = http_client is None
        self._credentials: Optional[Credentials] = None
        self._auth_lock = threading.Lock()

    @property
    def session(self) -> httpx.AsyncClient:
        """Get or create the HTTP session."""
        if self._session is None or (self._owns_session and self._session.is_closed):
            self._session = self.transport_config.build_http_client()
            self._owns_session = True
        return self._session

    # Authentication

    @property
    def credentials(self) -> Optional[Credentials]:
        return self._credentials

    @property
    def is_authenticated(self) -> bool:
        return self._credentials is not None

    def set_auth(
        self, scheme: Union[str, AuthScheme], username: str, secret: str
    ) -> None:
        """Configure credentials used for every subsequent request.

        Raises:
            AuthConfigurationError: If a value is empty or the scheme unknown
        """
        credentials = Credentials.create(scheme, username, secret)
        with self._auth_lock:
            self._credentials = credentials
        logger.debug(f"Authentication set to {credentials!r}")

    def set_basic_auth(self, username: str, password: str) -> None:
        self.set_auth(AuthScheme.BASIC, username, password)

    def set_digest_auth(self, username: str, password: str) -> None:
        self.set_auth(AuthScheme.DIGEST, username, password)

    def set_cookie_auth(self, name: str, value: str) -> None:
        self.set_auth(AuthScheme.COOKIE, name, value)

    def clear_auth(self) -> None:
        with self._auth_lock:
            self._credentials = None

    # Request building

    def resolve_url(self, endpoint: str, authenticated: bool = False) -> str:
        """Join an endpoint onto the base URL.

        Authenticated requests carry an ``/a`` segment right after the host.
        """
        if endpoint.startswith("/"):
            endpoint = endpoint[1:]

        base = self.base_url
        if authenticated:
            parts = urlsplit(base)
            base = f"{parts.scheme}://{parts.netloc}/{AUTHENTICATED_PREFIX}{parts.path}"

        return base + endpoint

    def build_request(
        self, method: str, endpoint: str, payload: Any = None
    ) -> PreparedRequest:
        """Build the request for an endpoint.

        GET and HEAD encode the payload as query parameters. POST and PUT
        serialize it as the body. DELETE takes no payload.

        Args:
            method: HTTP method
            endpoint: Path relative to the base URL
            payload: Query options or request body

        Returns:
            PreparedRequest: The request and the auth strategy to send it with

        Raises:
            RequestBuildError: For unknown methods, unserializable payloads or
                a payload on DELETE
        """
        method = method.upper()
        if method not in SUPPORTED_METHODS:
            raise RequestBuildError(f"Unsupported HTTP method '{method}'")

        # One read of the credentials for the whole request
        credentials = self._credentials

        url = self.resolve_url(endpoint, authenticated=credentials is not None)
        headers = {"Accept": JSON_CONTENT_TYPE}
        params = None
        content = None

        if method in QUERY_METHODS:
            params = encode_options(payload) or None
        elif method in BODY_METHODS:
            if payload is not None:
                content, headers["Content-Type"] = serialize_body(payload)
        elif payload is not None:
            raise RequestBuildError(
                f"{method} requests cannot carry a payload",
                f"use the POST form of {endpoint} to send a body",
            )

        request = self.session.build_request(
            method, url, params=params, content=content, headers=headers
        )
        auth = credentials.to_httpx_auth() if credentials is not None else None
        return PreparedRequest(request=request, auth=auth)

    # Response handling

    async def execute(
        self, prepared: PreparedRequest, destination: Optional[Destination] = None
    ) -> httpx.Response:
        """Send a prepared request and decode its body into the destination.

        Raises:
            GerritAPIError: If the server answers with a non-2xx status
            DecodeError: If a successful body cannot be decoded
            httpx.TransportError: On connection-level failures
        """
        if destination is None:
            destination = Discard()

        request = prepared.request
        if isinstance(destination, ScalarText):
            request.headers["Accept"] = "text/plain"

        logger.debug(f"{request.method} {request.url}")
        response = await self.session.send(request, auth=prepared.auth, stream=True)

        try:
            logger.debug(f"{request.method} {request.url} -> {response.status_code}")

            if not response.is_success:
                await response.aread()
                message = error_message(response)
                logger.error(
                    f"{request.method} {request.url} failed with "
                    f"{response.status_code}: {message}"
                )
                raise GerritAPIError.from_response(response, message)

            if isinstance(destination, Discard):
                pass
            elif isinstance(destination, ByteSink):
                await self._copy_body(response, destination)
            elif isinstance(destination, ScalarText):
                body = strip_magic_prefix(await response.aread())
                destination.value = decode_scalar_text(body)
            elif isinstance(destination, Structured):
                if response.status_code == 204:
                    return response
                body = strip_magic_prefix(await response.aread())
                try:
                    destination.value = destination.adapter().validate_json(body)
                except ValidationError as e:
                    raise DecodeError(
                        f"Failed to decode response from {request.url}",
                        response,
                        str(e),
                    )
            else:
                raise TypeError(f"Unsupported destination {type(destination).__name__}")
        finally:
            await response.aclose()

        return response

    async def _copy_body(self, response: httpx.Response, sink: ByteSink) -> None:
        try:
            async for chunk in response.aiter_bytes():
                sink.writer.write(chunk)
                sink.bytes_written += len(chunk)
        except (httpx.StreamError, OSError) as e:
            raise DecodeError(
                f"Failed to copy response body from {response.request.url}",
                response,
                str(e),
            )

    async def call(
        self,
        method: str,
        path: str,
        payload: Any = None,
        destination: Optional[Destination] = None,
    ) -> httpx.Response:
        """Build, send and decode one request. No retries."""
        prepared = self.build_request(method, path, payload)
        return await self.execute(prepared, destination)

    # Typed helpers used by the resource services

    async def request_model(
        self, method: str, path: str, type_: Type[T], payload: Any = None
    ) -> T:
        """Call an endpoint whose JSON body decodes into ``type_``.

        A 204 No Content answer decodes to None.
        """
        destination: Structured[T] = Structured(type_)
        await self.call(method, path, payload, destination)
        return destination.value

    async def request_text(
        self, method: str, path: str, payload: Any = None
    ) -> Optional[str]:
        """Call an endpoint answering with a scalar string.

        Returns None when the server answers 204 No Content.
        """
        destination = ScalarText()
        response = await self.call(method, path, payload, destination)
        if response.status_code == 204:
            return None
        return destination.value

    async def request_empty(
        self, method: str, path: str, payload: Any = None
    ) -> httpx.Response:
        return await self.call(method, path, payload, Discard())

    async def request_bytes(
        self, method: str, path: str, writer: Writer, payload: Any = None
    ) -> int:
        """Stream a raw body into ``writer`` and return the number of bytes."""
        destination = ByteSink(writer)
        await self.call(method, path, payload, destination)
        return destination.bytes_written

    async def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session and self._session and not self._session.is_closed:
            await self._session.aclose()

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

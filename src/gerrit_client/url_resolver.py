"""Base URL resolution for Gerrit and Gitiles servers."""

from urllib.parse import urlparse, urlunparse
from typing import Optional

from .exceptions import URLValidationError


def resolve_base_url(base_url: Optional[str]) -> str:
    """Validate a server URL and normalize it to end in exactly one "/".

    Resolving an already normalized URL returns it unchanged.

    Args:
        base_url: The server URL, optionally including a path prefix
            (e.g. ``https://review.example.org/gerrit``)

    Returns:
        str: The normalized URL

    Raises:
        URLValidationError: If the URL is empty, relative or unsupported
    """
    if not base_url:
        raise URLValidationError("Base URL cannot be empty or None")

    base_url = base_url.strip()
    if not base_url:
        raise URLValidationError("Base URL cannot be empty")

    try:
        parsed = urlparse(base_url)
    except ValueError as e:
        raise URLValidationError(f"Invalid URL format: {base_url}", str(e))

    if not parsed.scheme:
        raise URLValidationError(f"Base URL must be absolute: {base_url}")

    if parsed.scheme not in ("http", "https"):
        raise URLValidationError(
            f"Unsupported protocol '{parsed.scheme}'. Only HTTP and HTTPS are supported"
        )

    if not parsed.netloc or not parsed.hostname:
        raise URLValidationError(f"Invalid URL format: {base_url}")

    if parsed.query or parsed.fragment:
        raise URLValidationError(
            f"Base URL must not carry a query or fragment: {base_url}"
        )

    try:
        # Raises for out-of-range or non-numeric ports
        parsed.port
    except ValueError as e:
        raise URLValidationError(f"Invalid port in URL: {base_url}", str(e))

    path = parsed.path.rstrip("/") + "/"

    return urlunparse((parsed.scheme, parsed.netloc, path, parsed.params, "", ""))

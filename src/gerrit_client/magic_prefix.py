"""XSSI protection prefix handling.

Gerrit prepends ``)]}'`` and a newline to every JSON response so that the
body cannot be executed when loaded as a script.
"""

MAGIC_PREFIX = b")]}'\n"

_PREFIX_LINE = MAGIC_PREFIX.rstrip(b"\n")


def strip_magic_prefix(body: bytes) -> bytes:
    """Remove the magic prefix line from a response body if present.

    Bodies without the prefix (or with only part of it) are returned as-is.

    Args:
        body: Raw response body

    Returns:
        bytes: The body without the leading prefix line
    """
    if body.startswith(MAGIC_PREFIX):
        return body[len(MAGIC_PREFIX) :]
    if body.startswith(_PREFIX_LINE + b"\r\n"):
        return body[len(_PREFIX_LINE) + 2 :]
    if body == _PREFIX_LINE:
        return b""
    return body

"""Query option encoding for GET requests.

Option models declare the query parameter name of each field as its alias.
Zero-valued fields are left out of the query string unless the field is
marked ``keep_empty``.
"""

import logging
from enum import Enum
from typing import Any, Iterator, List, Mapping, Tuple

from pydantic import BaseModel, ConfigDict

from .exceptions import RequestBuildError

logger = logging.getLogger(__name__)

KEEP_EMPTY = {"keep_empty": True}


class QueryOptions(BaseModel):
    """Base model for structured query options."""

    model_config = ConfigDict(populate_by_name=True)

    def query_items(self) -> Iterator[Tuple[str, Any, bool]]:
        """Yield (parameter name, value, keep_empty) for every declared field."""
        for name, field in type(self).model_fields.items():
            extra = field.json_schema_extra
            keep_empty = bool(isinstance(extra, dict) and extra.get("keep_empty"))
            yield field.alias or name, getattr(self, name), keep_empty


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (bool, int, float, str, list, tuple, set, dict)):
        return not value
    return False


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def encode_options(options: Any) -> List[Tuple[str, str]]:
    """Convert an options value into an ordered list of query parameters.

    List values repeat the parameter once per element.

    Args:
        options: None, a QueryOptions model or a plain mapping

    Returns:
        List of (name, value) pairs ready for the URL query string

    Raises:
        RequestBuildError: If the value cannot be expressed as query parameters
    """
    if options is None:
        return []

    if isinstance(options, QueryOptions):
        items = list(options.query_items())
    elif isinstance(options, Mapping):
        items = [(str(key), value, False) for key, value in options.items()]
    else:
        raise RequestBuildError(
            f"Cannot encode {type(options).__name__} as query parameters"
        )

    params: List[Tuple[str, str]] = []
    for key, value, keep_empty in items:
        if value is None or (_is_empty(value) and not keep_empty):
            continue
        if isinstance(value, (list, tuple, set)):
            params.extend((key, _format_value(item)) for item in value)
        else:
            params.append((key, _format_value(value)))

    logger.debug(f"Encoded query parameters: {params}")
    return params

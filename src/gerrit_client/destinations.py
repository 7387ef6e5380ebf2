"""Response decode targets.

A call names exactly one destination, and the decoder dispatches on its
type once:

- ``Discard``: the body is ignored after the status check
- ``ScalarText``: a scalar string result (quotes and newlines trimmed)
- ``ByteSink``: raw bytes streamed into a writer (patches, downloads)
- ``Structured``: JSON decoded into a pydantic model or any type a
  ``TypeAdapter`` understands
"""

from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Generic, Optional, Protocol, TypeVar, Union

from pydantic import TypeAdapter

T = TypeVar("T")


class Writer(Protocol):
    def write(self, data: bytes) -> Any: ...


@dataclass
class Discard:
    pass


@dataclass
class ScalarText:
    value: str = ""


@dataclass
class ByteSink:
    writer: Writer
    bytes_written: int = 0


@dataclass
class Structured(Generic[T]):
    type_: Any
    value: Optional[T] = field(default=None)

    def adapter(self) -> TypeAdapter:
        return _adapter_for(self.type_)


@lru_cache(maxsize=None)
def _adapter_for(type_: Any) -> TypeAdapter:
    return TypeAdapter(type_)


Destination = Union[Discard, ScalarText, ByteSink, Structured]

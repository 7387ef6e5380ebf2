"""Resource handles.

A handle pairs the owning client with a resource identifier and the last
representation fetched from the server. Handles are immutable: ``refresh``
returns a new handle rather than updating in place.

Creation goes through a ``PendingResource`` that knows only the caller's
provisional identifier. Once the server answers, ``bind`` promotes it into
a handle carrying the identifier the server assigned.
"""

import logging
from typing import TYPE_CHECKING, Any, ClassVar, Generic, Optional, Type, TypeVar, Union
from urllib.parse import quote

if TYPE_CHECKING:
    from .base_client import BaseRESTClient

logger = logging.getLogger(__name__)

InfoT = TypeVar("InfoT")
H = TypeVar("H", bound="Resource")


def escape(segment: Union[str, int]) -> str:
    """Percent-encode one path segment, including any "/"."""
    return quote(str(segment), safe="")


def join_path(*segments: str) -> str:
    """Join path segments with single slashes, keeping a trailing "/"."""
    parts = [segment for segment in segments if segment]
    if not parts:
        return ""
    head = [part.strip("/") for part in parts[:-1]]
    return "/".join(head + [parts[-1].lstrip("/")])


class Resource(Generic[InfoT]):
    """Base class for bound resource handles.

    Subclasses set ``collection`` (the path segment naming the collection)
    and ``info_type`` (the model returned by a GET on the resource).
    """

    collection: ClassVar[str] = ""
    info_type: ClassVar[Any] = None

    def __init__(
        self,
        client: "BaseRESTClient",
        identifier: Union[str, int],
        info: Optional[InfoT] = None,
        parent: Optional["Resource"] = None,
    ):
        self._client = client
        self._identifier = str(identifier)
        self._info = info
        self._parent = parent

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._identifier!r})"

    @property
    def client(self) -> "BaseRESTClient":
        return self._client

    @property
    def identifier(self) -> str:
        return self._identifier

    @property
    def info(self) -> Optional[InfoT]:
        return self._info

    @property
    def parent(self) -> Optional["Resource"]:
        return self._parent

    @property
    def path(self) -> str:
        """Endpoint path of this resource, nested under its parent's path."""
        own = join_path(self.collection, escape(self._identifier))
        if self._parent is not None:
            return join_path(self._parent.path, own)
        return own

    def endpoint(self, *segments: str) -> str:
        """Path of a sub-resource. Segments must already be escaped."""
        return join_path(self.path, *segments)

    def with_info(self: H, info: Any) -> H:
        return type(self)(self._client, self._identifier, info, self._parent)

    async def refresh(self: H, options: Any = None) -> H:
        """Fetch the current representation and return a new handle with it."""
        info = await self._client.request_model("GET", self.path, self.info_type, options)
        return self.with_info(info)


class PendingResource(Generic[H]):
    """A resource that has been requested but not yet created."""

    def __init__(
        self,
        client: "BaseRESTClient",
        resource_type: Type[H],
        provisional_id: Union[str, int] = "",
        parent: Optional[Resource] = None,
    ):
        self.client = client
        self.resource_type = resource_type
        self.provisional_id = str(provisional_id)
        self.parent = parent

    def __repr__(self) -> str:
        return f"PendingResource({self.resource_type.__name__}, {self.provisional_id!r})"

    @property
    def path(self) -> str:
        """Endpoint path addressed by the provisional identifier."""
        collection = self.resource_type.collection
        if self.provisional_id:
            own = join_path(collection, escape(self.provisional_id))
        else:
            own = collection + "/"
        if self.parent is not None:
            return f"{self.parent.path}/{own}"
        return own

    def bind(self, identifier: Union[str, int, None], info: Any) -> H:
        """Promote into a bound handle using the server-assigned identifier.

        Falls back to the provisional identifier when the server did not
        return one.
        """
        if identifier is None or identifier == "":
            identifier = self.provisional_id
        handle = self.resource_type(self.client, identifier, info, self.parent)
        logger.debug(f"Bound {self!r} to {handle!r}")
        return handle

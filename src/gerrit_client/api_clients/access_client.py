"""Access rights of projects."""

from typing import Dict, Iterable, Optional, Union

from ..models.access import ListAccessRightsOptions, ProjectAccessInfo
from .base_client import BaseRESTClient


class AccessClient:
    def __init__(self, client: BaseRESTClient):
        self.client = client

    async def list(
        self,
        options: Optional[Union[ListAccessRightsOptions, Iterable[str]]] = None,
    ) -> Dict[str, ProjectAccessInfo]:
        """List access rights keyed by project name.

        Args:
            options: Options model, or an iterable of project names
        """
        if options is not None and not isinstance(options, ListAccessRightsOptions):
            options = ListAccessRightsOptions(project=list(options))
        return await self.client.request_model(
            "GET", "access/", Dict[str, ProjectAccessInfo], options
        )

"""Server-wide configuration endpoints."""

import logging
from typing import Dict, Optional

from ..models.server import ListCapabilitiesOptions, ServerCapabilityInfo, ServerInfo
from .base_client import BaseRESTClient

logger = logging.getLogger(__name__)


class ServerClient:
    """Read-only access to ``config/server/``."""

    def __init__(self, client: BaseRESTClient):
        self.client = client

    async def get_version(self) -> Optional[str]:
        """Return the server version string, e.g. ``3.9.1``."""
        version = await self.client.request_text("GET", "config/server/version")
        logger.debug(f"Server version: {version}")
        return version

    async def get_info(self) -> ServerInfo:
        return await self.client.request_model("GET", "config/server/info", ServerInfo)

    async def list_capabilities(
        self, options: Optional[ListCapabilitiesOptions] = None
    ) -> Dict[str, ServerCapabilityInfo]:
        return await self.client.request_model(
            "GET",
            "config/server/capabilities",
            Dict[str, ServerCapabilityInfo],
            options,
        )

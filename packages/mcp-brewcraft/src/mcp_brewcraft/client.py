"""
REST document store client.
"""

from typing import Any

import httpx

from brewcraft_common.exceptions import ConfigurationError, StorageError

from mcp_brewcraft.config import BrewCraftConfig


class DocumentStoreClient:
    """
    Client for a REST document store.

    Documents live at ``{base_url}/{collection}/{id}``; listing a collection
    is a GET on ``{base_url}/{collection}``.
    """

    def __init__(
        self,
        config: BrewCraftConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the document store client.

        Args:
            config: Configuration with the remote URL and API key
            transport: Optional httpx transport (used to stub the server in tests)

        Raises:
            ConfigurationError: If no remote URL is configured
        """
        if not config.base_url:
            raise ConfigurationError("Remote storage needs BREWCRAFT_REMOTE_URL")

        self.config = config
        self.base_url = config.base_url
        self.transport = transport

        self.headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        if config.remote_api_key:
            self.headers["Authorization"] = f"Bearer {config.remote_api_key}"

    async def _request(
        self,
        method: str,
        endpoint: str,
        **kwargs,
    ) -> Any:
        """Make an API request."""
        url = f"{self.base_url}{endpoint}"

        async with httpx.AsyncClient(transport=self.transport) as client:
            try:
                response = await client.request(
                    method,
                    url,
                    headers=self.headers,
                    timeout=30.0,
                    **kwargs,
                )
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                raise StorageError(
                    f"{method} {endpoint} failed with HTTP {e.response.status_code}",
                    status_code=e.response.status_code,
                ) from e
            except httpx.HTTPError as e:
                raise StorageError(f"{method} {endpoint} failed: {e}") from e

            if response.status_code == 204 or not response.content:
                return None
            return response.json()

    async def list_documents(self, collection: str) -> list[dict[str, Any]]:
        """
        Get every document in a collection.

        Args:
            collection: Collection name

        Returns:
            List of documents (empty when the store returns nothing)
        """
        return await self._request("GET", f"/{collection}") or []

    async def get_document(self, collection: str, document_id: str) -> dict[str, Any] | None:
        """
        Get a document by ID.

        Returns:
            Document or None if not found
        """
        try:
            return await self._request("GET", f"/{collection}/{document_id}")
        except StorageError as e:
            if e.status_code == 404:
                return None
            raise

    async def put_document(
        self,
        collection: str,
        document_id: str,
        document: dict[str, Any],
    ) -> dict[str, Any] | None:
        """Create or replace a document."""
        return await self._request("PUT", f"/{collection}/{document_id}", json=document)

    async def delete_document(self, collection: str, document_id: str) -> None:
        """Delete a document. A missing document is not an error."""
        try:
            await self._request("DELETE", f"/{collection}/{document_id}")
        except StorageError as e:
            if e.status_code != 404:
                raise

"""Linear GraphQL client."""

from typing import Any, Dict, Optional

import httpx

from linear_triggers.core.config import settings
from linear_triggers.core.logging import ContextualLogger, logger


class LinearClient:
    """Sends GraphQL documents to the Linear API.

    One call, one POST. No retries: HTTP failures are raised to the caller.
    """

    def __init__(
        self,
        api_key: str,
        http_client: Optional[httpx.AsyncClient] = None,
        api_url: Optional[str] = None,
        timeout: Optional[float] = None,
        logger: ContextualLogger = logger,
    ):
        """Initialize the client.

        Args:
            api_key: Linear API key, sent as the Authorization header.
            http_client: Shared client to send through, used with its own timeout.
                When None, a short-lived client is opened per request.
            api_url: GraphQL endpoint, defaults to settings.LINEAR_API_URL.
            timeout: Timeout in seconds for the short-lived client, defaults to
                settings.HTTP_TIMEOUT_SECONDS.
            logger: Logger for request errors.
        """
        self.api_key = api_key
        self.api_url = api_url or settings.LINEAR_API_URL
        self.timeout = timeout if timeout is not None else settings.HTTP_TIMEOUT_SECONDS
        self._http_client = http_client
        self.logger = logger

    @property
    def headers(self) -> Dict[str, str]:
        """Request headers, including authentication."""
        return {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "Authorization": self.api_key,
        }

    async def query(self, document: str, variables: Dict[str, Any]) -> Dict[str, Any]:
        """Execute a GraphQL document.

        Args:
            document: GraphQL query document
            variables: Values for the document's variables

        Returns:
            Decoded JSON response body

        Raises:
            httpx.HTTPStatusError: On non-2xx responses
            httpx.RequestError: On transport failures
        """
        payload = {"query": document, "variables": variables}

        if self._http_client is not None:
            response = await self._post(self._http_client, payload)
        else:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await self._post(client, payload)

        body = response.json()
        if isinstance(body, dict) and body.get("errors"):
            self.logger.warning(f"GraphQL errors from Linear: {body['errors']}")
        return body

    async def _post(self, client: httpx.AsyncClient, payload: Dict[str, Any]) -> httpx.Response:
        response = await client.post(self.api_url, headers=self.headers, json=payload)
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            self.logger.error(
                f"Linear API error: HTTP {e.response.status_code} - {e.response.text[:500]}"
            )
            raise
        return response

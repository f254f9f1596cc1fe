"""
Per-client context shared by the resource operations.

The context carries the Keycloak base URL, the current bearer token and the
HTTP transport. It is passed by reference to every resource object; the
token is the only field expected to change over the context's lifetime and
is read fresh for each request.
"""

import logging

import httpx

logger = logging.getLogger(__name__)


class AdminContext:
    """
    Connection state for one Keycloak admin client.

    Token acquisition is the caller's responsibility: set ``access_token``
    (or call ``set_access_token``) whenever the token is rotated.
    """

    def __init__(
        self,
        server_url: str,
        access_token: str | None = None,
        verify_ssl: bool = True,
        timeout: float = 60,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize the admin context.

        Args:
            server_url: Base URL of the Keycloak server
            access_token: Bearer token for the admin API
            verify_ssl: Whether to verify SSL certificates
            timeout: Request timeout in seconds
            http_client: Pre-built httpx client; owned by the caller if given
        """
        self.server_url = server_url.rstrip("/")
        self.access_token = access_token
        self.verify_ssl = verify_ssl
        self.timeout = timeout

        self._http_client = http_client
        self._owns_http_client = http_client is None

        logger.debug(f"Initialized admin context for {self.server_url}")

    @property
    def base_url(self) -> str:
        return self.server_url

    def set_access_token(self, access_token: str | None) -> None:
        """Replace the bearer token used by subsequent requests."""
        self.access_token = access_token

    def get_http_client(self) -> httpx.AsyncClient:
        """Get or create the httpx client (lazy initialization)."""
        if self._http_client is None or self._http_client.is_closed:
            self._http_client = httpx.AsyncClient(
                verify=self.verify_ssl,
                timeout=httpx.Timeout(self.timeout),
                follow_redirects=False,
            )
            self._owns_http_client = True
            logger.debug(f"Created httpx client for {self.server_url}")
        return self._http_client

    async def close(self) -> None:
        """Close the httpx client if this context created it."""
        if self._owns_http_client and self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    async def __aenter__(self) -> "AdminContext":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

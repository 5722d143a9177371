import logging

import httpx

from ..config import RuntimeConfig

logger = logging.getLogger(__name__)


class HttpClientFactory:
    """
    HTTP Client Factory for Runtime API transports.
    """

    def __init__(self, config: RuntimeConfig):
        self.config = config

    def create_timeout(self) -> httpx.Timeout:
        return httpx.Timeout(
            self.config.RUNTIME_REQUEST_TIMEOUT,
            connect=self.config.RUNTIME_CONNECT_TIMEOUT,
        )

    def create_async_client(self, **kwargs) -> httpx.AsyncClient:
        """
        Create an httpx.AsyncClient bound to the Runtime API base URL.

        Args:
            **kwargs: Additional arguments for httpx.AsyncClient
        """
        kwargs.setdefault("base_url", self.config.runtime_api_base_url)
        kwargs.setdefault("timeout", self.create_timeout())

        # One request in flight per worker; a single kept-alive connection is enough.
        if "limits" not in kwargs:
            kwargs["limits"] = httpx.Limits(max_keepalive_connections=1, max_connections=1)
        # The Runtime API is local; never route it through host HTTP(S)_PROXY settings.
        kwargs.setdefault("trust_env", False)

        logger.debug("Creating Runtime API client for %s", kwargs["base_url"])
        return httpx.AsyncClient(**kwargs)

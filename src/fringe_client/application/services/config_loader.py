import httpx
import logging

from pydantic import ValidationError
from typing import (
    Any,
    Callable
)

from fringe_client.domain.errors import ConfigError
from fringe_client.domain.models.config import (
    Config,
    RemoteConfig
)
from fringe_client.infra.client.api_client import ApiClient
from fringe_client.utils.urls import join_url

logger = logging.getLogger("fringe_client.config")

ConfigCallback = Callable[[bool, Config], Any]


class ConfigLoader:
    """Fetches the client configuration once, before the application starts.

    There is a single network attempt per loader. Build a new loader to retry.
    """

    def __init__(
        self,
        api_root_url: str,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float | None = None
    ):
        self.config = Config(api_root_url=api_root_url)

        self.__transport = transport
        self.__timeout = timeout
        self.__attempted = False

    def config_url(self) -> str:
        return join_url(self.config.api_root_url, "config/")

    async def fetch_config(self, callback: ConfigCallback | None = None) -> bool:
        if self.__attempted:
            logger.warning("Configuration from %s was already requested; not fetching again", self.config_url())
            success = self.config.state.loaded
        else:
            self.__attempted = True
            success = await self.__fetch()

        if callback is not None:
            callback(success, self.config)

        return success

    async def __fetch(self) -> bool:
        url = self.config_url()
        logger.debug("Getting client configuration from %s", url)

        client = ApiClient(transport=self.__transport, timeout=self.__timeout)

        try:
            data = await client.get_json(url)
        except (httpx.HTTPError, ValueError) as e:
            self.config.state.mark_failed(e)
            logger.warning("Config failed to load from %s: %s", url, e)
            return False
        finally:
            await client.aclose()

        try:
            remote = RemoteConfig.model_validate(data)
        except ValidationError as e:
            error = ConfigError("Missing required configuration from API")
            error.__cause__ = e

            self.config.state.mark_failed(error)
            logger.warning("Invalid configuration from %s: missing `google_client_id`", url)
            return False

        self.config.google_client_id = remote.google_client_id
        self.config.state.mark_loaded()

        logger.debug("Loaded config from %s", url)

        return True

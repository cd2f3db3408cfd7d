import httpx
import logging

from fringe_client.application.services.session_manager import SessionManager
from fringe_client.application.services.user_service import UserService
from fringe_client.config.settings import Settings
from fringe_client.domain.models.config import Config
from fringe_client.domain.repository.key_value_storage import KeyValueStorage
from fringe_client.utils.provider import (
    get_config_loader,
    get_session_manager,
    get_settings,
    get_user_service
)

logger = logging.getLogger("fringe_client")


class Application:
    """Everything the UI layer needs, wired together once the configuration is known."""

    def __init__(self, config: Config, session: SessionManager, users: UserService):
        self.config = config
        self.session = session
        self.users = users

    @property
    def ready(self) -> bool:
        return self.config.state.loaded

    async def aclose(self) -> None:
        await self.session.aclose()


async def bootstrap(
    settings: Settings | None = None,
    storage: KeyValueStorage | None = None,
    transport: httpx.AsyncBaseTransport | None = None
) -> Application:
    """Load the remote configuration, then wire the session to the same API root.

    The session is built even when the configuration failed; callers check
    ``ready`` and decide whether to show a fatal screen or retry.
    """
    settings = settings or get_settings()

    loader = get_config_loader(settings, transport=transport)

    if not await loader.fetch_config():
        logger.error("Client configuration unavailable: %s", loader.config.state.error)

    session = get_session_manager(settings, storage=storage, transport=transport)

    return Application(loader.config, session, get_user_service(session))

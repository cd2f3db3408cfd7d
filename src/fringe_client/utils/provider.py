import httpx

from functools import lru_cache

from fringe_client.application.services.config_loader import ConfigLoader
from fringe_client.application.services.session_manager import SessionManager
from fringe_client.application.services.user_service import UserService
from fringe_client.config.settings import Settings
from fringe_client.domain.repository.key_value_storage import KeyValueStorage
from fringe_client.infra.persistence.session_store import SessionStore
from fringe_client.infra.persistence.storage_file import FileStorage
from fringe_client.infra.persistence.storage_memory import MemoryStorage
from fringe_client.utils.clock import (
    Clock,
    now_ms
)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


def get_storage(settings: Settings) -> KeyValueStorage:
    if settings.SESSION_BACKEND == "memory":
        return MemoryStorage()

    return FileStorage(settings.SESSION_PATH)


def get_config_loader(settings: Settings, transport: httpx.AsyncBaseTransport | None = None) -> ConfigLoader:
    return ConfigLoader(settings.API_ROOT_URL, transport=transport, timeout=settings.HTTP_TIMEOUT)


def get_session_manager(
    settings: Settings,
    storage: KeyValueStorage | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
    clock: Clock = now_ms
) -> SessionManager:
    store = SessionStore(storage if storage is not None else get_storage(settings), clock=clock)

    return SessionManager(
        store,
        settings.API_ROOT_URL,
        transport=transport,
        timeout=settings.HTTP_TIMEOUT,
        clock=clock
    )


def get_user_service(session: SessionManager) -> UserService:
    return UserService(session)

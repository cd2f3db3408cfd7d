import httpx
import logging

from pydantic import ValidationError
from typing import (
    Any,
    Callable
)

from fringe_client.domain.models.auth_response import AuthResponse
from fringe_client.domain.models.credential import Credential
from fringe_client.domain.models.role import Role
from fringe_client.infra.client.api_client import ApiClient
from fringe_client.infra.client.session_auth import SessionAuth
from fringe_client.infra.persistence.session_store import SessionStore
from fringe_client.utils.clock import (
    Clock,
    now_ms
)
from fringe_client.utils.urls import join_url

logger = logging.getLogger("fringe_client.session")

LoginCallback = Callable[[bool, Credential | None], Any]
LogoutCallback = Callable[[], Any]


class SessionManager:
    """Holds the current credential and the HTTP client that carries it.

    Requests made through ``client`` to ``api_root_url`` are stamped with the
    credential's Authorization header while the session is valid.
    """

    def __init__(
        self,
        store: SessionStore,
        api_root_url: str,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float | None = None,
        clock: Clock = now_ms
    ):
        self.__store = store
        self.__clock = clock
        self.api_root_url = api_root_url

        self.__credential: Credential | None = store.load()

        self.client = ApiClient(auth=SessionAuth(self), transport=transport, timeout=timeout)

    @property
    def current_credential(self) -> Credential | None:
        if self.__credential is not None and self.__credential.is_expired(self.__clock()):
            logger.info("Session credential expired")
            self.current_credential = None

        return self.__credential

    @current_credential.setter
    def current_credential(self, credential: Credential | None) -> None:
        if credential is None or credential.is_expired(self.__clock()):
            logger.debug("Removing credential from storage")
            self.__store.clear()
            self.__credential = None
            return

        self.__store.save(credential)
        self.__credential = credential

    @property
    def is_authenticated(self) -> bool:
        return self.current_credential is not None

    @property
    def role(self) -> Role:
        credential = self.current_credential

        return credential.role if credential is not None else Role.UNKNOWN

    def login_url(self) -> str:
        return join_url(self.api_root_url, "auth/")

    async def login(
        self,
        exchange_token: str,
        exchange_token_type: str,
        callback: LoginCallback | None = None
    ) -> tuple[bool, Credential | None]:
        """Trade a provider token for a session credential.

        A well-formed answer reports success even when the computed expiry is
        already past; such a credential is returned to the caller but never
        becomes ``current_credential``.
        """
        success, credential = await self.__exchange(exchange_token, exchange_token_type)

        if callback is not None:
            callback(success, credential)

        return success, credential

    def logout(self, callback: LogoutCallback | None = None) -> None:
        self.current_credential = None

        if callback is not None:
            callback()

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self) -> "SessionManager":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def __exchange(self, exchange_token: str, exchange_token_type: str) -> tuple[bool, Credential | None]:
        url = self.login_url()

        try:
            data = await self.client.post_json(url, {"access_token": exchange_token, "token_type": exchange_token_type})
        except httpx.HTTPError as e:
            logger.warning("Unable to authenticate to %s: %s", url, e)
            return False, None
        except ValueError as e:
            logger.warning("Unreadable response from authentication API at %s: %s", url, e)
            return False, None

        try:
            response = AuthResponse.model_validate(data)
        except ValidationError:
            logger.warning("Invalid response from authentication API at %s; missing token or token_type", url)
            return False, None

        credential = Credential(
            token_type=response.token_type,
            token=response.token,
            expires_at=self.__clock() + response.duration_ms,
            role=response.role,
        )
        self.current_credential = credential

        logger.debug("Authentication successful (role: %s)", credential.role.value)

        return True, credential

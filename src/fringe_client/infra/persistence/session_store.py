import logging

from fringe_client.domain.models.credential import Credential
from fringe_client.domain.models.role import Role
from fringe_client.domain.repository.key_value_storage import KeyValueStorage
from fringe_client.utils.clock import (
    Clock,
    now_ms
)

logger = logging.getLogger("fringe_client.session_store")

TOKEN_KEY            = "token"
TOKEN_TYPE_KEY       = "token_type"
TOKEN_EXPIRES_AT_KEY = "token_expires_at"
TOKEN_ROLE_KEY       = "token_role"

SESSION_KEYS = (TOKEN_KEY, TOKEN_TYPE_KEY, TOKEN_EXPIRES_AT_KEY, TOKEN_ROLE_KEY)


class SessionStore:
    """Persists a Credential and never hands back one that is already expired."""

    def __init__(self, storage: KeyValueStorage, clock: Clock = now_ms):
        self.storage = storage
        self.__clock = clock

    def load(self) -> Credential | None:
        token = self.storage.get_item(TOKEN_KEY)
        token_type = self.storage.get_item(TOKEN_TYPE_KEY)
        expires_at = self.storage.get_item(TOKEN_EXPIRES_AT_KEY)

        if not token or not token_type or not expires_at:
            return None

        try:
            expiry = int(expires_at)
        except ValueError:
            logger.warning("Stored token expiry %r is not an epoch timestamp; clearing session", expires_at)
            self.clear()
            return None

        # Sessions saved before roles were tracked have no role entry.
        credential = Credential(
            token_type=token_type,
            token=token,
            expires_at=expiry,
            role=Role.from_string(self.storage.get_item(TOKEN_ROLE_KEY)),
        )

        if credential.is_expired(self.__clock()):
            logger.debug("Stored credential is expired; clearing session")
            self.clear()
            return None

        return credential

    def save(self, credential: Credential | None) -> None:
        if credential is None or credential.is_expired(self.__clock()):
            self.clear()
            return

        self.storage.set_items({
            TOKEN_TYPE_KEY: credential.token_type,
            TOKEN_KEY: credential.token,
            TOKEN_EXPIRES_AT_KEY: str(credential.expires_at),
            TOKEN_ROLE_KEY: credential.role.value,
        })

    def clear(self) -> None:
        self.storage.remove_items(SESSION_KEYS)

import httpx
import logging

from typing import (
    Any,
    Callable
)
from urllib.parse import quote

from fringe_client.application.services.session_manager import SessionManager
from fringe_client.domain.models.user import UserDirectoryRecord
from fringe_client.utils.urls import join_url

logger = logging.getLogger("fringe_client.users")

RESULT_SUCCESS = "success"
RESULT_FAILED  = "failed"


class UserService:
    """Adapters over the user directory endpoints.

    Every call goes through the session's client, which adds the Authorization
    header. Failures become ``None``, ``[]`` or ``"failed"``; nothing is raised.
    """

    def __init__(self, session: SessionManager):
        self.__session = session

    def users_url(self, *parts: str) -> str:
        url = join_url(self.__session.api_root_url, "users/")

        for part in parts:
            url += quote(part, safe="@") + "/"

        return url

    async def me(self, callback: Callable[[UserDirectoryRecord | None], Any] | None = None) -> UserDirectoryRecord | None:
        user = await self.__get_user(self.users_url("me"))

        return self.__notify(callback, user)

    async def renew_my_password(self, callback: Callable[[UserDirectoryRecord | None], Any] | None = None) -> UserDirectoryRecord | None:
        user = await self.__get_user(self.users_url("me", "renew"), require_password=True)

        return self.__notify(callback, user)

    async def renew_password(self, email: str, callback: Callable[[UserDirectoryRecord | None], Any] | None = None) -> UserDirectoryRecord | None:
        user = await self.__get_user(self.users_url(email, "renew"), require_password=True)

        return self.__notify(callback, user)

    async def find_all(
        self,
        query: str = "",
        page: int = 1,
        per_page: int = 20,
        callback: Callable[[list[UserDirectoryRecord]], Any] | None = None
    ) -> list[UserDirectoryRecord]:
        url = self.users_url()
        users: list[UserDirectoryRecord] = []

        try:
            data = await self.__session.client.get_json(url, params={"search": query, "page": page, "per_page": per_page})
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("Unable to list users from %s: %s", url, e)
            return self.__notify(callback, users)

        if not isinstance(data, list):
            logger.warning("Invalid user list response from %s", url)
            return self.__notify(callback, users)

        for entry in data:
            user = UserDirectoryRecord.from_payload(entry)

            if user is None:
                logger.warning("Skipping invalid user entry in list from %s", url)
                continue

            users.append(user)

        return self.__notify(callback, users)

    async def create(
        self,
        email: str,
        name: str,
        callback: Callable[[str, UserDirectoryRecord | None], Any] | None = None
    ) -> tuple[str, UserDirectoryRecord | None]:
        url = self.users_url()
        result, user = RESULT_FAILED, None

        try:
            data = await self.__session.client.post_json(url, {"email": email, "name": name})
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("Unable to create user %s at %s: %s", email, url, e)
        else:
            result = self.__result_of(data)

            if result == RESULT_SUCCESS:
                user = UserDirectoryRecord.from_payload(data.get("user"))

        if callback is not None:
            callback(result, user)

        return result, user

    async def delete(self, email: str, callback: Callable[[str], Any] | None = None) -> str:
        url = self.users_url(email)

        try:
            data = await self.__session.client.delete_json(url)
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("Unable to delete user %s at %s: %s", email, url, e)
            return self.__notify(callback, RESULT_FAILED)

        return self.__notify(callback, self.__result_of(data))

    async def __get_user(self, url: str, require_password: bool = False) -> UserDirectoryRecord | None:
        try:
            data = await self.__session.client.get_json(url)
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("Unable to retrieve user from %s: %s", url, e)
            return None

        user = UserDirectoryRecord.from_payload(data)

        if user is None:
            logger.warning("Invalid user response from user API at %s", url)
            return None

        if require_password and user.password is None:
            logger.warning("No password provided in password renew API at %s", url)
            return None

        return user

    @staticmethod
    def __result_of(data: Any) -> str:
        if isinstance(data, dict) and isinstance(data.get("result"), str):
            return data["result"]

        return RESULT_FAILED

    @staticmethod
    def __notify(callback: Callable[[Any], Any] | None, value: Any) -> Any:
        if callback is not None:
            callback(value)

        return value

import httpx
import logging

from typing import (
    Generator,
    TYPE_CHECKING
)

if TYPE_CHECKING:
    from fringe_client.application.services.session_manager import SessionManager

logger = logging.getLogger("fringe_client.session_auth")


def is_under_root(url: httpx.URL, api_root_url: str) -> bool:
    """True when ``url`` targets ``api_root_url`` or a path below it.

    Both sides go through httpx's normalisation (lowercase host, default port
    dropped, percent-encoded path). A root without scheme and host matches nothing.
    """
    if not api_root_url:
        return False

    root = httpx.URL(api_root_url)

    if not root.is_absolute_url:
        return False

    return (
        url.scheme == root.scheme
        and url.host == root.host
        and url.port == root.port
        and url.raw_path.startswith(root.raw_path)
    )


class SessionAuth(httpx.Auth):
    """Stamps requests aimed at the session's API root with its Authorization header.

    Requests to any other origin go out untouched so the credential never
    leaks to third parties.
    """

    def __init__(self, session: "SessionManager"):
        self.__session = session

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        if is_under_root(request.url, self.__session.api_root_url):
            credential = self.__session.current_credential

            if credential is not None:
                logger.debug("Adding Authorization header to request: %s", request.url)
                request.headers["Authorization"] = credential.authorization

        yield request

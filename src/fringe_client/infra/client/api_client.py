import httpx

from typing import Any


class ApiClient:
    """JSON over HTTP against the directory API.

    Transport failures and non-2xx answers raise ``httpx.HTTPError``; a body that
    is not JSON raises ``ValueError``. Callers turn both into their own result.
    """

    def __init__(
        self,
        auth: httpx.Auth | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float | None = None
    ):
        self.http = httpx.AsyncClient(auth=auth, transport=transport, timeout=timeout)

    async def get_json(self, url: str, params: dict[str, Any] | None = None) -> Any:
        r = await self.http.get(url, params=params)

        return self.__decode(r)

    async def post_json(self, url: str, payload: dict[str, Any]) -> Any:
        r = await self.http.post(url, json=payload)

        return self.__decode(r)

    async def delete_json(self, url: str) -> Any:
        r = await self.http.delete(url)

        return self.__decode(r)

    async def aclose(self) -> None:
        await self.http.aclose()

    @staticmethod
    def __decode(r: httpx.Response) -> Any:
        r.raise_for_status()

        return r.json()

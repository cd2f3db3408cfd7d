"""Tests for ConfigLoader against the fake directory API."""

from __future__ import annotations

import httpx
import pytest

from fake_api import API_ROOT, FakeAPIState, create_transport, failing_transport
from fringe_client.application.services.config_loader import ConfigLoader
from fringe_client.domain.errors import ConfigError
from fringe_client.domain.models.config import Config


class _Recorder:
    def __init__(self) -> None:
        self.calls: list[tuple[bool, Config]] = []

    def __call__(self, success: bool, config: Config) -> None:
        self.calls.append((success, config))


class TestConfigUrl:
    @pytest.mark.parametrize("root", ["/api", "/api/"])
    def test_no_double_or_missing_slash(self, root: str) -> None:
        assert ConfigLoader(root).config_url() == "/api/config/"

    def test_absolute_root(self) -> None:
        assert ConfigLoader("https://fringe.example/api").config_url() == "https://fringe.example/api/config/"


class TestFetchConfig:
    @pytest.mark.asyncio
    async def test_success_populates_config(self, transport: httpx.AsyncBaseTransport) -> None:
        loader = ConfigLoader(API_ROOT, transport=transport)
        recorder = _Recorder()

        assert await loader.fetch_config(recorder) is True

        assert recorder.calls == [(True, loader.config)]
        assert loader.config.state.loaded is True
        assert loader.config.state.error is None
        assert loader.config.google_client_id == "client-123.apps.example"

    @pytest.mark.asyncio
    async def test_extra_fields_are_ignored(self, api_state: FakeAPIState) -> None:
        api_state.config_payload = {"google_client_id": "cid", "theme": "dark"}
        loader = ConfigLoader(API_ROOT, transport=create_transport(api_state))

        assert await loader.fetch_config() is True
        assert loader.config.google_client_id == "cid"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", [{}, {"google_client_id": ""}, {"google_client_id": None}, ["cid"]])
    async def test_missing_client_id_is_a_logical_failure(self, api_state: FakeAPIState, payload) -> None:
        api_state.config_payload = payload
        loader = ConfigLoader(API_ROOT, transport=create_transport(api_state))
        recorder = _Recorder()

        assert await loader.fetch_config(recorder) is False

        assert recorder.calls == [(False, loader.config)]
        assert loader.config.state.loaded is False
        assert isinstance(loader.config.state.error, ConfigError)
        assert loader.config.google_client_id == ""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [400, 404, 500])
    async def test_non_2xx_is_a_transport_failure(self, api_state: FakeAPIState, status: int) -> None:
        api_state.config_status = status
        loader = ConfigLoader(API_ROOT, transport=create_transport(api_state))
        recorder = _Recorder()

        assert await loader.fetch_config(recorder) is False

        assert recorder.calls == [(False, loader.config)]
        assert loader.config.state.loaded is False
        assert isinstance(loader.config.state.error, httpx.HTTPStatusError)

    @pytest.mark.asyncio
    async def test_network_error_is_a_transport_failure(self) -> None:
        loader = ConfigLoader(API_ROOT, transport=failing_transport())

        assert await loader.fetch_config() is False
        assert isinstance(loader.config.state.error, httpx.ConnectError)
        assert loader.config.state.loaded is False

    @pytest.mark.asyncio
    async def test_non_json_body_fails(self, api_state: FakeAPIState) -> None:
        api_state.config_plain_text = True
        loader = ConfigLoader(API_ROOT, transport=create_transport(api_state))

        assert await loader.fetch_config() is False
        assert isinstance(loader.config.state.error, ValueError)

    @pytest.mark.asyncio
    async def test_second_call_does_not_refetch(self, api_state: FakeAPIState) -> None:
        loader = ConfigLoader(API_ROOT, transport=create_transport(api_state))
        await loader.fetch_config()

        api_state.config_payload = {"google_client_id": "changed"}
        recorder = _Recorder()

        assert await loader.fetch_config(recorder) is True
        assert recorder.calls == [(True, loader.config)]
        assert loader.config.google_client_id == "client-123.apps.example"
        assert [path for _m, path, _a in api_state.requests] == ["/api/config/"]

    @pytest.mark.asyncio
    async def test_second_call_after_failure_reports_failure(self) -> None:
        loader = ConfigLoader(API_ROOT, transport=failing_transport())
        await loader.fetch_config()

        assert await loader.fetch_config() is False

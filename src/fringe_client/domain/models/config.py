from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StringConstraints
)
from typing import Annotated


class ConfigState(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    loaded: bool = False
    error : Exception | None = None

    def mark_loaded(self) -> None:
        self.loaded = True
        self.error = None

    def mark_failed(self, error: Exception) -> None:
        self.loaded = False
        self.error = error


class Config(BaseModel):
    api_root_url    : str
    google_client_id: str = ""
    state           : ConfigState = Field(default_factory=ConfigState)


class RemoteConfig(BaseModel):
    """Minimal keys required for the remote configuration to be deemed valid."""

    model_config = ConfigDict(extra="ignore")

    google_client_id: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

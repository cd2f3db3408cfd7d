from pathlib import Path
from pydantic import StringConstraints
from pydantic_settings import (
    BaseSettings,
    SettingsConfigDict
)
from typing import (
    Annotated,
    Literal
)

ROOT = Path(__file__).resolve().parents[3]
ENV_PATH = ROOT / ".env"
SESSION_PATH = ROOT / ".session.json"


class Settings(BaseSettings):
    API_ROOT_URL   : Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)] = "http://localhost:8080/api/"

    SESSION_BACKEND: Literal["file", "memory"] = "file"
    SESSION_PATH   : str = str(SESSION_PATH)

    # None disables httpx timeouts: a hung request never completes.
    HTTP_TIMEOUT   : float | None = None

    model_config = SettingsConfigDict(
        env_prefix="FRINGE_",
        env_file=str(ENV_PATH),
        env_file_encoding="utf-8",
        extra="ignore",
    )

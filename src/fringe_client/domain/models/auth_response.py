import math

from pydantic import (
    BaseModel,
    ConfigDict,
    field_validator
)
from typing import Any

from fringe_client.domain.models.role import Role


class AuthResponse(BaseModel):
    """Payload returned by the login endpoint in exchange for a provider token."""

    model_config = ConfigDict(extra="ignore")

    token     : str
    token_type: str
    duration  : float = 0.0
    role      : Role = Role.UNKNOWN

    @field_validator("duration", mode="before")
    @classmethod
    def duration_or_zero(cls, v: Any) -> float:
        # A duration we cannot read yields a credential that is already expired.
        if isinstance(v, bool):
            return 0.0

        try:
            seconds = float(v)
        except (TypeError, ValueError):
            return 0.0

        # Checked in milliseconds: a finite duration can still overflow once scaled.
        return seconds if math.isfinite(seconds * 1000) else 0.0

    @field_validator("role", mode="before")
    @classmethod
    def role_from_string(cls, v: Any) -> Role:
        return Role.from_string(v)

    @property
    def duration_ms(self) -> int:
        return int(self.duration * 1000)

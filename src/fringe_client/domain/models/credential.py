from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator
)
from typing import Any

from fringe_client.domain.models.role import Role
from fringe_client.utils.clock import now_ms


class Credential(BaseModel):
    model_config = ConfigDict(frozen=True)

    token_type: str
    token     : str = Field(repr=False)
    expires_at: int
    role      : Role = Role.UNKNOWN

    @field_validator("role", mode="before")
    @classmethod
    def role_from_string(cls, v: Any) -> Role:
        return Role.from_string(v)

    @property
    def authorization(self) -> str:
        return f"{self.token_type} {self.token}"

    def is_expired(self, now: int | None = None) -> bool:
        if now is None:
            now = now_ms()

        return self.expires_at - now <= 0

    def is_valid(self, now: int | None = None) -> bool:
        return not self.is_expired(now)

    def with_role(self, role: Role | str) -> "Credential":
        return self.model_copy(update={"role": Role.from_string(role)})

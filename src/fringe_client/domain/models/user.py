import math

from datetime import (
    datetime,
    timezone
)
from pydantic import (
    BaseModel,
    ConfigDict,
    ValidationError,
    field_validator
)
from typing import Any

EPOCH = datetime.fromtimestamp(0, timezone.utc)
SECONDS_IN_ONE_DAY = 24 * 60 * 60


class UserDirectoryRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")

    email              : str
    name               : str = ""
    picture            : str = ""
    last_seen_at       : datetime
    password_updated_at: datetime = EPOCH
    # Only present right after a create or renew; never stored by the client.
    password           : str | None = None

    @field_validator("password", mode="before")
    @classmethod
    def empty_password_is_none(cls, v: Any) -> str | None:
        if isinstance(v, str) and len(v) > 0:
            return v

        return None

    @classmethod
    def from_payload(cls, data: Any) -> "UserDirectoryRecord | None":
        if not isinstance(data, dict) or "email" not in data or "last_seen_at" not in data:
            return None

        try:
            return cls.model_validate(data)
        except ValidationError:
            return None

    def password_age_in_days(self, now: datetime | None = None) -> int:
        now = now or datetime.now(timezone.utc)
        age = (now - self.password_updated_at).total_seconds()

        return math.ceil(age / SECONDS_IN_ONE_DAY)

    def last_seen(self) -> str:
        return f"{self.last_seen_at:%a %b %d %Y} at {self.last_seen_at:%H:%M:%S}"

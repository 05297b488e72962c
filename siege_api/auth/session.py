from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from siege_api.models.enums import PlatformType

_FRACTION = re.compile(r"(\.\d+)")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class Session(BaseModel):
    """A ticket issued by ``/v3/profiles/sessions``.

    Instances are never mutated; a refresh swaps in a whole new Session.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    ticket: str = Field(repr=False)
    session_id: UUID
    space_id: UUID
    expiration: datetime
    server_time: datetime
    profile_id: UUID
    user_id: UUID
    platform_type: PlatformType
    name_on_platform: str | None = None
    environment: str | None = None
    session_key: str | None = Field(default=None, repr=False)

    @field_validator("expiration", "server_time", mode="before")
    @classmethod
    def _trim_fraction(cls, value):
        # Ubisoft sends seven fractional digits; datetime holds six
        if isinstance(value, str):
            return _FRACTION.sub(lambda m: m.group(1)[:7], value)
        return value

    @field_validator("expiration", "server_time")
    @classmethod
    def _normalize_utc(cls, value: datetime) -> datetime:
        return _as_utc(value)

    def is_expired(self, now: datetime | None = None) -> bool:
        return is_expired(self, now)

    def expires_in(self, now: datetime | None = None) -> timedelta:
        current = utc_now() if now is None else _as_utc(now)
        return self.expiration - current

    def expiration_header(self) -> str:
        return self.expiration.strftime("%Y-%m-%dT%H:%M:%S.%fZ")


def is_expired(session: Session, now: datetime | None = None) -> bool:
    current = utc_now() if now is None else _as_utc(now)
    return current >= session.expiration

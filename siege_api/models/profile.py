from __future__ import annotations

from uuid import UUID

from siege_api.models.base import ApiModel
from siege_api.models.enums import PlatformType


class PlayerProfile(ApiModel):
    profile_id: UUID
    user_id: UUID | None = None
    platform_type: PlatformType
    id_on_platform: str | None = None
    name_on_platform: str


class PlayerSearchResponse(ApiModel):
    profiles: list[PlayerProfile]

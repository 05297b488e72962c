from __future__ import annotations

from enum import Enum
from uuid import UUID

from pydantic import Field, field_validator

from siege_api.models.base import ApiModel


class ServiceState(str, Enum):
    """Known statuses. Ubisoft does not document the full list."""

    ONLINE = "Online"
    DEGRADED = "Degraded"
    INTERRUPTED = "Interrupted"
    MAINTENANCE = "Maintenance"


class GameStatus(ApiModel):
    # the feed really does carry a trailing space in this key
    app_id: UUID | None = Field(default=None, alias="AppID ")
    space_id: UUID | None = Field(default=None, alias="SpaceID")
    category: str = Field(alias="Category")
    name: str = Field(alias="Name")
    platform: str = Field(alias="Platform")
    status: ServiceState | str = Field(alias="Status", union_mode="left_to_right")
    maintenance: bool | None = Field(default=None, alias="Maintenance")
    impacted_features: list[str] = Field(default_factory=list, alias="ImpactedFeatures")

    @field_validator("app_id", "space_id", mode="before")
    @classmethod
    def _lenient_uuid(cls, value):
        if value in (None, ""):
            return None
        try:
            return UUID(str(value))
        except ValueError:
            return None

    @property
    def is_online(self) -> bool:
        return self.status == ServiceState.ONLINE

from __future__ import annotations

from datetime import datetime, timedelta
from uuid import UUID

from pydantic import Field, field_validator

from siege_api.models.base import ApiModel


class Playtime(ApiModel):
    # Ubisoft sends the number of seconds as a string
    duration: timedelta = Field(alias="value")
    start_date: datetime
    # Last time the stat moved, i.e. the last time the player played.
    last_modified: datetime

    @field_validator("duration", mode="before")
    @classmethod
    def _seconds_to_duration(cls, value):
        if isinstance(value, timedelta):
            return value
        try:
            return timedelta(seconds=int(value))
        except (TypeError, ValueError) as exc:
            raise ValueError(f"cannot convert {value!r} to a number of seconds") from exc


class PlaytimeStatistics(ApiModel):
    pvp_time_played: Playtime = Field(alias="PPvPTimePlayed")
    pve_time_played: Playtime = Field(alias="PPvETimePlayed")
    total_time_played: Playtime = Field(alias="PTotalTimePlayed")
    clearance_level: Playtime = Field(alias="PClearanceLevel")


class PlaytimeProfile(ApiModel):
    profile_id: UUID
    statistics: PlaytimeStatistics = Field(alias="stats")


class PlaytimeResponse(ApiModel):
    profiles: list[PlaytimeProfile]

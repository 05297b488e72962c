"""Models for the ranked v2 ``full_profiles`` endpoint.

This endpoint only carries the current season; earlier seasons are not
queryable through it.
"""

from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from siege_api.models.base import ratio
from siege_api.models.enums import GameMode, PlatformFamily, Season


class _SnakeModel(BaseModel):
    # full_profiles is the one endpoint that answers in snake_case
    model_config = ConfigDict(frozen=True, extra="ignore")


class Profile(_SnakeModel):
    play_type: str = Field(alias="board_id")
    id: UUID
    max_rank: int
    max_rank_points: int
    rank: int = 0
    rank_points: int = 0
    platform_family: PlatformFamily
    season_id: int
    top_rank_position: int

    @property
    def season(self) -> Season:
        return Season.from_number(self.season_id)


class MatchOutcomes(_SnakeModel):
    abandons: int
    losses: int
    wins: int

    def total_matches(self) -> int:
        """Matches won or lost. Abandoned matches are not counted."""
        return self.wins + self.losses

    def total_matches_with_abandons(self) -> int:
        return self.wins + self.losses + self.abandons

    def win_rate(self) -> float:
        return ratio(self.wins, self.total_matches())

    def win_rate_with_abandons(self) -> float:
        return ratio(self.wins, self.total_matches_with_abandons())


class SeasonStatistics(_SnakeModel):
    deaths: int
    kills: int
    match_outcomes: MatchOutcomes

    def kd(self) -> float:
        return ratio(self.kills, self.deaths)


class FullProfile(_SnakeModel):
    profile: Profile
    season_statistics: SeasonStatistics


class Board(_SnakeModel):
    board_id: str
    full_profiles: list[FullProfile]


class PlatformFamilyProfiles(_SnakeModel):
    platform_family: PlatformFamily
    board_ids_full_profiles: list[Board]


class RankedV2Response(_SnakeModel):
    platform_families_full_profiles: list[PlatformFamilyProfiles]

    def profiles(self) -> list[FullProfile]:
        """First profile of every board of the first platform family."""
        if not self.platform_families_full_profiles:
            return []
        family = self.platform_families_full_profiles[0]
        return [board.full_profiles[0] for board in family.board_ids_full_profiles if board.full_profiles]

    def get_board(self, play_type: GameMode | str) -> FullProfile | None:
        for profile in self.profiles():
            if profile.profile.play_type == play_type:
                return profile
        return None

"""Models for the ``/v1/profiles/{id}/playerstats`` aggregation endpoint.

Every aggregation kind answers with the same envelope; the individual
entries are told apart by their ``statsType``.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Annotated, Literal, Union
from uuid import UUID

from pydantic import BeforeValidator, Field, field_validator

from siege_api.models.base import ApiModel, ratio
from siege_api.models.enums import GameMode, Season, SideOrAll


def _nested_value(value):
    # ratios come wrapped as {"value": 0.42, "p": 0.0}
    if isinstance(value, dict):
        return value.get("value")
    return value


def _seconds(value):
    if isinstance(value, timedelta):
        return value
    return timedelta(milliseconds=round(float(value) * 1000))


NestedFloat = Annotated[float, BeforeValidator(_nested_value)]
Seconds = Annotated[timedelta, BeforeValidator(_seconds)]


class Statistics(ApiModel):
    """Counters shared by operator, map and seasonal entries."""

    # `Generalized` for operators and maps, `Seasonal` for summaries
    statistic_type: str = Field(alias="type")
    matches_played: int
    rounds_played: int
    minutes_played: int
    matches_won: int
    matches_lost: int
    rounds_won: int
    rounds_lost: int
    kills: int
    assists: int
    deaths: int = Field(alias="death")
    headshots: int
    melee_kills: int
    team_kills: int
    opening_kills: int
    opening_deaths: int
    trades: int
    opening_kill_trades: int
    opening_death_trades: int
    revives: int
    distance_travelled: int
    win_loss_ratio: float
    kill_death_ratio: NestedFloat
    headshot_accuracy: NestedFloat
    kills_per_round: NestedFloat
    rounds_with_a_kill: NestedFloat
    rounds_with_multi_kill: NestedFloat
    rounds_with_opening_kill: NestedFloat
    rounds_with_opening_death: NestedFloat
    rounds_with_kost: NestedFloat = Field(alias="roundsWithKOST")
    rounds_survived: NestedFloat
    rounds_with_an_ace: NestedFloat
    rounds_with_clutch: NestedFloat
    time_alive_per_match: Seconds
    time_dead_per_match: Seconds
    distance_per_round: float

    def opening_win_rate(self) -> float:
        return ratio(self.opening_kills, self.opening_kills + self.opening_deaths)

    def matches_win_rate(self) -> float:
        """Share of matches won, between 0 and 1."""
        return ratio(self.matches_won, self.matches_played)

    def rounds_win_rate(self) -> float:
        """Share of rounds won, between 0 and 1."""
        return ratio(self.rounds_won, self.rounds_played)


class OperatorStatistics(Statistics):
    stats_type: Literal["operators"]
    name: str = Field(alias="statsDetail")

    def avatar_url(self) -> str:
        return f"https://r6operators.marcopixel.eu/icons/png/{self.name.lower()}.png"


class MapStatistics(Statistics):
    stats_type: Literal["maps"]
    name: str = Field(alias="statsDetail")


class SeasonalStatistics(Statistics):
    stats_type: Literal["summary"]
    season_year: str
    season_number: str

    @property
    def season(self) -> Season:
        return Season(f"{self.season_year}{self.season_number}")


GeneralStatistics = Annotated[
    Union[OperatorStatistics, MapStatistics, SeasonalStatistics],
    Field(discriminator="stats_type"),
]


class TeamRoles(ApiModel):
    all: list[GeneralStatistics] = Field(default_factory=list)
    attacker: list[GeneralStatistics] = Field(default_factory=list, alias="Attacker")
    defender: list[GeneralStatistics] = Field(default_factory=list, alias="Defender")

    def for_side(self, side: SideOrAll) -> list[GeneralStatistics]:
        if side is SideOrAll.ATTACKER:
            return self.attacker
        if side is SideOrAll.DEFENDER:
            return self.defender
        return self.all


class ModeStatistics(ApiModel):
    team_roles: TeamRoles


class PlatformStatistics(ApiModel):
    game_modes: dict[str, ModeStatistics] = Field(default_factory=dict)


class StatisticResponse(ApiModel):
    profile_id: UUID
    start_date: date
    end_date: date
    region: str
    stat_type: str
    platforms: dict[str, PlatformStatistics] = Field(default_factory=dict)

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def _compact_date(cls, value):
        # dates arrive as YYYYMMDD integers
        if isinstance(value, (int, str)) and len(str(value)) == 8:
            return datetime.strptime(str(value), "%Y%m%d").date()
        return value

    def get_statistics_from_side(
        self,
        side: SideOrAll,
        game_mode: GameMode = GameMode.ALL,
        platform_group: str = "PC",
    ) -> list[GeneralStatistics] | None:
        platform = self.platforms.get(platform_group)
        if platform is None:
            return None
        mode = platform.game_modes.get(GameMode(game_mode).value)
        if mode is None:
            return None
        return mode.team_roles.for_side(side)

    def _find(self, kind: type, name: str | None = None, **kwargs):
        stats = self.get_statistics_from_side(SideOrAll.ALL, **kwargs) or []
        for entry in stats:
            if not isinstance(entry, kind):
                continue
            if name is None or entry.name.casefold() == name.casefold():
                return entry
        return None

    def get_operator(self, name: str, **kwargs) -> OperatorStatistics | None:
        return self._find(OperatorStatistics, name, **kwargs)

    def get_map(self, name: str, **kwargs) -> MapStatistics | None:
        return self._find(MapStatistics, name, **kwargs)

    def get_summary(self, **kwargs) -> SeasonalStatistics | None:
        return self._find(SeasonalStatistics, **kwargs)

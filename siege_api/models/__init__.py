from .enums import AggregationKind, GameMode, PlatformFamily, PlatformType, Season, SideOrAll
from .meta import GameStatus, ServiceState
from .playerstats import (
    GeneralStatistics,
    MapStatistics,
    OperatorStatistics,
    SeasonalStatistics,
    StatisticResponse,
    Statistics,
)
from .playtime import Playtime, PlaytimeProfile, PlaytimeResponse, PlaytimeStatistics
from .profile import PlayerProfile, PlayerSearchResponse
from .ranked import FullProfile, MatchOutcomes, Profile, RankedV2Response, SeasonStatistics

__all__ = [
    "AggregationKind",
    "FullProfile",
    "GameMode",
    "GameStatus",
    "GeneralStatistics",
    "MapStatistics",
    "MatchOutcomes",
    "OperatorStatistics",
    "PlatformFamily",
    "PlatformType",
    "PlayerProfile",
    "PlayerSearchResponse",
    "Playtime",
    "PlaytimeProfile",
    "PlaytimeResponse",
    "PlaytimeStatistics",
    "Profile",
    "RankedV2Response",
    "Season",
    "SeasonStatistics",
    "SeasonalStatistics",
    "ServiceState",
    "SideOrAll",
    "StatisticResponse",
    "Statistics",
]

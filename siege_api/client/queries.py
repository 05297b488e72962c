"""URL builders for the Ubisoft endpoints the client talks to.

All functions here are pure: the same arguments always produce the same
URL with the same parameter order.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

import httpx

from siege_api import constants
from siege_api.models.enums import AggregationKind, GameMode, PlatformFamily, PlatformType

# gameMode values sent for each requested mode
GAME_MODE_PARAMS: dict[GameMode, tuple[str, ...]] = {
    GameMode.ALL: ("all", "ranked", "casual", "unranked"),
    GameMode.RANKED: ("ranked",),
    GameMode.CASUAL: ("casual",),
    GameMode.EVENT: ("event",),
    GameMode.WARMUP: ("warmup",),
}


@dataclass(frozen=True)
class DateWindow:
    # Ubisoft rejects windows wider than roughly three months; not enforced here.
    start: date
    end: date


@dataclass(frozen=True)
class AggregationQuery:
    player_id: UUID
    kind: AggregationKind
    platform_family: PlatformFamily = PlatformFamily.PC
    game_mode: GameMode = GameMode.ALL
    date_window: DateWindow | None = None
    platform: PlatformType | None = None


def space_id_for(platform: PlatformType) -> UUID:
    return platform.space_id


def format_date(value: date) -> str:
    return value.strftime("%Y%m%d")


def build_stats_query(
    player_id: UUID,
    kind: AggregationKind,
    platform_family: PlatformFamily = PlatformFamily.PC,
    game_mode: GameMode = GameMode.ALL,
    date_window: DateWindow | None = None,
    platform: PlatformType | None = None,
    *,
    base_url: str = constants.UBI_STATS_URL,
) -> httpx.URL:
    platform = platform or platform_family.default_platform
    params: list[tuple[str, str]] = [
        ("view", "current"),
        ("platformGroup", platform_family.platform_group),
        ("aggregation", AggregationKind(kind).value),
        ("spaceId", str(space_id_for(platform))),
        ("gameMode", ",".join(GAME_MODE_PARAMS[GameMode(game_mode)])),
        ("teamRole", ",".join(constants.TEAM_ROLES)),
    ]
    if date_window is not None:
        params.append(("startDate", format_date(date_window.start)))
        params.append(("endDate", format_date(date_window.end)))

    return httpx.URL(
        f"{base_url.rstrip('/')}/v1/profiles/{player_id}/playerstats",
        params=params,
    )


def build_query_url(query: AggregationQuery, *, base_url: str = constants.UBI_STATS_URL) -> httpx.URL:
    return build_stats_query(
        query.player_id,
        query.kind,
        query.platform_family,
        query.game_mode,
        query.date_window,
        query.platform,
        base_url=base_url,
    )


def build_search_url(
    name: str,
    platform: PlatformType = PlatformType.UPLAY,
    *,
    base_url: str = constants.UBI_SERVICES_URL,
) -> httpx.URL:
    return httpx.URL(
        f"{base_url.rstrip('/')}/v3/profiles",
        params=[("nameOnPlatform", name), ("platformType", platform.value)],
    )


def build_playtime_url(
    player_id: UUID,
    *,
    base_url: str = constants.UBI_SERVICES_URL,
) -> httpx.URL:
    return httpx.URL(
        f"{base_url.rstrip('/')}/v1/profiles/stats",
        params=[
            ("profileIds", str(player_id)),
            ("spaceId", str(constants.DEFAULT_SPACE_ID)),
            ("statNames", ",".join(constants.PLAYTIME_STAT_NAMES)),
        ],
    )


def build_full_profiles_url(
    player_id: UUID,
    platform_family: PlatformFamily = PlatformFamily.PC,
    *,
    base_url: str = constants.UBI_SERVICES_URL,
) -> httpx.URL:
    return httpx.URL(
        f"{base_url.rstrip('/')}/v2/spaces/{constants.DEFAULT_SPACE_ID}"
        "/title/r6s/skill/full_profiles",
        params=[
            ("profile_ids", str(player_id)),
            ("platform_families", platform_family.value),
        ],
    )

import asyncio
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
from uuid import UUID

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from siege_api.auth import Credentials, Session, SessionExchanger
from siege_api.config import Settings

PLAYER_ID = UUID("e7679633-31ff-4f44-8cfd-d0ff81e2c10a")
SESSION_ID = UUID("6f1f3a52-9d3c-4b0a-a8c4-1f2e3d4c5b6a")
USER_ID = UUID("b3f1d2c4-7a8e-4f60-9c1d-2e3f4a5b6c7d")


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: Unit tests (no external dependencies)")


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


def session_payload(
    *,
    ticket: str = "ticket-1",
    expiration: datetime | str | None = None,
    session_id: UUID = SESSION_ID,
) -> dict:
    if expiration is None:
        expiration = datetime.now(timezone.utc) + timedelta(hours=3)
    if isinstance(expiration, datetime):
        expiration = expiration.isoformat()
    return {
        "platformType": "uplay",
        "ticket": ticket,
        "profileId": str(PLAYER_ID),
        "userId": str(USER_ID),
        "nameOnPlatform": "NaoFredzibob",
        "environment": "Prod",
        "expiration": expiration,
        "spaceId": "45d58365-547f-4b45-ab5b-53ed14cc79ed",
        "clientIp": "127.0.0.1",
        "clientIpCountry": "NO",
        "serverTime": datetime.now(timezone.utc).isoformat(),
        "sessionId": str(session_id),
        "sessionKey": "c2Vzc2lvbi1rZXk=",
    }


def make_session(*, ticket: str = "ticket-1", expires_in: timedelta = timedelta(hours=3)) -> Session:
    expiration = datetime.now(timezone.utc) + expires_in
    return Session.model_validate(session_payload(ticket=ticket, expiration=expiration))


class FakeExchanger(SessionExchanger):
    """Counts exchanges and hands out fresh sessions after an optional delay."""

    def __init__(self, *, delay: float = 0.01, error: Exception | None = None):
        self.calls = 0
        self.delay = delay
        self.error = error

    async def exchange(self, credentials: Credentials) -> Session:
        self.calls += 1
        await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return make_session(ticket=f"fresh-ticket-{self.calls}")


def stat_entry(stats_type: str, detail: str, **overrides) -> dict:
    entry = {
        "type": "Seasonal" if stats_type == "summary" else "Generalized",
        "statsType": stats_type,
        "statsDetail": detail,
        "matchesPlayed": 76,
        "roundsPlayed": 25,
        "minutesPlayed": 294,
        "matchesWon": 43,
        "matchesLost": 33,
        "roundsWon": 12,
        "roundsLost": 13,
        "kills": 75,
        "assists": 16,
        "death": 51,
        "headshots": 13,
        "meleeKills": 0,
        "teamKills": 0,
        "openingKills": 19,
        "openingDeaths": 9,
        "trades": 4,
        "openingKillTrades": 1,
        "openingDeathTrades": 0,
        "revives": 4,
        "distanceTravelled": 14335,
        "winLossRatio": 0.6667,
        "killDeathRatio": {"value": 1.4706, "p": 0.0},
        "headshotAccuracy": {"value": 0.1733, "p": 0.0},
        "killsPerRound": {"value": 0.8721, "p": 0.0},
        "roundsWithAKill": {"value": 0.593, "p": 0.0},
        "roundsWithMultiKill": {"value": 0.1977, "p": 0.0},
        "roundsWithOpeningKill": {"value": 0.0698, "p": 0.0},
        "roundsWithOpeningDeath": {"value": 0.0349, "p": 0.0},
        "roundsWithKOST": {"value": 0.7093, "p": 0.0},
        "roundsSurvived": {"value": 0.407, "p": 0.0},
        "roundsWithAnAce": {"value": 0.0, "p": 0.0},
        "roundsWithClutch": {"value": 0.0116, "p": 0.0},
        "timeAlivePerMatch": 432.7,
        "timeDeadPerMatch": 77.5,
        "distancePerRound": 166.686,
    }
    if stats_type == "summary":
        entry.update({"seasonYear": "Y7", "seasonNumber": "S3"})
    entry.update(overrides)
    return entry


def stats_payload(entries: list[dict], *, attacker=None, defender=None, mode: str = "all") -> dict:
    return {
        "profileId": str(PLAYER_ID),
        "startDate": 20230101,
        "endDate": 20230401,
        "region": "global",
        "statType": "generalized",
        "platforms": {
            "PC": {
                "gameModes": {
                    mode: {
                        "type": "Generalized",
                        "teamRoles": {
                            "all": entries,
                            "Attacker": attacker or [],
                            "Defender": defender or [],
                        },
                    }
                }
            }
        },
    }


def playtime_payload() -> dict:
    def stat(value: str, start: str, modified: str) -> dict:
        return {"value": value, "startDate": start, "lastModified": modified}

    return {
        "profiles": [
            {
                "profileId": str(PLAYER_ID),
                "stats": {
                    "PPvPTimePlayed": stat("361022", "2021-08-30T11:10:00.200Z", "2023-03-01T20:00:00.000Z"),
                    "PPvETimePlayed": stat("7210", "2021-08-30T11:08:00.415Z", "2022-01-01T10:00:00.000Z"),
                    "PTotalTimePlayed": stat("368232", "2021-08-30T11:13:00.398Z", "2023-03-01T20:00:00.000Z"),
                    "PClearanceLevel": stat("123", "2021-08-30T11:15:00.426Z", "2023-03-01T20:00:00.000Z"),
                },
            }
        ]
    }


def full_profiles_payload() -> dict:
    def board(board_id: str, kills: int, deaths: int, wins: int, losses: int, abandons: int) -> dict:
        return {
            "board_id": board_id,
            "full_profiles": [
                {
                    "profile": {
                        "board_id": board_id,
                        "id": str(PLAYER_ID),
                        "max_rank": 21,
                        "max_rank_points": 3200,
                        "rank": 20,
                        "rank_points": 3100,
                        "platform_family": "pc",
                        "season_id": 29,
                        "top_rank_position": 0,
                    },
                    "season_statistics": {
                        "deaths": deaths,
                        "kills": kills,
                        "match_outcomes": {"abandons": abandons, "losses": losses, "wins": wins},
                    },
                }
            ],
        }

    return {
        "platform_families_full_profiles": [
            {
                "platform_family": "pc",
                "board_ids_full_profiles": [
                    board("casual", 40, 20, 6, 4, 0),
                    board("ranked", 120, 100, 30, 20, 2),
                    board("warmup", 0, 0, 0, 0, 0),
                ],
            }
        ]
    }


def game_status_payload() -> list[dict]:
    def status(name: str, platform: str, state: str, app_id: str = "e3d5ea9e-50bd-43b7-88bf-39794f4e3d40") -> dict:
        return {
            "AppID ": app_id,
            "MDM": 4,
            "SpaceID": "5172a557-50b5-4665-b7db-e3f2e8c5041d",
            "Category": "Instance",
            "Name": name,
            "Platform": platform,
            "Status": state,
            "Maintenance": None,
            "ImpactedFeatures": [],
        }

    return [
        status("Rainbow Six Siege - PC - LIVE", "PC", "Online"),
        status("Rainbow Six Siege - PS5 - LIVE", "PS5", "Degraded", app_id="not-a-uuid"),
        status("For Honor - PC - LIVE", "PC", "Online"),
    ]


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        UBISOFT_EMAIL="u",
        UBISOFT_PASSWORD="p",
        SIEGE_HTTP_TIMEOUT_SECONDS=2.0,
    )


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(username="u", password="p")

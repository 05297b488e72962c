from typing import Final
from uuid import UUID

UBI_SERVICES_URL: Final[str] = "https://public-ubiservices.ubi.com"
UBI_STATS_URL: Final[str] = "https://prod.datadev.ubisoft.com"
UBI_GAME_STATUS_URL: Final[str] = "https://game-status-api.ubisoft.com/v1/instances"

UBI_APP_ID: Final[str] = "39baebad-39e5-4552-8c25-2c9b919064e2"
UBI_USER_AGENT: Final[str] = "UbiServices_SDK_2020.Release.58_PC64_ansi_static"
UBI_LOCALE: Final[str] = "en-US"

# Space used by the profile stats and ranked v2 endpoints.
DEFAULT_SPACE_ID: Final[UUID] = UUID("0d2ae42d-4c27-4cb7-af6c-2099062302bb")

UPLAY_SPACE_ID: Final[UUID] = UUID("5172a557-50b5-4665-b7db-e3f2e8c5041d")
PLAYSTATION_SPACE_ID: Final[UUID] = UUID("05bfb3f7-6c21-4c42-be1f-97a33fb5cf66")
XBOX_SPACE_ID: Final[UUID] = UUID("98a601e5-ca91-4440-b1c5-753f601a2c90")

UPLAY_SANDBOX: Final[str] = "OSBOR_PC_LNCH_A"
PLAYSTATION_SANDBOX: Final[str] = "OSBOR_PS4_LNCH_A"
XBOX_SANDBOX: Final[str] = "OSBOR_XBOXONE_LNCH_A"

PLAYTIME_STAT_NAMES: Final[tuple[str, ...]] = (
    "PPvPTimePlayed",
    "PPvETimePlayed",
    "PTotalTimePlayed",
    "PClearanceLevel",
)
TEAM_ROLES: Final[tuple[str, ...]] = ("all", "Attacker", "Defender")
SIEGE_STATUS_PREFIX: Final[str] = "Rainbow Six Siege"

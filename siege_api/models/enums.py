from __future__ import annotations

from enum import Enum
from uuid import UUID

from siege_api import constants


class PlatformType(str, Enum):
    """The platforms Siege can be played on, as named by Ubisoft."""

    UPLAY = "uplay"
    # xbl and psn have not been verified against a live account
    XBOX = "xbl"
    PLAYSTATION = "psn"

    @property
    def space_id(self) -> UUID:
        return _SPACE_IDS[self]

    @property
    def sandbox(self) -> str:
        return _SANDBOXES[self]


_SPACE_IDS: dict[PlatformType, UUID] = {
    PlatformType.UPLAY: constants.UPLAY_SPACE_ID,
    PlatformType.XBOX: constants.XBOX_SPACE_ID,
    PlatformType.PLAYSTATION: constants.PLAYSTATION_SPACE_ID,
}

_SANDBOXES: dict[PlatformType, str] = {
    PlatformType.UPLAY: constants.UPLAY_SANDBOX,
    PlatformType.XBOX: constants.XBOX_SANDBOX,
    PlatformType.PLAYSTATION: constants.PLAYSTATION_SANDBOX,
}


class PlatformFamily(str, Enum):
    PC = "pc"
    CONSOLE = "console"

    @property
    def platform_group(self) -> str:
        return self.value.upper()

    @property
    def default_platform(self) -> PlatformType:
        if self is PlatformFamily.PC:
            return PlatformType.UPLAY
        return PlatformType.PLAYSTATION


class GameMode(str, Enum):
    CASUAL = "casual"
    RANKED = "ranked"
    EVENT = "event"
    WARMUP = "warmup"
    ALL = "all"


class AggregationKind(str, Enum):
    OPERATORS = "operators"
    MAPS = "maps"
    SUMMARY = "summary"


class SideOrAll(str, Enum):
    ALL = "all"
    ATTACKER = "Attacker"
    DEFENDER = "Defender"


class Season(str, Enum):
    """Siege seasons in release order; the position is the ranked ``season_id``."""

    Y0S0 = "Y0S0"
    Y1S1 = "Y1S1"
    Y1S2 = "Y1S2"
    Y1S3 = "Y1S3"
    Y1S4 = "Y1S4"
    Y2S1 = "Y2S1"
    Y2S2 = "Y2S2"
    Y2S3 = "Y2S3"
    Y2S4 = "Y2S4"
    Y3S1 = "Y3S1"
    Y3S2 = "Y3S2"
    Y3S3 = "Y3S3"
    Y3S4 = "Y3S4"
    Y4S1 = "Y4S1"
    Y4S2 = "Y4S2"
    Y4S3 = "Y4S3"
    Y4S4 = "Y4S4"
    Y5S1 = "Y5S1"
    Y5S2 = "Y5S2"
    Y5S3 = "Y5S3"
    Y5S4 = "Y5S4"
    Y6S1 = "Y6S1"
    Y6S2 = "Y6S2"
    Y6S3 = "Y6S3"
    Y6S4 = "Y6S4"
    Y7S1 = "Y7S1"
    Y7S2 = "Y7S2"
    Y7S3 = "Y7S3"
    Y7S4 = "Y7S4"
    Y8S1 = "Y8S1"
    Y8S2 = "Y8S2"
    Y8S3 = "Y8S3"
    UNKNOWN = "Unknown"

    @classmethod
    def _missing_(cls, value):
        return cls.UNKNOWN

    @classmethod
    def from_number(cls, number: int) -> Season:
        members = list(cls)
        if 0 <= number < len(members) - 1:
            return members[number]
        return cls.UNKNOWN

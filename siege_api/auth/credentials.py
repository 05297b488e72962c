from __future__ import annotations

import base64
from dataclasses import dataclass, field

from siege_api.config import Settings, get_settings


@dataclass(frozen=True)
class Credentials:
    username: str
    password: str = field(repr=False)

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> Credentials:
        settings = settings or get_settings()
        return cls(username=settings.UBISOFT_EMAIL, password=settings.UBISOFT_PASSWORD)

    def derive_basic_token(self) -> str:
        raw = f"{self.username}:{self.password}".encode("utf-8")
        return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")

    def authorization_header(self) -> str:
        return f"Basic {self.derive_basic_token()}"

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, TypeVar
from uuid import UUID

import httpx
from pydantic import TypeAdapter, ValidationError

from siege_api import constants
from siege_api.auth.credentials import Credentials
from siege_api.auth.exchanger import SessionExchanger, UbisoftSessionExchanger
from siege_api.auth.session import Session
from siege_api.auth.session_manager import SessionManager
from siege_api.client import queries
from siege_api.config import Settings, get_settings
from siege_api.core.request_context import outbound_call, record_status
from siege_api.errors import ServiceConnectionError, UnexpectedResponse
from siege_api.models.enums import AggregationKind, GameMode, PlatformFamily, PlatformType
from siege_api.models.meta import GameStatus
from siege_api.models.playerstats import StatisticResponse
from siege_api.models.playtime import PlaytimeProfile, PlaytimeResponse
from siege_api.models.profile import PlayerSearchResponse
from siege_api.models.ranked import RankedV2Response

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SiegeClient:
    """Authenticated client for the Ubisoft services used by Siege.

    One instance is meant to be shared by every task in the process; the
    cached session is refreshed on demand, once, for all of them.
    """

    def __init__(
        self,
        credentials: Credentials,
        *,
        settings: Settings | None = None,
        http_client: httpx.AsyncClient | None = None,
        exchanger: SessionExchanger | None = None,
        session: Session | None = None,
    ):
        self.settings = settings or get_settings()
        self._owns_http = http_client is None
        self._http = http_client or httpx.AsyncClient(
            timeout=httpx.Timeout(self.settings.SIEGE_HTTP_TIMEOUT_SECONDS)
        )
        self.sessions = SessionManager(
            credentials,
            exchanger or UbisoftSessionExchanger(self._http, self.settings),
            session=session,
        )

    @classmethod
    def from_settings(cls, settings: Settings | None = None, **kwargs) -> SiegeClient:
        settings = settings or get_settings()
        return cls(Credentials.from_settings(settings), settings=settings, **kwargs)

    @property
    def session(self) -> Session | None:
        return self.sessions.session

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> SiegeClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    # ── Transport ──────────────────────────────────────────

    def session_headers(self, session: Session) -> dict[str, str]:
        return {
            "User-Agent": self.settings.UBI_USER_AGENT,
            "Ubi-AppId": self.settings.UBI_APP_ID,
            "Ubi-LocalCode": self.settings.UBI_LOCALE,
            "Ubi-SessionId": str(session.session_id),
            "Authorization": f"Ubi_v1 t={session.ticket}",
            "Connection": "keep-alive",
            "expiration": session.expiration_header(),
        }

    async def request(self, url: httpx.URL | str, model: type[T] | Any) -> T:
        """GET ``url`` with the current session and decode the body into ``model``."""
        with outbound_call(_path(url)):
            session = await self.sessions.get_session()
            response = await self._send(url, headers=self.session_headers(session))
            return self._decode(response, model)

    async def _send(self, url: httpx.URL | str, headers: dict[str, str] | None = None) -> httpx.Response:
        try:
            response = await self._http.get(url, headers=headers)
        except httpx.TransportError as exc:
            logger.warning("GET %s failed: %s", _path(url), exc.__class__.__name__)
            raise ServiceConnectionError(f"Request to {_path(url)} failed: {exc}") from exc
        except httpx.DecodingError as exc:
            logger.error("GET %s returned an undecodable body", _path(url))
            raise UnexpectedResponse(f"{_path(url)} returned an undecodable body") from exc
        except httpx.RequestError as exc:
            logger.warning("GET %s failed: %s", _path(url), exc.__class__.__name__)
            raise ServiceConnectionError(f"Request to {_path(url)} failed: {exc}") from exc

        record_status(response.status_code)
        logger.debug("GET %s -> %s", _path(url), response.status_code)
        if not response.is_success:
            logger.warning("GET %s rejected with status %s", _path(url), response.status_code)
            raise UnexpectedResponse(
                f"{_path(url)} answered {response.status_code}",
                status_code=response.status_code,
                details={"body": response.text[:500]},
            )
        return response

    def _decode(self, response: httpx.Response, model: type[T] | Any) -> T:
        try:
            return _adapter(model).validate_json(response.content)
        except ValidationError as exc:
            logger.error("Unexpected body from %s: %s", response.url.path, exc)
            raise UnexpectedResponse(
                f"{response.url.path} returned an unexpected body",
                status_code=response.status_code,
            ) from exc

    # ── Endpoints ──────────────────────────────────────────

    async def search_player(self, name: str, platform: PlatformType = PlatformType.UPLAY) -> UUID:
        """Look up the Ubisoft profile id for a player name."""
        url = queries.build_search_url(name, platform, base_url=self.settings.services_url)
        result = await self.request(url, PlayerSearchResponse)
        if not result.profiles:
            raise UnexpectedResponse(f"No profile found for {name!r}", details={"name": name})
        return result.profiles[0].profile_id

    async def get_playtime(self, player_id: UUID) -> PlaytimeProfile:
        url = queries.build_playtime_url(player_id, base_url=self.settings.services_url)
        result = await self.request(url, PlaytimeResponse)
        if not result.profiles:
            raise UnexpectedResponse(f"No playtime returned for {player_id}")
        return result.profiles[0]

    async def get_full_profiles(
        self,
        player_id: UUID,
        platform_family: PlatformFamily = PlatformFamily.PC,
    ) -> RankedV2Response:
        """Current-season ranked, casual, event and warmup boards."""
        url = queries.build_full_profiles_url(
            player_id, platform_family, base_url=self.settings.services_url
        )
        return await self.request(url, RankedV2Response)

    async def get_stats(self, query: queries.AggregationQuery) -> StatisticResponse:
        url = queries.build_query_url(query, base_url=self.settings.stats_url)
        return await self.request(url, StatisticResponse)

    async def get_operator_stats(
        self,
        player_id: UUID,
        game_mode: GameMode = GameMode.ALL,
        platform_family: PlatformFamily = PlatformFamily.PC,
        date_window: queries.DateWindow | None = None,
    ) -> StatisticResponse:
        return await self.get_stats(
            queries.AggregationQuery(
                player_id, AggregationKind.OPERATORS, platform_family, game_mode, date_window
            )
        )

    async def get_map_stats(
        self,
        player_id: UUID,
        game_mode: GameMode = GameMode.ALL,
        platform_family: PlatformFamily = PlatformFamily.PC,
        date_window: queries.DateWindow | None = None,
    ) -> StatisticResponse:
        return await self.get_stats(
            queries.AggregationQuery(
                player_id, AggregationKind.MAPS, platform_family, game_mode, date_window
            )
        )

    async def get_summary_stats(
        self,
        player_id: UUID,
        game_mode: GameMode = GameMode.ALL,
        platform_family: PlatformFamily = PlatformFamily.PC,
        date_window: queries.DateWindow | None = None,
    ) -> StatisticResponse:
        return await self.get_stats(
            queries.AggregationQuery(
                player_id, AggregationKind.SUMMARY, platform_family, game_mode, date_window
            )
        )

    async def get_service_status(self) -> list[GameStatus]:
        """Public status feed, narrowed to the Siege entries. Needs no session."""
        with outbound_call(_path(self.settings.UBI_GAME_STATUS_URL)):
            response = await self._send(self.settings.UBI_GAME_STATUS_URL)
            statuses = self._decode(response, list[GameStatus])
        return [s for s in statuses if s.name.startswith(constants.SIEGE_STATUS_PREFIX)]


@lru_cache(maxsize=None)
def _adapter(model: Any) -> TypeAdapter:
    return TypeAdapter(model)


def _path(url: httpx.URL | str) -> str:
    # query strings stay out of the logs
    return httpx.URL(url).path

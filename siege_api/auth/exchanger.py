from __future__ import annotations

import logging
from abc import ABC, abstractmethod

import httpx
from pydantic import ValidationError

from siege_api.auth.credentials import Credentials
from siege_api.auth.session import Session
from siege_api.config import Settings, get_settings
from siege_api.core.request_context import outbound_call, record_status
from siege_api.errors import InvalidCredentials, ServiceConnectionError, UnexpectedResponse

logger = logging.getLogger(__name__)


class SessionExchanger(ABC):
    """Turns long-lived credentials into a short-lived Session."""

    @abstractmethod
    async def exchange(self, credentials: Credentials) -> Session:  # pragma: no cover - interface
        raise NotImplementedError


class UbisoftSessionExchanger(SessionExchanger):
    """Performs the Basic-auth exchange against ``/v3/profiles/sessions``.

    One POST per call and no retries; the caller owns the retry policy.
    """

    def __init__(self, http_client: httpx.AsyncClient, settings: Settings | None = None):
        self._http = http_client
        self._settings = settings or get_settings()

    @property
    def url(self) -> str:
        return f"{self._settings.services_url}/v3/profiles/sessions"

    def _headers(self, credentials: Credentials) -> dict[str, str]:
        return {
            "Content-Type": "application/json; charset=UTF-8",
            "Ubi-AppId": self._settings.UBI_APP_ID,
            "User-Agent": self._settings.UBI_USER_AGENT,
            "Authorization": credentials.authorization_header(),
        }

    async def exchange(self, credentials: Credentials) -> Session:
        with outbound_call("/v3/profiles/sessions"):
            return await self._exchange(credentials)

    async def _exchange(self, credentials: Credentials) -> Session:
        try:
            response = await self._http.post(self.url, headers=self._headers(credentials))
        except httpx.TransportError as exc:
            logger.warning("Session exchange failed before a response: %s", exc.__class__.__name__)
            raise ServiceConnectionError(f"Session exchange failed: {exc}") from exc
        except httpx.DecodingError as exc:
            logger.error("Session exchange body could not be decoded: %s", exc)
            raise UnexpectedResponse("Session exchange returned an undecodable body") from exc
        except httpx.RequestError as exc:
            logger.warning("Session exchange failed: %s", exc.__class__.__name__)
            raise ServiceConnectionError(f"Session exchange failed: {exc}") from exc

        record_status(response.status_code)
        if not response.is_success:
            logger.warning("Session exchange rejected with status %s", response.status_code)
            raise InvalidCredentials(
                f"Session exchange rejected ({response.status_code})",
                status_code=response.status_code,
            )

        try:
            session = Session.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            logger.error("Session exchange returned an unreadable body: %s", exc)
            raise UnexpectedResponse(
                "Session exchange returned an unexpected body",
                status_code=response.status_code,
            ) from exc

        logger.info(
            "Session issued for profile %s, expires at %s",
            session.profile_id,
            session.expiration.isoformat(),
        )
        return session

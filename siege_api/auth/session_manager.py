from __future__ import annotations

import asyncio
import logging

from siege_api.auth.credentials import Credentials
from siege_api.auth.exchanger import SessionExchanger
from siege_api.auth.session import Session

logger = logging.getLogger(__name__)


class SessionManager:
    """Holds the current Session and refreshes it at most once at a time.

    Readers take the fast path without locking. Callers that find the
    Session missing or expired take the lock, re-check, and then join the
    single in-flight refresh task (starting it if nobody has). The task is
    awaited through ``asyncio.shield`` so one caller's cancellation never
    aborts a refresh other callers are waiting on. The slot is only
    reassigned after a successful exchange.
    """

    def __init__(
        self,
        credentials: Credentials,
        exchanger: SessionExchanger,
        session: Session | None = None,
    ):
        self._credentials = credentials
        self._exchanger = exchanger
        self._session = session
        self._lock = asyncio.Lock()
        self._refresh_task: asyncio.Task[Session] | None = None

    @property
    def session(self) -> Session | None:
        return self._session

    @property
    def is_refreshing(self) -> bool:
        return self._refresh_task is not None and not self._refresh_task.done()

    def _is_usable(self, session: Session | None) -> bool:
        return session is not None and not session.is_expired()

    async def get_session(self, *, force_refresh: bool = False) -> Session:
        if not force_refresh:
            session = self._session
            if self._is_usable(session):
                return session

        async with self._lock:
            session = self._session
            if not force_refresh and self._is_usable(session):
                return session
            if not self.is_refreshing:
                self._refresh_task = asyncio.ensure_future(self._refresh())
                self._refresh_task.add_done_callback(self._on_refresh_done)
            task = self._refresh_task

        return await asyncio.shield(task)

    async def refresh(self) -> Session:
        return await self.get_session(force_refresh=True)

    async def _refresh(self) -> Session:
        logger.info("Refreshing Ubisoft session")
        session = await self._exchanger.exchange(self._credentials)
        self._session = session
        return session

    def _on_refresh_done(self, task: asyncio.Task[Session]) -> None:
        if task.cancelled():
            logger.warning("Session refresh was cancelled")
            return
        exc = task.exception()
        if exc is not None:
            logger.error("Session refresh failed: %s", exc.__class__.__name__)

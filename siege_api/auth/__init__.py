"""Credentials, sessions and the session exchange."""

from .credentials import Credentials
from .exchanger import SessionExchanger, UbisoftSessionExchanger
from .session import Session, is_expired
from .session_manager import SessionManager

__all__ = [
    "Credentials",
    "Session",
    "SessionExchanger",
    "SessionManager",
    "UbisoftSessionExchanger",
    "is_expired",
]

"""
Async client for the Ubisoft services behind Rainbow Six Siege statistics.

Exposes:
- Credentials and the session exchange (``siege_api.auth``)
- A shared, self-refreshing authenticated client (``SiegeClient``)
- URL builders for the stats endpoints (``siege_api.client.queries``)
- Response models (``siege_api.models``)
"""

from .auth import Credentials, Session, SessionManager, UbisoftSessionExchanger, is_expired
from .client import AggregationQuery, DateWindow, SiegeClient, build_stats_query
from .errors import (
    InvalidCredentials,
    InvalidPassword,
    ServiceConnectionError,
    SiegeClientError,
    UnexpectedResponse,
)

__version__ = "0.1.0"

__all__ = [
    "AggregationQuery",
    "Credentials",
    "DateWindow",
    "InvalidCredentials",
    "InvalidPassword",
    "ServiceConnectionError",
    "Session",
    "SessionManager",
    "SiegeClient",
    "SiegeClientError",
    "UbisoftSessionExchanger",
    "UnexpectedResponse",
    "build_stats_query",
    "is_expired",
]

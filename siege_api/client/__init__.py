"""Authenticated HTTP client and URL builders."""

from .queries import (
    AggregationQuery,
    DateWindow,
    build_full_profiles_url,
    build_playtime_url,
    build_query_url,
    build_search_url,
    build_stats_query,
    space_id_for,
)
from .siege_client import SiegeClient

__all__ = [
    "AggregationQuery",
    "DateWindow",
    "SiegeClient",
    "build_full_profiles_url",
    "build_playtime_url",
    "build_query_url",
    "build_search_url",
    "build_stats_query",
    "space_id_for",
]

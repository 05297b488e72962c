import asyncio
import logging
import sys

from siege_api import SiegeClient, SiegeClientError
from siege_api.config import get_settings
from siege_api.core import configure_logging

logger = logging.getLogger("siege_api.main")


async def run(names: list[str]) -> int:
    settings = get_settings()
    async with SiegeClient.from_settings(settings) as client:
        if not names:
            for status in await client.get_service_status():
                print(f"{status.name} [{status.platform}]: {status.status}")
            return 0

        for name in names:
            try:
                player_id = await client.search_player(name)
                playtime = await client.get_playtime(player_id)
            except SiegeClientError as exc:
                logger.error("Lookup for %s failed: %s", name, exc.message)
                return 1
            hours = playtime.statistics.total_time_played.duration.total_seconds() / 3600
            print(f"{name}: {player_id} ({hours:.1f}h played)")
    return 0


if __name__ == "__main__":
    settings = get_settings()
    configure_logging(settings.SIEGE_LOG_LEVEL, settings.SIEGE_LOG_FORMAT)
    sys.exit(asyncio.run(run(sys.argv[1:])))

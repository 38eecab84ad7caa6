#!/usr/bin/env python3
"""Poke the Last.fm API with the configured credentials.

Hey future me - quick manual smoke test, NOT part of the test suite. Needs a real API key:

Usage:
    LASTFM_API_KEY=... LASTFM_API_SECRET=... python scripts/lastfm_demo.py "Korn"

    # With a session key, also prints the authenticated user's profile:
    LASTFM_SESSION_KEY=... python scripts/lastfm_demo.py "Korn"
"""

import asyncio
import logging
import sys

from scrobblekit import LastfmClient
from scrobblekit.config import get_settings
from scrobblekit.domain.exceptions import ConfigurationError
from scrobblekit.infrastructure.observability.logging import configure_logging

logger = logging.getLogger("lastfm_demo")


async def run(artist: str) -> int:
    settings = get_settings()
    configure_logging(settings.log_level, settings.observability.log_json_format, settings.app_name)

    try:
        client = LastfmClient.from_settings(settings.lastfm)
    except ConfigurationError as e:
        logger.error("%s", e)
        return 1

    async with client:
        info = await client.artist.get_info(artist)
        if not info.is_success or info.data is None:
            logger.error("artist.getInfo failed: %s (%s)", info.error_message, info.status.name)
            return 1
        logger.info(
            "%s: %s listeners, %s plays, tags: %s",
            info.data.name,
            info.data.listeners,
            info.data.play_count,
            ", ".join(tag.name for tag in info.data.tags),
        )

        top = await client.artist.get_top_tracks(artist, limit=5)
        if top.is_success and top.data is not None:
            for track in top.data:
                logger.info("  #%s %s (%s plays)", track.rank, track.name, track.play_count)

        if client.is_authenticated:
            me = await client.user.get_info()
            if me.is_success and me.data is not None:
                logger.info("Authenticated as %s, %d scrobbles", me.data.username, me.data.playcount)
            else:
                logger.warning("user.getInfo failed: %s", me.error_message)

    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(run(sys.argv[1] if len(sys.argv) > 1 else "Korn")))

"""Entry point that resolves the environment configuration into a chat client."""

import asyncio
import logging
import os
import sys

from chatlink.builder import build_from_settings
from chatlink.settings import Settings


def _configure_logging() -> None:
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )


def main() -> int:
    """Build the configured client, report the selected variant and close it."""
    _configure_logging()
    logger = logging.getLogger("chatlink")

    try:
        settings = Settings.load()
        client = build_from_settings(settings)
    except ValueError as exc:
        logger.error("Invalid chat client configuration: %s", exc)
        return 1

    try:
        if client.is_guest:
            logger.info(
                "Guest client ready for %s in %s",
                client.username,
                client.chat_id,
            )
        else:
            logger.info("Authenticated client ready for %s", client.username)
        logger.debug("Subscribed resources", extra={"resources": sorted(client.resources)})
    finally:
        asyncio.run(client.aclose())
    return 0


if __name__ == "__main__":
    sys.exit(main())

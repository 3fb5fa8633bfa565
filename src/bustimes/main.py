"""Main entry point for the bus departures service."""

import asyncio
import logging
import sys

import aiohttp

from bustimes.adapters.config import AppConfig, ModuleConfigurationLoader
from bustimes.adapters.notifications import PubSubNotifier, PubSubRequestListener
from bustimes.adapters.ovapi import OvApiClient
from bustimes.adapters.pollers import DeparturePoller
from bustimes.application.services import DepartureService

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure root logging to stderr."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


async def main() -> None:
    """Main application entry point."""
    config = AppConfig()
    configure_logging(config.log_level)

    try:
        modules = ModuleConfigurationLoader.load(config)
    except (ValueError, FileNotFoundError) as e:
        logger.error(f"Invalid module configuration: {e}")
        sys.exit(1)

    if not modules:
        logger.error("No modules configured.")
        logger.error("Please add [[modules]] entries to your config.toml file.")
        logger.error("Or copy config.example.toml to config.toml and customize it.")
        sys.exit(1)

    logger.info(f"Loaded {len(modules)} module(s):")
    for identifier, module_config in modules:
        logger.info(
            f"  - '{identifier}': timing points {module_config.timing_point_code or '-'}, "
            f"stop areas {module_config.stop_area_code or '-'}"
        )

    async with aiohttp.ClientSession() as session:
        client = OvApiClient(
            session,
            timeout_seconds=config.api_timeout_seconds,
            log_requests=config.log_requests,
        )
        notifier = PubSubNotifier(config.notification_topic)
        departure_service = DepartureService(client, notifier)
        poller = DeparturePoller(departure_service, modules, config.update_interval_seconds)
        listener = PubSubRequestListener(
            config.request_topic, departure_service.handle_notification
        )

        await listener.start()
        await poller.start()
        try:
            await asyncio.Event().wait()
        finally:
            logger.info("Shutting down...")
            await poller.stop()
            await listener.stop()


def run() -> None:
    """Console script entry point."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    run()

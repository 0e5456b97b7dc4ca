#!/usr/bin/env python3
"""
Groupie Tracker

Main entry point. Loads templates, fetches and merges the artist data,
then serves the site until interrupted.
"""

import asyncio
import logging
import signal
import sys
from pathlib import Path

import jinja2

from groupie.booth import booth
from groupie.catalog import Catalog, load_catalog
from groupie.config import Config, get_site_url
from groupie.services.api_client import GroupieClient
from groupie.web.server import WebServer

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("groupie")


async def main() -> None:
    """Main application entry point."""
    booth_log_file = Path(__file__).parent.parent / "logs" / "booth.log"
    booth.configure(log_file=booth_log_file, console=True)

    config = Config.load()
    site_name = config.site_name
    booth.start(site_name)

    # Templates load first so a broken page fails before any network traffic
    try:
        web_server = WebServer(
            catalog=Catalog(),
            templates_dir=config.paths.templates_dir,
            static_dir=config.paths.static_dir,
            restricted_paths=config.restricted_paths,
            site_name=site_name,
            host=config.server.host,
            port=config.server.port,
        )
    except jinja2.TemplateError as e:
        logger.error(f"Cannot load templates from {config.paths.templates_dir}: {e}")
        sys.exit(1)

    # Data is fetched once; failures leave the catalog with the featured artist only
    client = GroupieClient(
        artists_url=config.api.artists_url,
        relations_url=config.api.relations_url,
    )
    try:
        await client.start()
        web_server.set_catalog(await load_catalog(client))
    finally:
        await client.stop()

    shutdown_event = asyncio.Event()

    def handle_shutdown(sig: signal.Signals) -> None:
        logger.info(f"Received {sig.name}, initiating shutdown...")
        shutdown_event.set()

    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, handle_shutdown, sig)

    try:
        await web_server.start()
        logger.info(f"{site_name} is running at {get_site_url(config)}")
        logger.info("Press Ctrl+C to stop")
        await shutdown_event.wait()
    except OSError as e:
        logger.error(f"Server failed to start: {e}")
        sys.exit(1)
    finally:
        try:
            await asyncio.wait_for(web_server.stop(), timeout=8.0)
        except asyncio.TimeoutError:
            logger.warning("Cleanup timed out after 8s, exiting anyway")

        booth.stop(site_name)


def run() -> None:
    """Console script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()

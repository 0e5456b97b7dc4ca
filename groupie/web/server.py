"""
Groupie Tracker Web Server

aiohttp application serving the artist pages, static files and
custom error pages. Templates and the catalog are loaded before the
server starts and shared read-only with every handler.
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Iterable

import aiohttp_jinja2
import jinja2
from aiohttp import web

from groupie.config import DEFAULT_RESTRICTED_PATHS, STATIC_DIR, TEMPLATES_DIR
from groupie.web.errors import error_pages
from groupie.web.middleware import restrict_paths
from groupie.web.registry import TemplateRegistry, format_location

if TYPE_CHECKING:
    from groupie.catalog import Catalog

logger = logging.getLogger(__name__)


class WebServer:
    """Server-rendered artist site."""

    def __init__(
        self,
        catalog: "Catalog",
        templates_dir: Path = TEMPLATES_DIR,
        static_dir: Path = STATIC_DIR,
        restricted_paths: Iterable[str] = DEFAULT_RESTRICTED_PATHS,
        site_name: str = "Groupie Tracker",
        host: str = "0.0.0.0",
        port: int = 8080,
    ):
        self.catalog = catalog
        self.site_name = site_name
        self.host = host
        self.port = port
        # restrict_paths must run first so blocked paths never reach routing
        self.app = web.Application(middlewares=[restrict_paths, error_pages])
        self._runner: web.AppRunner | None = None

        # Set up Jinja2 templates with site_name in global context
        env = aiohttp_jinja2.setup(
            self.app,
            loader=jinja2.FileSystemLoader(str(templates_dir)),
            autoescape=jinja2.select_autoescape(["html"]),
        )
        env.globals["site_name"] = site_name
        env.filters["location"] = format_location

        # Store references in app for route handlers
        self.app["catalog"] = catalog
        self.app["templates"] = TemplateRegistry(env)
        self.app["static_dir"] = Path(static_dir)
        self.app["restricted_paths"] = tuple(restricted_paths)

        self._setup_routes()

    def set_catalog(self, catalog: "Catalog") -> None:
        """Replace the catalog (called once, before the server starts)."""
        self.catalog = catalog
        self.app["catalog"] = catalog

    def _setup_routes(self) -> None:
        """Register all route handlers."""
        from groupie.web.routes.pages import routes as page_routes
        from groupie.web.routes.static import routes as static_routes

        self.app.router.add_routes(page_routes)
        self.app.router.add_routes(static_routes)

    async def start(self) -> None:
        """Start the web server."""
        self._runner = web.AppRunner(self.app)
        await self._runner.setup()
        site = web.TCPSite(self._runner, self.host, self.port)
        await site.start()
        logger.info(f"Server started at http://{self.host}:{self.port}")

    async def stop(self) -> None:
        """Stop the web server."""
        if self._runner:
            await self._runner.cleanup()
            self._runner = None
            logger.info("Server stopped")

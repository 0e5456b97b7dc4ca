"""
Static files: GET /static/*, /assets/*

Checks the file on disk before handing it to aiohttp's FileResponse,
so a missing file gets the site's 404 page instead of a bare error.
"""

import logging
import stat
from pathlib import Path

from aiohttp import web

from groupie.booth import booth
from groupie.web.errors import render_error

logger = logging.getLogger(__name__)

routes = web.RouteTableDef()


def serve_file(request: web.Request, root: Path, filename: str) -> web.StreamResponse:
    """Serve root/filename, or the 404 page if it is not a readable regular file."""
    root = root.resolve()

    # Missing, permission-denied and unrepresentable (NUL byte) paths are all 404
    try:
        path = (root / filename).resolve()
        if not path.is_relative_to(root):
            logger.warning(f"Rejected path outside static root: {request.path}")
            booth.not_found(request.path)
            return render_error(request, 404, "Page not found")
        st = path.stat()
    except (OSError, ValueError) as e:
        logger.debug(f"stat failed for {filename!r}: {e}")
        booth.not_found(request.path)
        return render_error(request, 404, "Page not found")

    if not stat.S_ISREG(st.st_mode):
        booth.not_found(request.path)
        return render_error(request, 404, "Page not found")

    return web.FileResponse(path)


@routes.get("/static/{filename:.*}")
async def static_file(request: web.Request) -> web.StreamResponse:
    return serve_file(request, request.app["static_dir"], request.match_info["filename"])


@routes.get("/assets/{filename:.*}")
async def asset_file(request: web.Request) -> web.StreamResponse:
    return serve_file(request, request.app["static_dir"] / "assets", request.match_info["filename"])

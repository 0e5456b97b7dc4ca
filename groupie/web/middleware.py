"""
Access restriction: blocks directory-style requests to the asset roots.
"""

import logging
from typing import Iterable

from aiohttp import web

from groupie.booth import booth
from groupie.web.errors import render_error

logger = logging.getLogger(__name__)


def is_restricted(path: str, restricted_paths: Iterable[str]) -> bool:
    """True when path is exactly a restricted path, with or without trailing slash."""
    return any(path == p or path == p + "/" for p in restricted_paths)


@web.middleware
async def restrict_paths(request: web.Request, handler) -> web.StreamResponse:
    """Answer 403 for restricted paths before routing reaches a handler."""
    if is_restricted(request.path, request.app["restricted_paths"]):
        booth.access_denied(request.path)
        return render_error(request, 403, "Access Denied")
    return await handler(request)

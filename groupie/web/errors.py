"""
Error pages and page rendering.

Every failure a visitor can see collapses into 403/404/405/500, each
rendered through the shared error.html template.
"""

import logging

import jinja2
from aiohttp import web

from groupie.booth import booth
from groupie.models import ErrorPage

logger = logging.getLogger(__name__)


def render_error(request: web.Request, code: int, message: str) -> web.Response:
    """Render error.html with the given status code.

    Falls back to a plain-text 500 when the error template itself fails.
    """
    templates = request.app["templates"]
    error_page = ErrorPage(code=code, message=message)
    try:
        html = templates.render("error", error=error_page, page="error")
    except (jinja2.TemplateError, KeyError) as e:
        logger.error(f"Error executing error template: {e}")
        return web.Response(text="Internal Server Error", status=500)
    return web.Response(text=html, status=code, content_type="text/html")


def render_page(request: web.Request, name: str, **context) -> web.Response:
    """Render a named page, or the 500 page if rendering fails."""
    templates = request.app["templates"]
    try:
        html = templates.render(name, page=name, **context)
    except (jinja2.TemplateError, KeyError) as e:
        logger.error(f"Error executing {name} template: {e}")
        booth.server_error(request.path, str(e))
        return render_error(request, 500, "Internal server error")
    return web.Response(text=html, content_type="text/html")


@web.middleware
async def error_pages(request: web.Request, handler) -> web.StreamResponse:
    """Replace aiohttp's default error responses with the custom pages."""
    try:
        return await handler(request)
    except web.HTTPNotFound:
        booth.not_found(request.path)
        return render_error(request, 404, "Page not found")
    except web.HTTPMethodNotAllowed as e:
        response = render_error(request, 405, "Method not allowed")
        if response.status == 405:
            response.headers["Allow"] = ",".join(sorted(e.allowed_methods))
        return response
    except web.HTTPForbidden:
        return render_error(request, 403, "Access Denied")
    except web.HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Unhandled error serving {request.method} {request.path}")
        booth.server_error(request.path, str(e))
        return render_error(request, 500, "Internal server error")

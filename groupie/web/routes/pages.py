"""
Content pages: GET /, /about, /readme

HEAD is not registered, so any method but GET is answered with 405.
"""

from aiohttp import web

from groupie.web.errors import render_page

routes = web.RouteTableDef()


@routes.get("/", allow_head=False)
async def index(request: web.Request) -> web.Response:
    """Render the artist list."""
    catalog = request.app["catalog"]
    return render_page(request, "index", artists=catalog.artists)


@routes.get("/about", allow_head=False)
async def about(request: web.Request) -> web.Response:
    return render_page(request, "about")


@routes.get("/readme", allow_head=False)
async def readme(request: web.Request) -> web.Response:
    return render_page(request, "readme")

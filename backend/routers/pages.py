import logging
from urllib.parse import urlsplit

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from config import settings
from services import country_service, render_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["pages"])

THEME_COOKIE = "theme"


def get_theme(request: Request) -> str:
    value = request.cookies.get(THEME_COOKIE, settings.default_theme)
    return "dark" if value == "dark" else "light"


def _back_path(request: Request) -> str:
    # Only redirect to a path on this host.
    referer = request.headers.get("referer", "")
    parts = urlsplit(referer)
    if parts.netloc and parts.netloc != request.url.netloc:
        return "/"
    if not parts.path.startswith("/") or parts.path.startswith("//"):
        return "/"
    return parts.path + (f"?{parts.query}" if parts.query else "")


@router.get("/", response_class=HTMLResponse)
async def grid_page(request: Request, q: str | None = None, region: str | None = None):
    theme = get_theme(request)
    try:
        criterion, notice = country_service.criterion_from_params(q, region)
    except ValueError as e:
        html = render_service.render_grid_page([], regions=[], error=str(e), theme=theme)
        return HTMLResponse(html, status_code=400)

    query = criterion.value if criterion.mode == "search" else ""
    active_region = criterion.value if criterion.mode == "region" else ""

    try:
        countries = await country_service.fetch_dataset()
    except country_service.FetchError as e:
        logger.error("Error initializing grid: %s", e)
        html = render_service.render_grid_page(
            [], regions=[], query=query, region=active_region,
            notice=notice, error=str(e), theme=theme,
        )
        return HTMLResponse(html, status_code=503)

    matches = country_service.filter_countries(countries, criterion)
    html = render_service.render_grid_page(
        matches,
        regions=country_service.list_regions(countries),
        query=query,
        region=active_region,
        notice=notice,
        theme=theme,
    )
    return HTMLResponse(html)


@router.get("/details", response_class=HTMLResponse)
async def details_page(request: Request, name: str = ""):
    theme = get_theme(request)
    if not name:
        logger.error("No country name in URL")
        return HTMLResponse(render_service.render_detail_page(None, theme=theme), status_code=400)

    try:
        countries = await country_service.fetch_dataset()
        country = country_service.require_by_name(countries, name)
    except country_service.FetchError as e:
        logger.error("Error fetching country details: %s", e)
        html = render_service.render_detail_page(None, name=name, error=str(e), theme=theme)
        return HTMLResponse(html, status_code=503)
    except country_service.NotFoundError as e:
        logger.info("%s", e)
        html = render_service.render_detail_page(None, name=name, theme=theme)
        return HTMLResponse(html, status_code=404)

    return HTMLResponse(render_service.render_detail_page(country, theme=theme))


@router.post("/theme")
async def toggle_theme(request: Request):
    theme = "light" if get_theme(request) == "dark" else "dark"
    response = RedirectResponse(_back_path(request), status_code=303)
    response.set_cookie(THEME_COOKIE, theme, max_age=365 * 24 * 3600, samesite="lax")
    return response

"""HTML rendering for the grid and detail pages."""

import html
from urllib.parse import urlencode

from models.country import ALL_REGIONS, Country
from utils.text import normalize


def _esc(value: object) -> str:
    return html.escape(str(value), quote=True)


def details_url(name: str) -> str:
    return f"/details?{urlencode({'name': name})}"


def region_url(region: str) -> str:
    return f"/?{urlencode({'region': region})}"


def country_element(country: Country, is_grid: bool = True) -> str:
    """One country card; a link in the grid, a plain section on the detail page."""
    info = (
        '<div class="country-flag">'
        f'<img src="{_esc(country.flag)}" alt="{_esc(country.name)} Flag">'
        "</div>"
        '<div class="country-info">'
        f"<h1>{_esc(country.name)}</h1>"
        f"<p><strong>Population: </strong>{_esc(country.population)}</p>"
        f"<p><strong>Region: </strong>{_esc(country.region)}</p>"
        f"<p><strong>Capital: </strong>{_esc(country.capital)}</p>"
        "</div>"
    )
    if is_grid:
        return f'<a class="country scale-effect" href="{_esc(details_url(country.name))}">{info}</a>'
    return f'<section class="country-details">{info}</section>'


def _theme_toggle(theme: str) -> str:
    label = "Light Mode" if theme == "dark" else "Dark Mode"
    return (
        '<form class="theme-toggle" method="post" action="/theme">'
        f'<button type="submit"><span class="theme-text">{label}</span></button>'
        "</form>"
    )


def _toast(notice: str) -> str:
    if not notice:
        return ""
    return f'<div id="toast" role="status">{_esc(notice)}</div>'


def _error(message: str) -> str:
    if not message:
        return ""
    return f'<p class="error-message" role="alert">{_esc(message)}</p>'


def _page(title: str, body: str, theme: str, notice: str = "") -> str:
    body_class = ' class="dark-theme"' if theme == "dark" else ""
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '<meta charset="utf-8">\n'
        '<meta name="viewport" content="width=device-width, initial-scale=1">\n'
        f"<title>{_esc(title)}</title>\n"
        f"<style>{_style_css()}</style>\n"
        "</head>\n"
        f"<body{body_class}>\n"
        '<header class="header">'
        '<a class="logo" href="/">Where in the world?</a>'
        f"{_theme_toggle(theme)}"
        "</header>\n"
        f"<main>{body}</main>\n"
        f"{_toast(notice)}\n"
        "</body>\n"
        "</html>\n"
    )


def _filters(regions: list[str], query: str, region: str) -> str:
    options = [(ALL_REGIONS, "All")] + [(r, r) for r in regions]
    items = []
    for token, label in options:
        current = ' aria-current="true"' if region and normalize(token) == normalize(region) else ""
        items.append(
            f'<li><a data-region="{_esc(token)}" href="{_esc(region_url(token))}"{current}>'
            f"{_esc(label)}</a></li>"
        )
    return (
        '<section class="filters">'
        '<form class="search" method="get" action="/">'
        f'<input class="search-input" type="search" name="q" value="{_esc(query)}" '
        'placeholder="Search for a country..." aria-label="Search for a country">'
        "</form>"
        '<div class="dropdown-wrapper">'
        '<div class="dropdown-header">Filter by Region</div>'
        f'<ul class="dropdown-body">{"".join(items)}</ul>'
        "</div>"
        "</section>"
    )


def render_grid_page(
    countries: list[Country],
    *,
    regions: list[str],
    query: str = "",
    region: str = "",
    notice: str = "",
    error: str = "",
    theme: str = "light",
) -> str:
    cards = "".join(country_element(c) for c in countries)
    if error:
        status = _error(error)
    elif not countries:
        status = '<p class="empty-message">No countries found</p>'
    else:
        status = ""
    body = (
        f"{_filters(regions, query, region)}"
        f"{status}"
        f'<section class="countries-grid">{cards}</section>'
    )
    return _page("Where in the world?", body, theme, notice)


def render_detail_page(
    country: Country | None,
    *,
    name: str = "",
    error: str = "",
    theme: str = "light",
) -> str:
    back = '<a class="back-button" href="/">Back</a>'
    if country is not None:
        return _page(country.name, back + country_element(country, is_grid=False), theme)

    if not error:
        error = f'Country with name "{name}" not found!' if name else "No country name in URL"
    body = f'{back}<section class="country-details not-found">{_error(error)}</section>'
    return _page("Country not found", body, theme)


def _style_css() -> str:
    return """
body { margin: 0; font-family: "Nunito Sans", sans-serif; background: #fafafa; color: #111517; }
body.dark-theme { background: #202c37; color: #fff; }
.header { display: flex; justify-content: space-between; align-items: center; padding: 1.5rem 4rem; background: #fff; box-shadow: 0 2px 4px rgba(0,0,0,.06); }
body.dark-theme .header, body.dark-theme .country, body.dark-theme .search-input { background: #2b3945; color: #fff; }
.logo { font-weight: 800; color: inherit; text-decoration: none; }
.theme-toggle button { background: none; border: none; color: inherit; cursor: pointer; }
main { padding: 2rem 4rem; }
.filters { display: flex; justify-content: space-between; flex-wrap: wrap; gap: 1rem; margin-bottom: 2rem; }
.search-input { padding: 1rem 2rem; min-width: 320px; border: none; border-radius: 5px; box-shadow: 0 2px 9px rgba(0,0,0,.05); }
.dropdown-body { list-style: none; padding: 0; display: flex; gap: .75rem; }
.dropdown-body a { color: inherit; }
.countries-grid { display: grid; grid-template-columns: repeat(auto-fill, minmax(250px, 1fr)); gap: 3rem; }
.country { display: block; background: #fff; border-radius: 5px; overflow: hidden; color: inherit; text-decoration: none; box-shadow: 0 0 7px rgba(0,0,0,.03); }
.scale-effect:hover { transform: scale(1.03); }
.country-flag img { width: 100%; aspect-ratio: 5 / 3; object-fit: cover; }
.country-info { padding: 1rem 1.5rem 2rem; }
.country-details { display: grid; grid-template-columns: 1fr 1fr; gap: 4rem; margin-top: 3rem; }
.error-message, .empty-message { font-weight: 600; }
#toast { position: fixed; bottom: 10px; left: 50%; transform: translateX(-50%); background: #444; color: #fff; padding: 8px 15px; border-radius: 4px; font-size: 14px; animation: toast-fade 1.3s forwards; }
@keyframes toast-fade { 0%, 77% { opacity: 1; } 100% { opacity: 0; visibility: hidden; } }
"""

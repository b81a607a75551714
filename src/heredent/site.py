"""Site descriptions: load a TOML file into a BlogPage, and page statistics."""

from __future__ import annotations

import re
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from heredent.errors import SiteError
from heredent.page import DEFAULT_READ_MORE, BlogPage, Link, Logo

SEMANTIC_ELEMENTS: tuple[str, ...] = (
    "header",
    "nav",
    "main",
    "article",
    "aside",
    "footer",
    "section",
    "figure",
)


@dataclass(frozen=True, slots=True)
class PageStats:
    """Summary numbers for a generated page."""

    class_count: int
    semantic_count: int
    size_bytes: int
    line_count: int

    @property
    def size_kb(self) -> float:
        return self.size_bytes / 1024


def load_site(path: Path) -> dict[str, Any]:
    """Read and parse a TOML site description."""
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except OSError as exc:
        raise SiteError(f"cannot read site file: {exc.strerror}", path) from None
    except tomllib.TOMLDecodeError as exc:
        raise SiteError(f"invalid TOML: {exc}", path) from None


def build_page(site: dict[str, Any], path: Path) -> BlogPage:
    """Build a BlogPage from a parsed site description.

    Links accept either ``url`` or ``href``; posts accept ``read_more_href``
    as an alias for ``url``.
    """
    title = _get_str(site, "title", path, required=True)
    page = BlogPage(
        title,
        subtitle=_get_str(site, "subtitle", path) or "",
        lang=_get_str(site, "lang", path) or "en",
    )

    logo = site.get("logo")
    if logo is not None:
        if not isinstance(logo, dict):
            raise SiteError("expected a table", path, "logo")
        page.set_logo(
            Logo(
                _get_str(logo, "src", path, "logo", required=True),
                alt=_get_str(logo, "alt", path, "logo") or "",
                caption=_get_str(logo, "caption", path, "logo") or "",
            )
        )

    page.set_nav_links(_links(site, "nav", path))
    page.set_pager_links(_links(site, "pager", path))
    page.set_categories(_links(site, "categories", path))

    for i, post in enumerate(_tables(site, "posts", path)):
        where = f"posts[{i}]"
        if "date" not in post:
            raise SiteError("missing required key 'date'", path, where)
        url = _get_str(post, "url", path, where) or _get_str(post, "read_more_href", path, where)
        page.add_post(
            _get_str(post, "title", path, where, required=True),
            post["date"],
            datetime=_get_str(post, "datetime", path, where),
            content=_get_str(post, "content", path, where) or "",
            url=url or "#",
            read_more_text=_get_str(post, "read_more_text", path, where) or DEFAULT_READ_MORE,
        )

    footer = _get_str(site, "footer", path)
    if footer is not None:
        page.set_footer(footer)

    alerts = site.get("alerts", [])
    if not isinstance(alerts, list) or not all(isinstance(a, str) for a in alerts):
        raise SiteError("expected a list of strings", path, "alerts")
    for alert in alerts:
        page.add_alert(alert)

    return page


def page_stats(html: str) -> PageStats:
    """Count class attributes and semantic elements in generated HTML."""
    semantic = 0
    for element in SEMANTIC_ELEMENTS:
        semantic += len(re.findall(rf"<{element}[\s>]", html))
    return PageStats(
        class_count=html.count('class="'),
        semantic_count=semantic,
        size_bytes=len(html.encode("utf-8")),
        line_count=len(html.split("\n")),
    )


def _get_str(
    table: dict[str, Any],
    key: str,
    path: Path,
    where: str | None = None,
    *,
    required: bool = False,
) -> str | None:
    value = table.get(key)
    if value is None:
        if required:
            raise SiteError(f"missing required key '{key}'", path, where)
        return None
    if not isinstance(value, str):
        name = f"{where}.{key}" if where else key
        raise SiteError(f"expected a string, got {type(value).__name__}", path, name)
    return value


def _tables(site: dict[str, Any], key: str, path: Path) -> list[dict[str, Any]]:
    items = site.get(key, [])
    if not isinstance(items, list) or not all(isinstance(t, dict) for t in items):
        raise SiteError("expected an array of tables", path, key)
    return items


def _links(site: dict[str, Any], key: str, path: Path) -> list[Link]:
    links: list[Link] = []
    for i, item in enumerate(_tables(site, key, path)):
        where = f"{key}[{i}]"
        url = _get_str(item, "url", path, where) or _get_str(item, "href", path, where)
        if url is None:
            raise SiteError("missing required key 'url'", path, where)
        links.append(
            Link(
                _get_str(item, "text", path, where, required=True),
                url,
                _get_str(item, "aria_current", path, where),
            )
        )
    return links

"""Add head items from CLI options (CSS, JS, meta tags) to a page."""

from __future__ import annotations

from heredent.page import BlogPage


def inject_head_items(
    page: BlogPage,
    css_files: list[str],
    js_files: list[str],
    meta_tags: list[tuple[str, str]],
) -> BlogPage:
    """Append stylesheet, script, and meta entries to *page*.

    Entries already present on the page are not added twice. Returns the
    same page for chaining.
    """
    for href in css_files:
        if href not in page.stylesheets:
            page.add_stylesheet(href)

    for src in js_files:
        if src not in page.scripts:
            page.add_script(src)

    for name, content in meta_tags:
        if (name, content) not in page.meta_tags:
            page.add_meta(name, content)

    return page

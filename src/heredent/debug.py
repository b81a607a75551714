"""--debug page model dump to stderr."""

from __future__ import annotations

import sys
from typing import TextIO

from heredent.page import BlogPage, Link, Post


def dump_page(page: BlogPage, *, file: TextIO | None = None) -> None:
    """Print a human-readable outline of *page* to *file*."""
    f = file if file is not None else sys.stderr
    f.write(f"BlogPage {page.title!r} lang={page.lang!r}\n")
    if page.subtitle:
        f.write(f"{_indent(1)}Subtitle({page.subtitle!r})\n")
    if page.logo is not None:
        f.write(f"{_indent(1)}Logo src={page.logo.src!r} caption={page.logo.caption!r}\n")
    _dump_head(page, 1, f)
    _dump_links("Nav", page.nav_links, 1, f)
    _dump_links("Categories", page.categories, 1, f)
    f.write(f"{_indent(1)}Posts ({len(page.posts)})\n")
    for post in page.posts:
        _dump_post(post, 2, f)
    _dump_links("Pager", page.pager_links, 1, f)
    f.write(f"{_indent(1)}Footer({page.footer_text!r})\n")
    if page.alerts:
        f.write(f"{_indent(1)}Alerts ({len(page.alerts)})\n")


def _indent(depth: int) -> str:
    return "  " * depth


def _dump_head(page: BlogPage, depth: int, f: TextIO) -> None:
    f.write(f"{_indent(depth)}Head\n")
    for href in page.stylesheets:
        f.write(f"{_indent(depth + 1)}Stylesheet({href!r})\n")
    for src in page.scripts:
        f.write(f"{_indent(depth + 1)}Script({src!r})\n")
    for name, content in page.meta_tags:
        f.write(f"{_indent(depth + 1)}Meta {name}={content!r}\n")


def _dump_links(label: str, links: list[Link], depth: int, f: TextIO) -> None:
    if not links:
        return
    f.write(f"{_indent(depth)}{label}\n")
    for link in links:
        current = f" aria-current={link.aria_current!r}" if link.aria_current else ""
        f.write(f"{_indent(depth + 1)}Link {link.text!r} -> {link.url!r}{current}\n")


def _dump_post(post: Post, depth: int, f: TextIO) -> None:
    lines = post.content.count("\n") + 1 if post.content else 0
    f.write(f"{_indent(depth)}Post {post.title!r} date={post.datetime!r} url={post.url!r}\n")
    f.write(f"{_indent(depth + 1)}Content ({lines} lines)\n")

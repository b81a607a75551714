"""BlogPage: builds a classless, semantic blog page from structured data.

Each fragment is a small template passed through ``html()``, so nested
fragments can be written at whatever indentation reads best here and still
line up in the output. User-supplied strings are escaped before they are
interpolated; post content, footer text and alerts are trusted markup.

Usage::

    page = BlogPage("My Blog", subtitle="Thoughts on web design")
    page.set_logo(Logo("logo.svg", alt="Site logo", caption="My Logo"))
    page.add_nav_link("Home", "/")
    page.add_post("Hello World", "2025-11-08", content="<p>...</p>")
    document = page.render()
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date as _date

from heredent.escape import escape
from heredent.formats import format_date
from heredent.template import html

DEFAULT_STYLESHEETS: tuple[str, ...] = (
    "classless.reset.css",
    "classless.base.css",
    "classless.blog.css",
)

DEFAULT_READ_MORE = "Read more →"


@dataclass(frozen=True, slots=True)
class Link:
    """A navigation, pager, or category link."""

    text: str
    url: str
    aria_current: str | None = None


@dataclass(frozen=True, slots=True)
class Logo:
    """Site logo, rendered as a figure."""

    src: str
    alt: str = ""
    caption: str = ""


@dataclass(frozen=True, slots=True)
class Post:
    """A blog post rendered as an article."""

    title: str
    date: object
    datetime: str | None = None
    content: str = ""
    url: str = "#"
    read_more_text: str = DEFAULT_READ_MORE


@dataclass
class BlogPage:
    """Semantic control layer for the classless blog layout."""

    title: str
    subtitle: str = ""
    lang: str = "en"
    logo: Logo | None = None
    nav_links: list[Link] = field(default_factory=list)
    pager_links: list[Link] = field(default_factory=list)
    categories: list[Link] = field(default_factory=list)
    posts: list[Post] = field(default_factory=list)
    footer_text: str = field(
        default_factory=lambda: f"&copy; {_date.today().year} All rights reserved."
    )
    alerts: list[str] = field(default_factory=list)
    stylesheets: list[str] = field(default_factory=lambda: list(DEFAULT_STYLESHEETS))
    scripts: list[str] = field(default_factory=list)
    meta_tags: list[tuple[str, str]] = field(default_factory=list)

    # -- builder ----------------------------------------------------------

    def set_logo(self, logo: Logo | None) -> BlogPage:
        self.logo = logo
        return self

    def add_nav_link(self, text: str, url: str, aria_current: str | None = None) -> BlogPage:
        self.nav_links.append(Link(text, url, aria_current))
        return self

    def set_nav_links(self, links: Iterable[Link]) -> BlogPage:
        self.nav_links = list(links)
        return self

    def add_pager_link(self, text: str, url: str, aria_current: str | None = None) -> BlogPage:
        self.pager_links.append(Link(text, url, aria_current))
        return self

    def set_pager_links(self, links: Iterable[Link]) -> BlogPage:
        self.pager_links = list(links)
        return self

    def add_category(self, text: str, url: str) -> BlogPage:
        self.categories.append(Link(text, url))
        return self

    def set_categories(self, categories: Iterable[Link]) -> BlogPage:
        self.categories = list(categories)
        return self

    def add_post(
        self,
        title: str,
        date: object,
        datetime: str | None = None,
        content: str = "",
        url: str = "#",
        read_more_text: str = DEFAULT_READ_MORE,
    ) -> BlogPage:
        """Add a post. The machine-readable datetime defaults to *date*."""
        if datetime is None:
            datetime = date if isinstance(date, str) else _iso(date)
        self.posts.append(Post(title, date, datetime, content, url, read_more_text))
        return self

    def set_footer(self, text: str) -> BlogPage:
        self.footer_text = text
        return self

    def add_alert(self, content: str) -> BlogPage:
        self.alerts.append(content)
        return self

    def add_stylesheet(self, href: str) -> BlogPage:
        self.stylesheets.append(href)
        return self

    def add_script(self, src: str) -> BlogPage:
        self.scripts.append(src)
        return self

    def add_meta(self, name: str, content: str) -> BlogPage:
        self.meta_tags.append((name, content))
        return self

    # -- rendering --------------------------------------------------------

    def render(self) -> str:
        """Render the complete HTML document."""
        return html(
            """
            <!DOCTYPE html>
            <html lang="{lang}">
            <head>
              <meta charset="UTF-8">
              <meta name="viewport" content="width=device-width, initial-scale=1.0">
              <title>{title}</title>
              {head}
            </head>
            <body>
              {body}
            </body>
            </html>
            """,
            lang=escape(self.lang),
            title=escape(self.title),
            head=self._render_head_items(),
            body=self.render_body(),
        )

    def render_body(self) -> str:
        """Render just the body content (useful for partial rendering)."""
        sections = [
            self._render_header(),
            self._render_logo(),
            self._render_nav(),
            self._render_aside(),
            self._render_main(),
            self._render_footer(),
            self._render_alert_region(),
        ]
        return "\n".join(s for s in sections if s)

    def _render_head_items(self) -> str:
        items: list[str] = []
        for href in self.stylesheets:
            items.append(f'<link rel="stylesheet" href="{escape(href)}">')
        for src in self.scripts:
            items.append(f'<script src="{escape(src)}"></script>')
        for name, content in self.meta_tags:
            items.append(f'<meta name="{escape(name)}" content="{escape(content)}">')
        return "\n".join(items)

    def _render_header(self) -> str:
        lines = [f"<h1>{escape(self.title)}</h1>"]
        if self.subtitle:
            lines.append(f"<p>{escape(self.subtitle)}</p>")
        return html(
            """
        <header>
          {}
        </header>""",
            "\n".join(lines),
        )

    def _render_logo(self) -> str:
        if self.logo is None or not self.logo.src:
            return ""

        lines = [f'<img src="{escape(self.logo.src)}" alt="{escape(self.logo.alt)}">']
        if self.logo.caption:
            lines.append(f"<figcaption>{escape(self.logo.caption)}</figcaption>")
        return html(
            """
            <figure>
              {}
            </figure>""",
            "\n".join(lines),
        )

    def _render_nav(self) -> str:
        if not self.nav_links:
            return ""
        return html(
            """
              <nav aria-label="Primary navigation">
                <ul>
                  {}
                </ul>
              </nav>
            """,
            _render_link_items(self.nav_links),
        )

    def _render_pager(self) -> str:
        if not self.pager_links:
            return ""
        return html(
            """
              <nav aria-label="Pagination">
                <ul>
                  {}
                </ul>
              </nav>
            """,
            _render_link_items(self.pager_links),
        )

    def _render_aside(self) -> str:
        if not self.categories:
            return ""
        return html(
            """
              <aside aria-label="Sidebar">
                <h2>Categories</h2>
                <ul>
                  {}
                </ul>
              </aside>
            """,
            _render_link_items(self.categories),
        )

    def _render_main(self) -> str:
        if not self.posts:
            return html(
                """
                <main>
                  <section aria-label="Latest posts">
                    <p>No posts yet.</p>
                  </section>
                </main>
                """
            )

        blocks = [
            html(
                """
                <section aria-label="Latest posts">
                  {}
                </section>""",
                "\n".join(_render_article(post) for post in self.posts),
            )
        ]
        pager = self._render_pager()
        if pager:
            blocks.append(pager)
        return html(
            """
              <main>
                {}
              </main>
              """,
            "\n".join(blocks),
        )

    def _render_footer(self) -> str:
        return html("<footer><p>{}</p></footer>", self.footer_text)

    def _render_alert_region(self) -> str:
        if not self.alerts:
            return '<section id="alert-region" aria-live="polite"></section>'
        return html(
            """
              <section id="alert-region" aria-live="polite">
                {}
              </section>""",
            "\n".join(self.alerts),
        )


def _render_link_items(links: Iterable[Link]) -> str:
    items: list[str] = []
    for link in links:
        current = f' aria-current="{escape(link.aria_current)}"' if link.aria_current else ""
        items.append(f'<li><a href="{escape(link.url)}"{current}>{escape(link.text)}</a></li>')
    return "\n".join(items)


def _render_article(post: Post) -> str:
    return html(
        """

          <article>
            <header>
              <h2>{title}</h2>
              <p><time datetime="{datetime}">{date}</time></p>
            </header>
            {content}
            <footer>
              <a href="{url}">{read_more}</a>
            </footer>
          </article>""",
        title=escape(post.title),
        datetime=escape(post.datetime),
        date=escape(format_date(post.date)),
        content=post.content,
        url=escape(post.url),
        read_more=escape(post.read_more_text),
    )


def _iso(value: object) -> str:
    if isinstance(value, _date):
        return value.isoformat()
    return "" if value is None else str(value)

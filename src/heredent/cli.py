"""Command-line interface: generate a static blog page from a site file."""

from __future__ import annotations

import argparse
import shutil
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from heredent.errors import SiteError


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    site_file: Path
    output_dir: Path
    lang: str | None
    css_files: list[str]
    js_files: list[str]
    meta_tags: list[tuple[str, str]]
    copy_files: list[Path]
    stats: bool
    watch: bool
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="heredent",
        description="Generate a classless static blog page from a TOML site file",
    )
    p.add_argument("site", help="Site description (.toml)")
    p.add_argument("-o", "--output", metavar="DIR", help="Output directory (default: dist)")
    p.add_argument("--lang", help="Document language (overrides the site file)")
    p.add_argument(
        "--css",
        action="append",
        default=[],
        metavar="FILE",
        help="Extra stylesheet to link (repeatable)",
    )
    p.add_argument(
        "--js",
        action="append",
        default=[],
        metavar="FILE",
        help="Script to include (repeatable)",
    )
    p.add_argument(
        "--meta",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Meta tag to add (repeatable)",
    )
    p.add_argument("--stats", action="store_true", help="Print page statistics to stderr")
    p.add_argument("--watch", action="store_true", help="Watch the site file and regenerate")
    p.add_argument("--debug", action="store_true", help="Dump the page model to stderr")
    return p


def parse_meta_arg(s: str) -> tuple[str, str]:
    """Parse a NAME=VALUE string into (name, value) for meta tags."""
    if "=" not in s:
        raise argparse.ArgumentTypeError(f"invalid meta format (expected NAME=VALUE): {s}")
    name, _, value = s.partition("=")
    return name, value


def resolve_options(args: argparse.Namespace, site: dict[str, Any]) -> CliOptions:
    """Merge the site file's [output] table and CLI args into CliOptions.

    Precedence: site file < CLI flags.
    """
    site_file = Path(args.site)
    site_dir = site_file.parent
    if not site_dir.parts:
        site_dir = Path(".")

    output: dict[str, Any] = {}
    cfg_output = site.get("output")
    if isinstance(cfg_output, dict):
        output = cfg_output

    # Output directory: site file < CLI
    output_dir = Path("dist")
    cfg_dir = output.get("dir")
    if isinstance(cfg_dir, str):
        output_dir = site_dir / cfg_dir
    if args.output:
        output_dir = Path(args.output)

    # Stylesheets: site file, then CLI
    css_files: list[str] = []
    cfg_css = output.get("stylesheets")
    if isinstance(cfg_css, list):
        css_files.extend(str(f) for f in cfg_css)
    css_files.extend(args.css)

    # Scripts: site file, then CLI
    js_files: list[str] = []
    cfg_js = output.get("scripts")
    if isinstance(cfg_js, list):
        js_files.extend(str(f) for f in cfg_js)
    js_files.extend(args.js)

    # Meta tags: site file, then CLI
    meta_tags: list[tuple[str, str]] = []
    cfg_meta = site.get("meta")
    if isinstance(cfg_meta, dict):
        for k, v in cfg_meta.items():
            meta_tags.append((str(k), str(v)))
    for raw in args.meta:
        meta_tags.append(parse_meta_arg(raw))

    # Assets copied next to index.html, resolved against the site file
    copy_files: list[Path] = []
    cfg_copy = output.get("copy")
    if isinstance(cfg_copy, list):
        copy_files.extend(site_dir / str(f) for f in cfg_copy)

    return CliOptions(
        site_file=site_file,
        output_dir=output_dir,
        lang=args.lang,
        css_files=css_files,
        js_files=js_files,
        meta_tags=meta_tags,
        copy_files=copy_files,
        stats=args.stats,
        watch=args.watch,
        debug=args.debug,
    )


def render_site(options: CliOptions, site: dict[str, Any]) -> str:
    """Build the page described by *site* and render it to HTML."""
    from heredent.debug import dump_page
    from heredent.inject import inject_head_items
    from heredent.site import build_page

    page = build_page(site, options.site_file)
    if options.lang:
        page.lang = options.lang
    page = inject_head_items(page, options.css_files, options.js_files, options.meta_tags)

    if options.debug:
        dump_page(page, file=sys.stderr)

    return page.render() + "\n"


def generate(options: CliOptions, site: dict[str, Any]) -> Path:
    """Render the site, copy assets, and write index.html. Returns its path."""
    html = render_site(options, site)

    options.output_dir.mkdir(parents=True, exist_ok=True)
    for source in options.copy_files:
        if source.is_file():
            shutil.copyfile(source, options.output_dir / source.name)
            print(f"Copied {source.name}", file=sys.stderr)
        else:
            print(f"warning: asset not found: {source}", file=sys.stderr)

    index = options.output_dir / "index.html"
    index.write_text(html, encoding="utf-8")
    print(f"Generated {index} ({len(html.encode('utf-8'))} bytes)", file=sys.stderr)

    if options.stats:
        print_stats(html)
    return index


def print_stats(html: str) -> None:
    """Print page statistics to stderr."""
    from heredent.site import page_stats

    stats = page_stats(html)
    print(f"Classes used: {stats.class_count} (target: 0)", file=sys.stderr)
    print(f"Semantic elements: {stats.semantic_count}", file=sys.stderr)
    print(f"HTML size: {stats.size_kb:.2f} KB", file=sys.stderr)
    print(f"Lines of HTML: {stats.line_count}", file=sys.stderr)


def watch_loop(args: argparse.Namespace) -> None:
    """Poll the site file for changes, regenerate on each modification."""
    from heredent.site import load_site

    site_file = Path(args.site)
    last_mtime = 0.0
    print(f"Watching {site_file} for changes...", file=sys.stderr)
    try:
        while True:
            try:
                mtime = site_file.stat().st_mtime
            except OSError:
                time.sleep(0.5)
                continue
            if mtime != last_mtime:
                last_mtime = mtime
                try:
                    site = load_site(site_file)
                    generate(resolve_options(args, site), site)
                except (SiteError, argparse.ArgumentTypeError) as exc:
                    print(str(exc), file=sys.stderr)
            time.sleep(0.5)
    except KeyboardInterrupt:
        pass


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    from heredent.site import load_site

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.watch:
        watch_loop(args)
        return 0

    try:
        site = load_site(Path(args.site))
    except SiteError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    try:
        options = resolve_options(args, site)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        generate(options, site)
    except SiteError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    return 0


def run() -> None:
    """Console-script wrapper around main()."""
    sys.exit(main())

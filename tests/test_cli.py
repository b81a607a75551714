"""Tests for the CLI module: arg parsing, option merging, exit codes, end-to-end."""

from __future__ import annotations

import argparse
from pathlib import Path

import pytest

from heredent.cli import build_parser, main, parse_meta_arg, render_site, resolve_options
from heredent.site import load_site

# ---------------------------------------------------------------------------
# Argument parsing helpers
# ---------------------------------------------------------------------------


class TestParseHelpers:
    def test_parse_meta_arg_simple(self) -> None:
        assert parse_meta_arg("viewport=width=device-width") == (
            "viewport",
            "width=device-width",
        )

    def test_parse_meta_arg_empty_value(self) -> None:
        assert parse_meta_arg("robots=") == ("robots", "")

    def test_parse_meta_arg_no_equals_raises(self) -> None:
        with pytest.raises(argparse.ArgumentTypeError):
            parse_meta_arg("noequals")


class TestArgParsing:
    def test_site_only(self) -> None:
        ns = build_parser().parse_args(["site.toml"])
        assert ns.site == "site.toml"
        assert ns.output is None
        assert ns.css == []

    def test_repeatable_flags(self) -> None:
        ns = build_parser().parse_args(
            ["site.toml", "--css", "a.css", "--css", "b.css", "--js", "x.js", "--meta", "k=v"]
        )
        assert ns.css == ["a.css", "b.css"]
        assert ns.js == ["x.js"]
        assert ns.meta == ["k=v"]

    def test_switches(self) -> None:
        ns = build_parser().parse_args(["site.toml", "--stats", "--watch", "--debug"])
        assert ns.stats is True
        assert ns.watch is True
        assert ns.debug is True


# ---------------------------------------------------------------------------
# Option merging: site file < CLI
# ---------------------------------------------------------------------------


class TestResolveOptions:
    def _resolve(self, argv: list[str], site: dict):
        return resolve_options(build_parser().parse_args(argv), site)

    def test_defaults(self, tmp_path: Path) -> None:
        opts = self._resolve([str(tmp_path / "site.toml")], {})
        assert opts.output_dir == Path("dist")
        assert opts.css_files == []
        assert opts.lang is None

    def test_output_dir_relative_to_site(self, tmp_path: Path) -> None:
        opts = self._resolve([str(tmp_path / "site.toml")], {"output": {"dir": "public"}})
        assert opts.output_dir == tmp_path / "public"

    def test_cli_output_wins(self, tmp_path: Path) -> None:
        site = {"output": {"dir": "public"}}
        opts = self._resolve([str(tmp_path / "site.toml"), "-o", "out"], site)
        assert opts.output_dir == Path("out")

    def test_lists_extend_site_values(self, tmp_path: Path) -> None:
        site = {
            "output": {"stylesheets": ["site.css"], "scripts": ["site.js"]},
            "meta": {"author": "Site"},
        }
        argv = [str(tmp_path / "s.toml"), "--css", "cli.css", "--js", "cli.js", "--meta", "k=v"]
        opts = self._resolve(argv, site)
        assert opts.css_files == ["site.css", "cli.css"]
        assert opts.js_files == ["site.js", "cli.js"]
        assert opts.meta_tags == [("author", "Site"), ("k", "v")]

    def test_copy_files_resolved(self, tmp_path: Path) -> None:
        opts = self._resolve([str(tmp_path / "s.toml")], {"output": {"copy": ["a.css"]}})
        assert opts.copy_files == [tmp_path / "a.css"]

    def test_bad_meta_raises(self, tmp_path: Path) -> None:
        with pytest.raises(argparse.ArgumentTypeError):
            self._resolve([str(tmp_path / "s.toml"), "--meta", "bad"], {})


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------


class TestExitCodes:
    def test_success(self, site_file: Path, tmp_path: Path) -> None:
        assert main([str(site_file), "-o", str(tmp_path / "out")]) == 0

    def test_missing_site_returns_1(self, tmp_path: Path, capsys) -> None:
        assert main([str(tmp_path / "missing.toml")]) == 1
        assert "cannot read site file" in capsys.readouterr().err

    def test_invalid_toml_returns_1(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.toml"
        path.write_text("[[posts]\n")
        assert main([str(path)]) == 1

    def test_invalid_site_returns_1(self, tmp_path: Path, capsys) -> None:
        path = tmp_path / "notitle.toml"
        path.write_text('subtitle = "x"\n')
        assert main([str(path), "-o", str(tmp_path / "out")]) == 1
        assert "missing required key 'title'" in capsys.readouterr().err
        assert not (tmp_path / "out" / "index.html").exists()

    def test_bad_meta_returns_2(self, site_file: Path) -> None:
        assert main([str(site_file), "--meta", "noequals"]) == 2


# ---------------------------------------------------------------------------
# End-to-end generation
# ---------------------------------------------------------------------------


class TestGenerate:
    def test_writes_index(self, site_file: Path, tmp_path: Path) -> None:
        out = tmp_path / "out"
        assert main([str(site_file), "-o", str(out)]) == 0
        html = (out / "index.html").read_text(encoding="utf-8")
        assert html.startswith("<!DOCTYPE html>\n")
        assert html.endswith("</html>\n")
        assert "<title>The Classless Revolution</title>" in html
        assert '<time datetime="2025-11-08">November 8, 2025</time>' in html

    def test_post_content_indented(self, site_file: Path, tmp_path: Path) -> None:
        out = tmp_path / "out"
        main([str(site_file), "-o", str(out)])
        html = (out / "index.html").read_text(encoding="utf-8")
        assert "\n        <p>Remember the early web?</p>\n\n        <p>Semantic HTML.</p>\n" in html

    def test_lang_override(self, site_file: Path, tmp_path: Path) -> None:
        out = tmp_path / "out"
        main([str(site_file), "-o", str(out), "--lang", "cs"])
        assert '<html lang="cs">' in (out / "index.html").read_text(encoding="utf-8")

    def test_css_and_meta(self, site_file: Path, tmp_path: Path) -> None:
        out = tmp_path / "out"
        main([str(site_file), "-o", str(out), "--css", "extra.css", "--meta", "author=Me"])
        html = (out / "index.html").read_text(encoding="utf-8")
        assert '<link rel="stylesheet" href="extra.css">' in html
        assert '<meta name="author" content="Me">' in html

    def test_copies_assets(self, tmp_path: Path, capsys) -> None:
        (tmp_path / "style.css").write_text("p { margin: 0 }")
        site = tmp_path / "site.toml"
        site.write_text('title = "T"\n[output]\ndir = "public"\ncopy = ["style.css", "gone.css"]\n')
        assert main([str(site)]) == 0
        assert (tmp_path / "public" / "style.css").read_text() == "p { margin: 0 }"
        assert (tmp_path / "public" / "index.html").is_file()
        assert "asset not found" in capsys.readouterr().err

    def test_stats(self, site_file: Path, tmp_path: Path, capsys) -> None:
        main([str(site_file), "-o", str(tmp_path / "out"), "--stats"])
        err = capsys.readouterr().err
        assert "Classes used: 0 (target: 0)" in err
        assert "Semantic elements: 11" in err

    def test_debug_dumps_page(self, site_file: Path, tmp_path: Path, capsys) -> None:
        main([str(site_file), "-o", str(tmp_path / "out"), "--debug"])
        err = capsys.readouterr().err
        assert "BlogPage 'The Classless Revolution'" in err


class TestRenderSite:
    def test_trailing_newline(self, site_file: Path) -> None:
        site = load_site(site_file)
        opts = resolve_options(build_parser().parse_args([str(site_file)]), site)
        html = render_site(opts, site)
        assert html.endswith("</html>\n")
        assert not html.endswith("\n\n")

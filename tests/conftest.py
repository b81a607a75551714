"""Shared test fixtures and helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

SAMPLE_SITE = '''
title = "The Classless Revolution"
subtitle = "Rethinking web development"
footer = "&copy; 2025 The Classless Revolution."

[logo]
src = "/assets/logo.svg"
alt = "Logo"
caption = "Classless"

[[nav]]
text = "Home"
href = "/"
aria_current = "page"

[[nav]]
text = "About"
href = "/about"

[[categories]]
text = "CSS"
url = "/category/css"

[[posts]]
title = "The Death of Class Soup"
date = 2025-11-08
content = """
<p>Remember the early web?</p>

<p>Semantic HTML.</p>
"""
read_more_href = "/posts/death-of-class-soup"
read_more_text = "Continue reading"
'''


@pytest.fixture
def site_file(tmp_path: Path) -> Path:
    """Write a small but complete site description and return its path."""
    path = tmp_path / "site.toml"
    path.write_text(SAMPLE_SITE, encoding="utf-8")
    return path


def assert_normalized(text: str) -> None:
    """Assert the output invariants every normalized string satisfies."""
    lines = text.split("\n")
    if text:
        assert lines[0].strip(), f"leading blank line in {text!r}"
        assert lines[-1].strip(), f"trailing blank line in {text!r}"
    for line in lines:
        assert line == line.rstrip(" \t"), f"trailing whitespace in {line!r}"
    assert "\n\n\n" not in text, f"blank-line run in {text!r}"

"""Indentation-aware normalization of multi-line string templates."""

from __future__ import annotations

from heredent.escape import escape
from heredent.normalize import normalize
from heredent.template import html

__version__ = "0.1.0"

__all__ = ["escape", "html", "normalize", "__version__"]

"""Error types with formatted file context."""

from __future__ import annotations

from pathlib import Path


class SiteError(Exception):
    """Raised when a site description cannot be read or is invalid."""

    def __init__(self, message: str, path: Path, key: str | None = None) -> None:
        self.message = message
        self.path = path
        self.key = key
        super().__init__(self.format())

    def format(self) -> str:
        where = f"{self.key}: " if self.key else ""
        gutter = "  "
        return f"error: {where}{self.message}\n{gutter}--> {self.path}"

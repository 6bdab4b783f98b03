from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ExpandoError(Exception):
    """Base error envelope. The CLI prints these rather than tracebacks."""

    code: str
    message: str
    file: Optional[str] = None
    path: Optional[str] = None

    def __str__(self) -> str:
        parts: list[str] = []
        if self.file:
            parts.append(self.file)
        if self.path:
            parts.append(self.path)
        loc = ":".join(parts) if parts else "<input>"
        return f"{loc}: {self.code}: {self.message}"


class SourceLoadError(ExpandoError):
    pass


class ConfigError(ExpandoError):
    pass


class UsageError(ExpandoError):
    pass


class OutputError(ExpandoError):
    """Expanded lines could not be written (bad --out target, permissions)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AlternationGroup:
    start: int
    end: int  # exclusive, just past the closing parenthesis
    content: str


@dataclass(frozen=True)
class LineStats:
    index: int
    text: str
    group_sizes: tuple[int, ...]
    count: int
    comment: bool = False


@dataclass(frozen=True)
class ExpansionSummary:
    lines: int
    comments: int
    outputs: int

from __future__ import annotations

import re
from itertools import product
from typing import Iterable, Iterator, Optional, Sequence

from expando.core.model import AlternationGroup
from expando.utils.logger import get_logger

logger = get_logger(__name__)

# Whitespace is ASCII only: U+00A0 and other Unicode spaces are ordinary text.
WHITESPACE = " \t\n\v\f\r\0"

# A comment is any line whose first non-whitespace character is '#'.
COMMENT_RE = re.compile(r"^[ \t\n\v\f\r]*#")

# Alternation group grammar (scanned by _next_group):
#   group   := '(' content ')'
#   content := shortest run of non-newline characters up to the next ')'
# A '(' directly preceded by '\' never opens a group. ')' cannot be escaped.
OPEN = "("
CLOSE = ")"
ESCAPE = "\\"
ALT_SEP = "|"


def is_comment(line: str) -> bool:
    return COMMENT_RE.match(line) is not None


def filter_comments(lines: Iterable[str]) -> list[str]:
    """Return a new list without comment lines. The input is left untouched."""
    return [line for line in lines if not is_comment(line)]


def _next_group(line: str, pos: int = 0) -> Optional[AlternationGroup]:
    """Find the leftmost alternation group starting at or after `pos`.

    An unescaped '(' with no ')' later on the same line is skipped and the
    scan continues with the next '(' after it, so `(a (b|c)` yields the group
    `a (b|c`. Nested and unbalanced input is not validated.
    """
    i = line.find(OPEN, pos)
    while i != -1:
        if i == 0 or line[i - 1] != ESCAPE:
            close = line.find(CLOSE, i + 1)
            newline = line.find("\n", i + 1)
            if close != -1 and (newline == -1 or close < newline):
                return AlternationGroup(start=i, end=close + 1, content=line[i + 1 : close])
        i = line.find(OPEN, i + 1)
    return None


def find_groups(line: str) -> list[AlternationGroup]:
    """Return every alternation group in `line`, left to right, non-overlapping."""
    groups: list[AlternationGroup] = []
    pos = 0
    while True:
        group = _next_group(line, pos)
        if group is None:
            return groups
        groups.append(group)
        pos = group.end


def tokenize(line: str) -> list[str]:
    """Return the raw contents of each group in `line`. Empty means nothing to expand."""
    return [g.content for g in find_groups(line)]


def split_alternatives(content: str) -> list[str]:
    """Split group content on '|'. Empty alternatives are kept."""
    return content.split(ALT_SEP)


def combinations(alternatives: Sequence[Sequence[str]]) -> Iterator[tuple[str, ...]]:
    """Yield the Cartesian product with the last group varying fastest.

    Zero groups produce a single empty combination.
    """
    return product(*alternatives)


def substitute(line: str, combination: Iterable[str]) -> str:
    """Replace groups with `combination` values, one at a time, leftmost first.

    Each value replaces whichever group is leftmost in the partially
    substituted string, so positions are re-scanned after every replacement.
    Values are inserted literally. The result is stripped.
    """
    out = line
    for value in combination:
        group = _next_group(out)
        if group is None:
            break
        out = out[: group.start] + value + out[group.end :]
    return out.strip(WHITESPACE)


def iter_expand(lines: Iterable[str], *, trim_unexpanded: bool = False) -> Iterator[str]:
    """Lazily expand `lines`; see `expand`."""
    for line in filter_comments(lines):
        contents = tokenize(line)
        if not contents:
            yield line.strip(WHITESPACE) if trim_unexpanded else line
            continue

        alternatives = [split_alternatives(c) for c in contents]
        logger.debug(
            "expanding %r: %d group(s), sizes=%s",
            line,
            len(alternatives),
            [len(a) for a in alternatives],
        )
        for combination in combinations(alternatives):
            yield substitute(line, combination)


def expand(lines: Iterable[str], *, trim_unexpanded: bool = False) -> list[str]:
    """Expand every alternation group in `lines` into its Cartesian product.

    `(I|we) heard you (love|hate) computers` becomes:

        I heard you love computers
        I heard you hate computers
        we heard you love computers
        we heard you hate computers

    Comment lines (first non-whitespace char '#') are dropped. Lines without
    groups pass through unchanged; they are only stripped when
    `trim_unexpanded` is set. Expanded lines are always stripped. Output keeps
    input order and is never deduplicated.
    """
    return list(iter_expand(lines, trim_unexpanded=trim_unexpanded))

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from expando.core.errors import OutputError, SourceLoadError
from expando.utils.logger import get_logger

logger = get_logger(__name__)


def read_lines(path: str, encoding: str = "utf-8") -> list[str]:
    """Read a text file into lines, without their trailing newline characters.

    Everything else about a line (leading/trailing spaces, comments) is kept;
    the expander owns those rules.
    """

    p = Path(path)
    if not p.is_file():
        raise SourceLoadError(
            code="E_FILE_NOT_FOUND",
            message="file does not exist",
            file=str(p),
        )

    try:
        raw = p.read_bytes()
    except OSError as e:  # pragma: no cover
        raise SourceLoadError(code="E_FILE_READ", message=str(e), file=str(p)) from e

    try:
        text = raw.decode(encoding)
    except (UnicodeDecodeError, LookupError) as e:
        raise SourceLoadError(code="E_FILE_DECODE", message=str(e), file=str(p)) from e

    lines = text.splitlines()
    logger.debug("read %d line(s) from %s", len(lines), p)
    return lines


def read_many(paths: Iterable[str], encoding: str = "utf-8") -> list[str]:
    """Concatenate the lines of several files, in the order given."""
    out: list[str] = []
    for path in paths:
        out.extend(read_lines(path, encoding=encoding))
    return out


def write_lines(path: str, lines: Iterable[str], encoding: str = "utf-8") -> int:
    """Write one line per row, each terminated by a newline. Returns the row count."""
    p = Path(path)
    count = 0
    try:
        if str(p.parent) not in (".", ""):
            p.parent.mkdir(parents=True, exist_ok=True)
        with p.open("w", encoding=encoding, newline="\n") as fh:
            for line in lines:
                fh.write(line)
                fh.write("\n")
                count += 1
    except (OSError, LookupError, UnicodeEncodeError) as e:
        raise OutputError(code="E_FILE_WRITE", message=str(e), file=str(p)) from e
    logger.debug("wrote %d line(s) to %s", count, p)
    return count

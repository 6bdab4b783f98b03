from __future__ import annotations

import json
import logging
from typing import Iterable, Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from expando.core.errors import ExpandoError, OutputError, SourceLoadError, UsageError
from expando.core.expand.config import OUTPUT_FORMATS, ExpandConfig, load_and_merge
from expando.core.expand.expander import iter_expand
from expando.core.io.lines import read_many, write_lines
from expando.core.report.stats import line_stats, summarize
from expando.utils.logger import configure_logging, get_logger

app = typer.Typer(add_completion=False, no_args_is_help=True)
logger = get_logger(__name__)


@app.callback()
def _callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug details to stderr"),
) -> None:
    """Expando CLI: expand (a|b) alternation groups into every phrasing."""
    configure_logging(logging.DEBUG if verbose else logging.WARNING)


@app.command("expand")
def expand_cmd(
    paths: list[str] = typer.Argument(..., help="Source text files, read in order"),
    out: Optional[str] = typer.Option(None, "--out", help="Write here instead of stdout"),
    format: Optional[str] = typer.Option(None, "--format", help="Output format: text|json"),
    config: Optional[str] = typer.Option(None, "--config", help="Optional YAML config file"),
    trim_unexpanded: Optional[bool] = typer.Option(
        None,
        "--trim-unexpanded/--keep-unexpanded",
        help="Also strip lines that contain no alternation groups",
    ),
) -> None:
    """Expand every line of PATHS into the Cartesian product of its alternatives."""
    cfg = _load_config(config, format=format, trim_unexpanded=trim_unexpanded)
    lines = _read(paths, cfg)

    expanded = iter_expand(lines, trim_unexpanded=cfg.trim_unexpanded)

    if cfg.format == "json":
        payload = json.dumps(list(expanded), indent=2, ensure_ascii=False)
        if out is None:
            typer.echo(payload)
            return
        _write(out, [payload], cfg)
        typer.echo(f"OK: wrote JSON to {out}", err=True)
        return

    if out is None:
        for line in expanded:
            typer.echo(line)
        return

    count = _write(out, expanded, cfg)
    typer.echo(f"OK: wrote {count} line(s) to {out}", err=True)


@app.command("stats")
def stats_cmd(
    paths: list[str] = typer.Argument(..., help="Source text files, read in order"),
    config: Optional[str] = typer.Option(None, "--config", help="Optional YAML config file"),
) -> None:
    """Show how many lines each source line expands to, without expanding."""
    cfg = _load_config(config)
    lines = _read(paths, cfg)

    stats = line_stats(lines)
    summary = summarize(stats)

    table = Table(title="Expansion stats")
    table.add_column("#", justify="right")
    table.add_column("groups", justify="right")
    table.add_column("sizes")
    table.add_column("outputs", justify="right")
    table.add_column("line")
    for s in stats:
        if s.comment:
            table.add_row(str(s.index), "-", "comment", "0", Text(s.text), style="dim")
            continue
        sizes = "x".join(str(n) for n in s.group_sizes) or "-"
        table.add_row(str(s.index), str(len(s.group_sizes)), sizes, str(s.count), Text(s.text))

    console = Console()
    console.print(table)
    typer.echo(
        f"lines={summary.lines} comments={summary.comments} outputs={summary.outputs}"
    )


def _load_config(config_file: Optional[str], **overrides) -> ExpandConfig:
    fmt = overrides.get("format")
    if fmt is not None and fmt not in OUTPUT_FORMATS:
        _print_errors(
            [
                UsageError(
                    code="E_UNKNOWN_FORMAT",
                    message=f"unknown format: {fmt} (choose one of: {', '.join(OUTPUT_FORMATS)})",
                    file=None,
                    path="format",
                )
            ]
        )
        raise typer.Exit(code=2)

    try:
        return load_and_merge(config_file, **overrides)
    except ExpandoError as e:
        _print_errors([e])
        raise typer.Exit(code=2)


def _read(paths: list[str], cfg: ExpandConfig) -> list[str]:
    try:
        lines = read_many(paths, encoding=cfg.encoding)
    except SourceLoadError as e:
        _print_errors([e])
        raise typer.Exit(code=1)
    logger.debug("loaded %d line(s) from %d file(s)", len(lines), len(paths))
    return lines


def _write(out: str, lines: Iterable[str], cfg: ExpandConfig) -> int:
    try:
        return write_lines(out, lines, encoding=cfg.encoding)
    except OutputError as e:
        _print_errors([e])
        raise typer.Exit(code=1)


def _print_errors(errors: list[ExpandoError]) -> None:
    errors_sorted = sorted(errors, key=lambda e: (e.file or "", e.path or "", e.code))
    for e in errors_sorted:
        typer.echo(str(e), err=True)


def main() -> None:
    app(prog_name="expando")


cli = typer.main.get_command(app)

if __name__ == "__main__":
    main()

from __future__ import annotations

import json
from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .config import CharcountConfig, load_optional_config
from .models import EmptyResultError
from .presets import PRESET_DESCRIPTIONS, PRESETS, parse_preset
from .report import count_report
from .version import __version__


app = typer.Typer(
    help="charcount — character frequency statistics",
    rich_markup_mode="rich",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"charcount {__version__}")
        raise typer.Exit()


@app.callback()
def _global_options(
    ctx: typer.Context,
    config: Path | None = typer.Option(
        None,
        "--config",
        help="Optional config.toml path (defaults to ./config.toml when present)",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Print the version and exit",
    ),
):
    cfg = load_optional_config(config)
    ctx.obj = {"config": cfg}


@app.command()
def presets() -> None:
    """List the named character presets."""
    table = Table(title="presets")
    table.add_column("name", style="cyan", no_wrap=True)
    table.add_column("counts")
    for name in PRESETS:
        table.add_row(name, PRESET_DESCRIPTIONS[name])
    Console().print(table)


@app.command("count")
def count_cmd(
    ctx: typer.Context,
    text: str | None = typer.Argument(None, help="Text to count (or use --in)"),
    inp: Path | None = typer.Option(None, "--in", dir_okay=False, help="Read text from this file"),
    preset: str = typer.Option("all", "--preset", help="all|ascii|numeric|alphabetic|alphanumeric|whitespace|no-whitespace|chinese"),
    top: int = typer.Option(0, "--top", help="Only print the first N entries (0 = all)"),
    most: bool = typer.Option(False, "--most", help="Keep only the most frequent characters"),
    least: bool = typer.Option(False, "--least", help="Keep only the least frequent characters"),
    with_count: int | None = typer.Option(None, "--with-count", help="Keep only characters seen exactly N times"),
    char: str | None = typer.Option(None, "--char", help="Look up a single character"),
    json_output: bool = typer.Option(False, "--json", help="Print JSON report to stdout"),
    json_pretty: bool = typer.Option(False, "--json-pretty", help="Print indented JSON report to stdout"),
    out: Path | None = typer.Option(None, "--out", dir_okay=False, help="Also write the JSON report here"),
    no_header: bool = typer.Option(False, "--no-header", help="Suppress the banner and table title"),
):
    """Count characters and print them by descending frequency."""
    cfg: CharcountConfig | None = None
    if isinstance(getattr(ctx, "obj", None), dict):
        cfg = ctx.obj.get("config")

    if cfg is not None:
        try:
            defaults = cfg.count_defaults()
        except ValueError as e:
            raise typer.BadParameter(f"config: {e}") from e

        if defaults.input is not None and inp is None and text is None:
            inp = defaults.input
        if defaults.preset is not None and str(preset) == "all":
            preset = defaults.preset
        if defaults.top is not None and int(top) == 0:
            top = defaults.top
        if defaults.json is not None and bool(json_output) is False:
            json_output = defaults.json

    if (text is None) == (inp is None):
        raise typer.BadParameter("provide either TEXT or --in")
    if inp is not None:
        if not inp.exists():
            raise typer.BadParameter(f"input file not found: {inp}")
        text = inp.read_text(encoding="utf-8", errors="replace")

    try:
        p = parse_preset(preset)
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e

    picked = [name for name, on in (("most", most), ("least", least), ("count", with_count is not None)) if on]
    if len(picked) > 1:
        raise typer.BadParameter("--most, --least and --with-count are mutually exclusive")
    query = picked[0] if picked else "all"

    if char is not None and len(char) != 1:
        raise typer.BadParameter("--char must be exactly one character")

    try:
        report = count_report(
            str(text),
            preset=p,
            query=query,
            with_count=with_count,
            char=char,
            top=int(top),
        )
    except EmptyResultError as e:
        typer.echo(f"Error: no characters matched preset '{p}' ({e})", err=True)
        raise typer.Exit(code=1)

    if out is not None:
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(json.dumps(report, ensure_ascii=False, indent=2) + "\n", encoding="utf-8")

    if bool(json_output) or bool(json_pretty):
        typer.echo(json.dumps(report, ensure_ascii=False, indent=2 if json_pretty else None))
        return

    console = Console()
    if not no_header:
        console.print(Panel("Counting characters…", title="charcount", border_style="cyan"))

    if char is not None:
        match = report["match"]
        if match is None:
            console.print(Text(f"{char!r}: not found"))
        else:
            console.print(Text(f"{match['char']!r}: {match['count']}"))
        return

    table = Table(title=None if no_header else f"{p} ({query})")
    table.add_column("char")
    table.add_column("code point")
    table.add_column("count", justify="right")
    for row in report["chars"]:
        c = row["char"]
        table.add_row(Text(repr(c)), f"U+{ord(c):04X}", str(row["count"]))
    console.print(table)
    console.print(f"total: {report['total']}  distinct: {report['distinct']}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()

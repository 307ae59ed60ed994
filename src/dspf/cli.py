import json
import logging
from pathlib import Path

import orjson
import typer
import yaml
from rich.console import Console
from rich.table import Table

from dspf.config import ConfigError, ParserConfig, load_config
from dspf.model import ParseResult
from dspf.parser import parse_document
from dspf.subfile import is_subfile

app = typer.Typer(help="Parse DDS display file source into records, fields and constants.")
console = Console()


def _read_text(path: Path) -> str:
    if not path.is_file():
        raise typer.BadParameter(f"Input file not found: {path}")
    return path.read_text(encoding="utf-8", errors="replace")


def _load_config(path: Path | None) -> ParserConfig:
    if path is None:
        return ParserConfig()
    if not path.is_file():
        raise typer.BadParameter(f"Config file not found: {path}")
    try:
        return load_config(path)
    except (ConfigError, yaml.YAMLError, json.JSONDecodeError) as exc:
        raise typer.BadParameter(f"Invalid config {path}: {exc}") from exc


def _parse(input: Path, cfg: ParserConfig) -> ParseResult:
    result = parse_document(_read_text(input), cfg)
    console.print(
        f"[bold green]Parsed[/] {result.line_count} lines, {len(result.records)} records from {input}"
    )
    return result


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log recovered parse issues."),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def parse(
    input: Path = typer.Argument(..., help="DDS display file source member."),
    config: Path | None = typer.Option(
        None, "--config", "-c", help="Optional parser config (json/yaml)."
    ),
    all_elements: bool = typer.Option(
        False, "--all-elements", help="Keep keyword elements in the element list."
    ),
) -> None:
    """Print the element tree and record mirror as JSON."""
    result = _parse(input, _load_config(config))
    payload = {
        "input": str(input),
        "lines": result.line_count,
        "display_sizes": result.display_sizes,
        "file_attributes": result.file_attributes,
        "elements": result.all_elements if all_elements else result.elements,
        "records": result.records,
    }
    console.print(orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode())


@app.command()
def records(
    input: Path = typer.Argument(..., help="DDS display file source member."),
    config: Path | None = typer.Option(
        None, "--config", "-c", help="Optional parser config (json/yaml)."
    ),
) -> None:
    """Summarize records, their line ranges and resolved sizes."""
    cfg = _load_config(config)
    result = _parse(input, cfg)

    table = Table(title=str(input))
    table.add_column("Record")
    table.add_column("Lines", justify="right")
    table.add_column("Size", justify="right")
    table.add_column("Source")
    table.add_column("Subfile")
    table.add_column("Fields", justify="right")
    table.add_column("Constants", justify="right")
    for entry in result.records:
        size = entry.size
        table.add_row(
            entry.name,
            f"{entry.start_line + 1}-{entry.end_line + 1}",
            f"{size.rows}x{size.cols}" if size else "-",
            size.source if size else "-",
            "yes" if is_subfile(entry.attributes, cfg.subfile_keyword) else "",
            str(len(entry.fields)),
            str(len(entry.constants)),
        )
    console.print(table)

    sizes = result.display_sizes
    console.print(
        f"[bold]Display size[/] {sizes.primary.rows}x{sizes.primary.cols} {sizes.primary.name}"
    )
    if sizes.secondary:
        console.print(
            f"[bold]Secondary size[/] {sizes.secondary.rows}x{sizes.secondary.cols} "
            f"{sizes.secondary.name}"
        )


if __name__ == "__main__":
    app()

#!/usr/bin/env python3
"""
whoisparser - Turn raw whois responses into structured records
"""
import json
import sys
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from core import __version__
from core.config import Config
from core.errors import ConfigError, WhoisParserError
from core.logger import setup_logger
from parsers import classify, parser_manager

# Initialize app
app = typer.Typer(
    help="whoisparser: Structured records from raw whois responses",
    add_completion=False,
)
console = Console()

logger = None  # Set by _initialize


class RecordTypeOption(str, Enum):
    AUTO = "auto"
    DOMAIN = "domain"
    IP = "ip"
    AS = "as"


class OutputFormat(str, Enum):
    JSON = "json"
    TABLE = "table"


def _initialize(verbose: bool, config_file: Optional[str]):
    """Load configuration, then configure logging from it"""
    global logger

    Config.initialize(config_file, verbose)
    logger = setup_logger(
        verbose or bool(Config.get("general.verbose", False)),
        log_file=Config.get("logging.file"),
        level=Config.get("logging.level", "INFO"),
    )


def read_input(source: str) -> str:
    """Read a saved whois response from a file, or stdin for "-" """
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8", errors="replace")


def _load_or_exit(source: str) -> str:
    try:
        return read_input(source)
    except OSError as e:
        console.print(f"[bold red]Cannot read {source}: {e.strerror or e}[/bold red]")
        raise typer.Exit(code=2)


def flatten(data: Any, prefix: str = "") -> Dict[str, str]:
    """
    Flatten nested record data into dotted field names

    Args:
        data: Output of WhoisResult.to_dict() or a part of it
        prefix: Dotted name of data

    Returns:
        Ordered mapping of field name to display value
    """
    rows: Dict[str, str] = {}

    if isinstance(data, dict):
        for key, value in data.items():
            rows.update(flatten(value, f"{prefix}.{key}" if prefix else key))
    elif isinstance(data, list) and any(isinstance(item, dict) for item in data):
        for index, item in enumerate(data):
            rows.update(flatten(item, f"{prefix}[{index}]"))
    elif isinstance(data, list):
        rows[prefix] = ", ".join(str(item) for item in data)
    else:
        rows[prefix] = str(data)

    return rows


def render_table(data: Dict[str, Any], title: str) -> Table:
    table = Table(title=title, show_lines=False)
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value")

    for field, value in flatten(data).items():
        table.add_row(field, Text(value))

    return table


@app.command()
def parse(
    source: str = typer.Argument("-", help="Saved whois response, or - for stdin"),
    record_type: Optional[RecordTypeOption] = typer.Option(None, "--type", "-t", help="Record type (auto, domain, ip, as)"),
    output: Optional[OutputFormat] = typer.Option(None, "--output", "-o", help="Output format (json, table)"),
    indent: Optional[int] = typer.Option(None, "--indent", help="JSON indentation"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
    config_file: Optional[str] = typer.Option(None, "--config", "-c", help="Path to config file"),
):
    """
    Parse a saved whois response and print the structured record.
    """
    try:
        _initialize(verbose, config_file)
    except ConfigError as e:
        console.print(f"[bold red]Error: {e}[/bold red]")
        raise typer.Exit(code=1)

    try:
        record_type = RecordTypeOption(record_type or Config.get("parser.record_type", "auto"))
        output = OutputFormat(output or Config.get("output.format", "json"))
    except ValueError as e:
        console.print(f"[bold red]Invalid configuration: {e}[/bold red]")
        raise typer.Exit(code=1)

    if indent is None:
        indent = Config.get("output.indent", 2)

    text = _load_or_exit(source)
    logger.debug(f"Read {len(text)} characters from {source}")

    try:
        forced = None if record_type is RecordTypeOption.AUTO else record_type.value
        result = parser_manager.parse(text, forced)
    except WhoisParserError as e:
        logger.debug(f"Parse failed: {e!r}")
        console.print(f"[bold red]Error: {e}[/bold red]")
        raise typer.Exit(code=1)

    data = result.to_dict()
    if output is OutputFormat.TABLE:
        console.print(render_table(data, f"{result.record_type.value} whois"))
    else:
        typer.echo(json.dumps(data, indent=indent, ensure_ascii=False))


@app.command("classify")
def classify_command(
    source: str = typer.Argument("-", help="Saved whois response, or - for stdin"),
):
    """
    Print the record type detected for a whois response.
    """
    text = _load_or_exit(source)
    typer.echo(classify(text).value)


@app.command()
def version():
    """Display whoisparser version information."""
    console.print(f"whoisparser v{__version__}")


if __name__ == "__main__":
    app()

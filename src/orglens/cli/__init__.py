#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Command-line interface for the orglens note parser.

Configuration is read from ``--config``, the ``ORGLENS_CONFIG`` environment
variable, or a discovered ``.orglens.toml`` / ``.orglens.yaml`` /
``.orglens.json`` / ``pyproject.toml`` file. Command-line flags override
configuration values.

Examples
--------
Render a note to an HTML fragment::

    $ orglens render notes/ideas.org

Dump the parsed tree as JSON::

    $ orglens render notes/ideas.org --format json

Print the note metadata as YAML front matter::

    $ orglens render notes/ideas.org --format metadata

Show the logbook as a table, oldest entry first::

    $ orglens logbook notes/task.org --oldest-first

Read from stdin::

    $ cat notes/task.org | orglens logbook - --format json

"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from rich.console import Console
from rich.table import Table

from orglens import __version__
from orglens.ast.serialization import ast_to_json, logbook_to_json
from orglens.cli.config import build_options, load_config_with_priority
from orglens.constants import CONFIG_ENV_VAR
from orglens.exceptions import OrgLensError
from orglens.logging_utils import configure_logging
from orglens.parsers.logbook import ClockEntry, StateChangeEntry, parse_logbook
from orglens.parsers.org import safe_parse_document
from orglens.renderers.html import HtmlRenderer
from orglens.utils.dates import format_logbook_date
from orglens.utils.metadata import format_yaml_frontmatter

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6

STDIN_MARKER = "-"

__all__ = ["create_parser", "main"]


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``orglens`` command.

    Returns
    -------
    argparse.ArgumentParser
        Parser with the ``render`` and ``logbook`` subcommands

    """
    parser = argparse.ArgumentParser(
        prog="orglens",
        description="Parse Org-mode notes into HTML, JSON, or logbook summaries.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", help="Path to a configuration file (TOML, YAML or JSON)")
    parser.add_argument("--no-config", action="store_true", help="Ignore configuration files")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", help="Also write log messages to this file")
    parser.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")

    subparsers = parser.add_subparsers(dest="command", required=True)

    render = subparsers.add_parser("render", help="Render a note as HTML, JSON, or YAML front matter")
    render.add_argument("input", help="Org file to read, or '-' for stdin")
    render.add_argument(
        "--format",
        dest="output_format",
        default="html",
        choices=["html", "json", "metadata"],
        help="Output format (default: html)",
    )
    render.add_argument("--out", "-o", help="Write output to this file instead of stdout")
    render.add_argument("--max-heading-level", type=int, help="Deepest heading level produced (1-6)")
    render.add_argument(
        "--no-extract-metadata",
        dest="extract_metadata",
        action="store_false",
        default=None,
        help="Leave document metadata empty",
    )
    render.add_argument(
        "--no-extract-planning",
        dest="extract_planning",
        action="store_false",
        default=None,
        help="Do not copy SCHEDULED/DEADLINE timestamps into metadata",
    )
    render.add_argument("--indent", type=int, default=2, help="JSON indentation (default: 2)")

    logbook = subparsers.add_parser("logbook", help="List clock and state-change entries of a logbook drawer")
    logbook.add_argument("input", help="Org file to read, or '-' for stdin")
    logbook.add_argument(
        "--format",
        dest="output_format",
        default="table",
        choices=["table", "json"],
        help="Output format (default: table)",
    )
    logbook.add_argument("--drawer", dest="drawer_name", help="Drawer name to scan (default: LOGBOOK)")
    logbook.add_argument(
        "--oldest-first",
        dest="most_recent_first",
        action="store_false",
        default=None,
        help="List entries in drawer order instead of newest first",
    )
    logbook.add_argument("--indent", type=int, default=2, help="JSON indentation (default: 2)")

    return parser


def _setup_logging(parsed_args: argparse.Namespace) -> None:
    log_level = logging.DEBUG if parsed_args.trace else getattr(logging, parsed_args.log_level)
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def _load_config(parsed_args: argparse.Namespace) -> Dict[str, Any]:
    if parsed_args.no_config:
        return {}
    return load_config_with_priority(parsed_args.config, os.environ.get(CONFIG_ENV_VAR))


def _cli_overrides(parsed_args: argparse.Namespace, names: Sequence[str]) -> Dict[str, Any]:
    """Collect the option flags that were given on the command line."""
    return {name: getattr(parsed_args, name) for name in names if getattr(parsed_args, name, None) is not None}


def _read_input(source: str) -> str | bytes:
    if source == STDIN_MARKER:
        return sys.stdin.read()
    return Path(source).read_bytes()


def _write_output(text: str, out_path: Optional[str]) -> None:
    if out_path:
        Path(out_path).write_text(text, encoding="utf-8")
        logger.info("Wrote %s", out_path)
    else:
        sys.stdout.write(text)
        if text and not text.endswith("\n"):
            sys.stdout.write("\n")


def _run_render(parsed_args: argparse.Namespace, config: Dict[str, Any]) -> int:
    org_options = build_options(config, "org")
    overrides = _cli_overrides(parsed_args, ("max_heading_level", "extract_metadata", "extract_planning"))
    if overrides:
        org_options = org_options.create_updated(**overrides)

    doc = safe_parse_document(_read_input(parsed_args.input), org_options)

    if parsed_args.output_format == "json":
        output = ast_to_json(doc, indent=parsed_args.indent)
    elif parsed_args.output_format == "metadata":
        output = format_yaml_frontmatter(doc.metadata)
    else:
        output = HtmlRenderer(build_options(config, "html")).render_to_string(doc)

    _write_output(output, parsed_args.out)

    if doc.error is not None:
        print(f"Error: {doc.error}", file=sys.stderr)
        return EXIT_PARSING_ERROR
    return EXIT_SUCCESS


def _describe_entry(entry: ClockEntry | StateChangeEntry, now: datetime) -> tuple[str, str, str]:
    """Return the kind label, detail text and duration column for a table row."""
    if isinstance(entry, ClockEntry):
        detail = "running" if entry.is_running else f"until {format_logbook_date(entry.end)}"  # type: ignore[arg-type]
        return "CLOCK", detail, entry.duration(now=now)
    detail = f"{entry.from_state or '(none)'} -> {entry.to_state}"
    return "STATE", detail, ""


def build_logbook_table(entries: Sequence[ClockEntry | StateChangeEntry], now: Optional[datetime] = None) -> Table:
    """Build a rich table summarizing logbook entries.

    Parameters
    ----------
    entries : sequence of ClockEntry or StateChangeEntry
        Entries in display order
    now : datetime, optional
        Reference time for the duration of running clocks

    Returns
    -------
    rich.table.Table
        One row per entry

    """
    now = now or datetime.now()
    table = Table(title="Logbook")
    table.add_column("When", style="cyan", no_wrap=True)
    table.add_column("Kind", style="magenta")
    table.add_column("Details", style="yellow")
    table.add_column("Duration", style="green", justify="right")
    table.add_column("Note", style="white")

    for entry in entries:
        kind, detail, duration = _describe_entry(entry, now)
        table.add_row(format_logbook_date(entry.timestamp), kind, detail, duration, entry.note or "")
    return table


def _run_logbook(parsed_args: argparse.Namespace, config: Dict[str, Any]) -> int:
    logbook_options = build_options(config, "logbook")
    overrides = _cli_overrides(parsed_args, ("drawer_name", "most_recent_first"))
    if overrides:
        logbook_options = logbook_options.create_updated(**overrides)

    entries = parse_logbook(_read_input(parsed_args.input), logbook_options)

    if parsed_args.output_format == "json":
        _write_output(logbook_to_json(entries, indent=parsed_args.indent), None)
        return EXIT_SUCCESS

    console = Console()
    if not entries:
        console.print("[dim]No logbook entries found[/dim]")
        return EXIT_SUCCESS
    console.print(build_logbook_table(entries))
    return EXIT_SUCCESS


def main(args: list[str] | None = None) -> int:
    """Execute the orglens CLI.

    Parameters
    ----------
    args : list of str, optional
        Command-line arguments; defaults to ``sys.argv[1:]``

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)
    _setup_logging(parsed_args)

    try:
        config = _load_config(parsed_args)
        if parsed_args.command == "render":
            return _run_render(parsed_args, config)
        return _run_logbook(parsed_args, config)
    except argparse.ArgumentTypeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR
    except ValueError as e:
        print(f"Error: invalid option: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR
    except OrgLensError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

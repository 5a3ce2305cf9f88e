#!/usr/bin/env python3
"""
devtools_har/scripts/inspect_har.py

Inspect a HAR file: print a summary and a table of its entries, and optionally
re-serialize the parsed document.

Usage:
    devtools-har-inspect capture.har
    devtools-har-inspect capture.har --devtools --limit 20
    devtools-har-inspect capture.har --output normalized.har --include-nulls --indent 2
"""

import argparse
import json
import sys
from pathlib import Path

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from devtools_har.data_models.base.har_entry import HarEntry
from devtools_har.data_models.base.har_root import HarRoot
from devtools_har.data_models.devtools.devtools_har_entry import DevToolsHarEntry
from devtools_har.har_parser import DevToolsHarParser, HarParser
from devtools_har.utils.exceptions import HarAnomalyError
from devtools_har.utils.har_utils import strict_parsing
from devtools_har.utils.logger import configure_logging, get_logger

logger = get_logger(name=__name__)
console = Console()


def build_summary_table(root: HarRoot, path: Path) -> Panel:
    """Summary of the log: creator, browser, counts."""
    log = root.log
    stats_table = Table(box=box.SIMPLE, show_header=False, padding=(0, 2))
    stats_table.add_column("Label", style="dim")
    stats_table.add_column("Value", style="white")

    stats_table.add_row("HAR Version", log.version)
    stats_table.add_row("Creator", f"{log.creator.name} {log.creator.version}".strip())
    if log.browser is not None:
        stats_table.add_row("Browser", f"{log.browser.name} {log.browser.version}".strip())
    stats_table.add_row("Pages", str(len(log.pages)))
    stats_table.add_row("Entries", str(len(log.entries)))

    methods: dict[str, int] = {}
    for entry in log.entries:
        methods[entry.request.method.value] = methods.get(entry.request.method.value, 0) + 1
    if methods:
        stats_table.add_row("Methods", ", ".join(f"{m}: {c}" for m, c in sorted(methods.items(), key=lambda x: -x[1])))

    return Panel(
        stats_table,
        title=f"[bold cyan]HAR Summary[/bold cyan] [dim]({path})[/dim]",
        border_style="cyan",
        box=box.ROUNDED,
    )


def build_entries_table(entries: list[HarEntry], devtools: bool = False) -> Table:
    """One row per entry; DevTools columns are added when parsing with the DevTools schema."""
    table = Table(box=box.SIMPLE, show_header=True, padding=(0, 1))
    table.add_column("#", style="dim", justify="right")
    table.add_column("Method", style="bold")
    table.add_column("URL", overflow="fold")
    table.add_column("Status", justify="right")
    table.add_column("Time (ms)", justify="right")
    if devtools:
        table.add_column("Type", style="magenta")
        table.add_column("Priority")
        table.add_column("Cache")

    for index, entry in enumerate(entries, start=1):
        status = entry.response.status
        status_style = "green" if 200 <= status < 300 else "yellow" if 300 <= status < 400 else "red"
        row = [
            str(index),
            entry.request.method.value,
            entry.request.url,
            f"[{status_style}]{status}[/{status_style}]",
            f"{entry.total_time:.1f}",
        ]
        if devtools and isinstance(entry, DevToolsHarEntry):
            row.extend([
                entry.resource_type or "-",
                entry.priority or "-",
                entry.from_cache or "-",
            ])
        table.add_row(*row)
    return table


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Inspect a HAR file and optionally re-serialize it"
    )
    parser.add_argument(
        "path",
        help="Path to the HAR file"
    )
    parser.add_argument(
        "--devtools",
        action="store_true",
        help="Parse with the Chrome DevTools schema (typed underscore fields)"
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=10,
        help="Number of entries to list (default: 10, 0 lists none)"
    )
    parser.add_argument(
        "--output",
        help="Write the parsed document back as JSON to this path"
    )
    parser.add_argument(
        "--include-nulls",
        action="store_true",
        help="Emit every declared field, with null for absent values, when writing --output"
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="Indentation of the --output JSON (default: compact)"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on structurally malformed HAR instead of substituting defaults"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (default: LOG_LEVEL from the environment)"
    )

    args = parser.parse_args(argv)
    configure_logging(level=args.log_level)

    path = Path(args.path)
    har_parser = DevToolsHarParser if args.devtools else HarParser

    try:
        with strict_parsing(args.strict):
            root = har_parser.parse_file(path)
    except OSError as e:
        console.print(Panel(str(e), title="Cannot read file", style="red", box=box.ROUNDED))
        return 1
    except json.JSONDecodeError as e:
        console.print(Panel(f"{path}: {e}", title="Invalid JSON", style="red", box=box.ROUNDED))
        return 1
    except HarAnomalyError as e:
        console.print(Panel(str(e), title="Malformed HAR", style="red", box=box.ROUNDED))
        return 1

    console.print(build_summary_table(root, path))
    entries = root.log.entries[:max(args.limit, 0)]
    if entries:
        console.print(build_entries_table(entries, devtools=args.devtools))

    if args.output:
        output_path = Path(args.output)
        output_path.write_text(
            root.to_json_string(include_nulls=args.include_nulls, indent=args.indent),
            encoding="utf-8",
        )
        logger.info("Wrote %s", output_path)
        console.print(f"[green]✓ Wrote {output_path}[/green]")

    return 0


if __name__ == "__main__":
    sys.exit(main())

# src/citeguard/cli.py
"""
citeguard Command Line Interface (CLI).

A thin terminal front-end over the validation core, built on `typer` and
`rich`. It is meant for editors and developers checking exported article
JSON before it reaches the API.

Commands
--------
- ``check``: validate a document (create shape by default, ``--update`` for
  partial updates) and print either a pass panel or the numbered error list.
- ``refs``: print every reference marker occurrence with its block and
  surrounding text.

Usage
-----
    $ citeguard check samples/article.json
    $ citeguard check samples/patch.json --update
    $ citeguard refs samples/article.json --window 30

Exit codes: 0 on success, 1 when validation fails or the file is not valid
JSON, 2 for usage errors (raised by Typer itself).
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Any

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from citeguard.core.result import Verdict
from citeguard.references.reconciler import find_dangling_references, find_orphan_annotations
from citeguard.references.report import UsageRecord, report_reference_usage
from citeguard.validation.article import validate_create, validate_update

load_dotenv()

app = typer.Typer(
    help="citeguard: check article blocks against their annotations.",
    rich_markup_mode="markdown",
)
console = Console()


# --------------------------------------------------------------------------- #
# Helpers
# --------------------------------------------------------------------------- #


def _load_json(path: Path) -> Any:
    """Read ``path`` as JSON, exiting with code 1 on decode errors."""
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        console.print(f"[bold red]❌ Invalid JSON in {path.name}:[/bold red] {e}")
        raise typer.Exit(code=1) from e


def _blocks_of(payload: Any) -> list[Any]:
    """Accept either a full document (``{"blocks": [...]}``) or a bare block list."""
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict) and isinstance(payload.get("blocks"), list):
        return list(payload["blocks"])
    return []


def _render_errors(verdict: Verdict[Any]) -> None:
    console.print(f"[bold red]❌ {len(verdict.errors)} problem(s) found[/bold red]\n")
    for i, message in enumerate(verdict.errors, start=1):
        console.print(f" [dim]{i:02d}.[/dim] {escape(message)}")


def _render_marker_summary(payload: Any) -> None:
    """Show the dangling/orphan split when the document carries both lists."""
    if not isinstance(payload, dict):
        return
    blocks, annotations = _blocks_of(payload), payload.get("annotations")
    if not isinstance(annotations, list):
        return
    dangling = find_dangling_references(blocks, annotations)
    orphans = find_orphan_annotations(blocks, annotations)
    if dangling or orphans:
        console.print("")
        console.print(f" Dangling markers: [magenta]{dangling or '-'}[/magenta]")
        console.print(f" Orphan annotations: [cyan]{orphans or '-'}[/cyan]")


def _usage_table(records: list[UsageRecord]) -> Table:
    table = Table(title="Reference usage", show_lines=False)
    table.add_column("Marker", justify="right", style="bold")
    table.add_column("Block", justify="right")
    table.add_column("Type")
    table.add_column("Context", overflow="fold")
    for r in records:
        table.add_row(f"[{r.marker_id}]", str(r.block_index), r.block_type, escape(r.context))
    return table


# --------------------------------------------------------------------------- #
# Commands
# --------------------------------------------------------------------------- #


@app.command()  # type: ignore[misc]
def check(
    file: Annotated[
        Path,
        typer.Argument(
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            help="Path to the article JSON document.",
        ),
    ],
    update: Annotated[
        bool,
        typer.Option(
            "--update/--create",
            "-u",
            help="Validate as a partial update (requires `id`) instead of a new article.",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Also list dangling markers and orphan annotations by id.",
        ),
    ] = False,
) -> None:
    """
    Validate an article document and report every problem found.

    Shape errors are listed first, then block payload errors, then
    reference errors (dangling markers and orphan annotations).
    """
    payload = _load_json(file)
    verdict: Verdict[Any] = validate_update(payload) if update else validate_create(payload)

    if verdict.success:
        mode = "update" if update else "create"
        console.print(
            Panel.fit(
                f"[bold green]✅ {file.name}[/bold green] is a valid {mode} document.",
                border_style="green",
            )
        )
        return

    _render_errors(verdict)
    if verbose:
        _render_marker_summary(payload)
    raise typer.Exit(code=1)


@app.command()  # type: ignore[misc]
def refs(
    file: Annotated[
        Path,
        typer.Argument(
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            help="Article JSON document, or a JSON list of blocks.",
        ),
    ],
    window: Annotated[
        int | None,
        typer.Option(
            "--window",
            "-w",
            min=0,
            help="Characters of context on each side of a marker (default from settings).",
        ),
    ] = None,
) -> None:
    """
    List every reference marker occurrence, block by block.

    Diagnostic only: duplicates are kept and nothing is validated.
    """
    records = report_reference_usage(_blocks_of(_load_json(file)), window=window)
    if not records:
        console.print("[dim]No reference markers found.[/dim]")
        return
    console.print(_usage_table(records))


if __name__ == "__main__":
    app()

#!/usr/bin/env python3
"""
Command-line interface for the build track.

Each of the eight build steps holds one text artifact. A step opens once the
previous step has an artifact; the proof becomes available when all are done.

Commands:
    status - Show every step with its gating state
    show   - Print a step's prompt and artifact
    write  - Save (or clear) a step's artifact
    proof  - Print the final submission text
"""

import os
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

from folio.contexts.persistence import FileStore
from folio.contexts.tracking import (
    ArtifactStore,
    ProofIncompleteError,
    ProofLinks,
    format_final_submission,
)
from folio.contexts.tracking.logger import setup_tracking_logger

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))
STORE_PATH = Path(os.getenv("FOLIO_STORE_PATH", "outs/store"))

app = typer.Typer(
    add_completion=False,
    help="Track build step artifacts and produce the proof submission.",
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _open_store(store: Optional[Path]) -> ArtifactStore:
    return ArtifactStore(FileStore(store or STORE_PATH))


@app.command()
def status(
    store: Optional[Path] = typer.Option(None, "--store", help="Store directory (default: FOLIO_STORE_PATH)"),
):
    """Show completion and gating for every step."""
    artifacts = _open_store(store)

    typer.echo(f"Build track: {artifacts.completed_count()}/{len(artifacts.steps)} complete\n")
    for step in artifacts.steps:
        if artifacts.has(step.index):
            marker = typer.style("done  ", fg=typer.colors.GREEN)
        elif artifacts.can_open(step.index):
            marker = typer.style("open  ", fg=typer.colors.YELLOW)
        else:
            marker = typer.style("locked", fg=typer.colors.RED)
        typer.echo(f"  {marker}  Step {step.index}: {step.title} ({step.route})")


@app.command()
def show(
    index: int = typer.Argument(..., help="Step index (1-based)"),
    store: Optional[Path] = typer.Option(None, "--store", help="Store directory (default: FOLIO_STORE_PATH)"),
):
    """Print a step's prompt and current artifact."""
    artifacts = _open_store(store)
    step = artifacts.step(index)
    if step is None:
        typer.echo(f"ERROR: Unknown step: {index}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Step {step.index}: {step.title}")
    typer.echo(f"Prompt: {step.prompt}\n")
    typer.echo(artifacts.read(index) or "(no artifact yet)")


@app.command()
def write(
    index: int = typer.Argument(..., help="Step index (1-based)"),
    text: Optional[str] = typer.Option(None, "--text", help="Artifact text (blank clears the artifact)"),
    from_file: Optional[Path] = typer.Option(None, "--file", help="Read artifact text from a file"),
    store: Optional[Path] = typer.Option(None, "--store", help="Store directory (default: FOLIO_STORE_PATH)"),
):
    """Save or clear a step's artifact."""
    if (text is None) == (from_file is None):
        typer.echo("ERROR: Provide exactly one of --text or --file", err=True)
        raise typer.Exit(1)

    store_root = store or STORE_PATH
    log_dir = LOGS_PATH / f"track_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
    setup_tracking_logger(log_dir, store_root)

    artifacts = _open_store(store_root)
    if not artifacts.can_open(index):
        typer.echo(f"ERROR: Step {index} is locked; complete step {index - 1} first", err=True)
        raise typer.Exit(1)

    content = text if text is not None else from_file.read_text(encoding="utf-8")
    try:
        artifacts.write(index, content)
    except IndexError as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(1)


@app.command()
def proof(
    lovable: str = typer.Option("", "--lovable", help="Lovable project link"),
    github: str = typer.Option("", "--github", help="GitHub repository link"),
    deploy: str = typer.Option("", "--deploy", help="Deployed app link"),
    store: Optional[Path] = typer.Option(None, "--store", help="Store directory (default: FOLIO_STORE_PATH)"),
):
    """Print the final submission text (requires every step complete)."""
    artifacts = _open_store(store)
    try:
        text = format_final_submission(artifacts, ProofLinks(lovable, github, deploy))
    except ProofIncompleteError as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(1)
    typer.echo(text)


if __name__ == "__main__":
    app()

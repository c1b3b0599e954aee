#!/usr/bin/env python3
"""
Export a resume as text through one of the resume templates.

Usage:
    python scripts/export_resume.py resume.json
    python scripts/export_resume.py resume.json --template minimal --output resume.txt
    python scripts/export_resume.py --store outs/store
"""

import os
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from jinja2 import TemplateNotFound

from folio.contexts.normalization import RESUME_TEMPLATES, normalize_resume
from folio.contexts.persistence import FileStore, ResumeStore, deserialize_resume
from folio.contexts.rendering import export_resume_text
from folio.contexts.rendering.logger import _log_info, _log_success, setup_rendering_logger

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(help="Export a resume as text.")


@app.command()
def main(
    resume_file: Optional[Path] = typer.Argument(None, help="JSON resume file"),
    store: Optional[Path] = typer.Option(None, "--store", help="Export the stored resume and template from this store directory"),
    template: Optional[str] = typer.Option(None, "--template", "-t", help=f"One of {', '.join(RESUME_TEMPLATES)}"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write to this file instead of stdout"),
):
    """Render a resume through a template."""
    if (resume_file is None) == (store is None):
        typer.echo("ERROR: Provide exactly one of RESUME_FILE or --store", err=True)
        raise typer.Exit(1)

    if store is not None:
        resume_store = ResumeStore(FileStore(store))
        document = resume_store.load_resume()
        template = template or resume_store.load_template()
    else:
        if not resume_file.is_file():
            typer.echo(f"ERROR: Resume file not found: {resume_file}", err=True)
            raise typer.Exit(1)
        document = normalize_resume(deserialize_resume(resume_file.read_bytes()))
        template = template or RESUME_TEMPLATES[0]

    # Session log file only when stdout is not the export target
    if output is not None:
        log_dir = LOGS_PATH / f"export_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
        setup_rendering_logger(log_dir, template)

    try:
        text = export_resume_text(document, template)
    except TemplateNotFound as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(1)

    if output is None:
        typer.echo(text, nl=False)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    _log_info(f"Template: {template}")
    _log_success(f"Exported resume to {output}")


if __name__ == "__main__":
    app()

#!/usr/bin/env python3
"""
Score a resume for ATS readiness.

Reads either a JSON resume file or the resume stored in a FOLIO store
directory, normalizes it, and prints the score panel.

Usage:
    python scripts/score_resume.py resume.json
    python scripts/score_resume.py --store outs/store
    python scripts/score_resume.py --sample
"""

import json
import os
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

from folio.contexts.normalization import normalize_resume
from folio.contexts.normalization.editing import create_sample_resume
from folio.contexts.persistence import FileStore, ResumeStore, deserialize_resume
from folio.contexts.persistence.logger import _log_info, setup_persistence_logger
from folio.contexts.rendering import format_ats_report
from folio.contexts.scoring import compute_ats_score, compute_top_improvements

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(help="Score a resume for ATS readiness.")


@app.command()
def main(
    resume_file: Optional[Path] = typer.Argument(None, help="JSON resume file"),
    store: Optional[Path] = typer.Option(None, "--store", help="Read the stored resume from this store directory"),
    sample: bool = typer.Option(False, "--sample", help="Score the built-in sample resume"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
):
    """Normalize a resume and print its ATS readiness score."""
    sources = [resume_file is not None, store is not None, sample]
    if sum(sources) != 1:
        typer.echo("ERROR: Provide exactly one of RESUME_FILE, --store or --sample", err=True)
        raise typer.Exit(1)

    # Session log file; skipped for --json so stdout stays machine-readable
    if not as_json:
        log_dir = LOGS_PATH / f"score_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
        setup_persistence_logger(log_dir, store_root=store)

    if sample:
        document = create_sample_resume()
        _log_info("Scoring sample resume")
    elif store is not None:
        document = ResumeStore(FileStore(store)).load_resume()
        _log_info(f"Scoring stored resume from {store}")
    else:
        if not resume_file.is_file():
            typer.echo(f"ERROR: Resume file not found: {resume_file}", err=True)
            raise typer.Exit(1)
        document = normalize_resume(deserialize_resume(resume_file.read_bytes()))
        _log_info(f"Scoring {resume_file}")

    result = compute_ats_score(document)
    improvements = compute_top_improvements(document)

    if as_json:
        typer.echo(json.dumps({**result.to_dict(), "topImprovements": improvements}, indent=2))
    else:
        typer.echo(format_ats_report(result, improvements))


if __name__ == "__main__":
    app()

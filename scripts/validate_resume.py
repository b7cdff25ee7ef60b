#!/usr/bin/env python3
"""
Validate a resume file and report its completeness score.

Usage:
    python scripts/validate_resume.py resume.json
    python scripts/validate_resume.py resume.yaml --json
    python scripts/validate_resume.py resume.json --log
"""

import json
import os
from pathlib import Path

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from cvembed.contexts.document.exceptions import InvalidResumeInputError
from cvembed.contexts.document.resume_io import load_resume_file
from cvembed.contexts.review.logger import (
    log_validation_result,
    log_validation_start,
    setup_review_logger,
)
from cvembed.contexts.review.validator import validate_resume
from cvembed.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(help="Validate a resume file.", add_completion=False)


@app.command()
def main(
    input_file: Annotated[
        Path,
        typer.Argument(help="Resume .json or .yaml file", exists=True, dir_okay=False),
    ],
    as_json: Annotated[
        bool, typer.Option("--json", help="Print the result as JSON")
    ] = False,
    log: Annotated[
        bool, typer.Option("--log", help="Write a session log under LOGS_PATH")
    ] = False,
):
    """Validate a resume; exits with code 1 when it has errors."""
    try:
        resume = load_resume_file(input_file)
    except InvalidResumeInputError as e:
        typer.secho(f"Invalid input: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if log:
        log_file = setup_review_logger(LOGS_PATH / f"validate_{now()}", input_file)
        log_validation_start(input_file.stem, log_file)

    result = validate_resume(resume)

    if log:
        log_validation_result(input_file.stem, result)

    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2))
    else:
        typer.echo(f"Score: {result.score}/100")

        typer.echo(f"\n=== Errors ({len(result.errors)}) ===")
        for error in result.errors:
            typer.echo(f"  ✗ {error}")

        typer.echo(f"\n=== Warnings ({len(result.warnings)}) ===")
        for warning in result.warnings:
            typer.echo(f"  ! {warning}")

        if result.valid:
            typer.secho("\n✓ Resume is valid", fg=typer.colors.GREEN)
        else:
            typer.secho("\n✗ Resume is not valid", fg=typer.colors.RED)

    if not result.valid:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()

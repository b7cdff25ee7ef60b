#!/usr/bin/env python3
"""
Create an empty resume file.

Usage:
    python scripts/new_resume.py resume.json
    python scripts/new_resume.py resume.json --template compact --force
"""

from pathlib import Path

import typer
from typing_extensions import Annotated

from cvembed.contexts.document.defaults import create_empty_resume
from cvembed.contexts.document.editing import update_resume
from cvembed.contexts.document.resume_io import save_resume_file
from cvembed.contexts.document.schema import TEMPLATE_NAMES

app = typer.Typer(help="Create an empty resume file.", add_completion=False)


@app.command()
def main(
    output: Annotated[Path, typer.Argument(help="Output .json file", dir_okay=False)],
    template: Annotated[
        str, typer.Option("--template", "-t", help=f"Template: {', '.join(TEMPLATE_NAMES)}")
    ] = "minimal",
    force: Annotated[
        bool, typer.Option("--force", "-f", help="Overwrite an existing file")
    ] = False,
):
    """Write a blank resume with default document options."""
    if template not in TEMPLATE_NAMES:
        typer.secho(
            f"Unknown template '{template}'. Available: {', '.join(TEMPLATE_NAMES)}",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(code=1)

    if output.exists() and not force:
        typer.secho(f"{output} already exists (use --force to overwrite)", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    resume = update_resume(create_empty_resume(), "meta.template", template)
    save_resume_file(resume, output)

    typer.secho("✓ Empty resume created", fg=typer.colors.GREEN)
    typer.echo(f"  Output: {output}")


if __name__ == "__main__":
    app()

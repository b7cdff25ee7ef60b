#!/usr/bin/env python3
"""
Apply Document Option Presets to a Resume

Applies named presets (spacing, colors, typography) to a resume's document
options. Presets are composable and can override each other.

Examples:
    # List all available presets
    python scripts/apply_presets.py options

    # List presets in a specific category
    python scripts/apply_presets.py options colors

    # Apply a color preset to a resume
    python scripts/apply_presets.py apply resume.json colors_ocean

    # Apply multiple presets (spacing + colors)
    python scripts/apply_presets.py apply resume.json spacing_tight colors_forest

    # Specify custom output path
    python scripts/apply_presets.py apply resume.json colors_ocean -o resume_ocean.json
"""

import difflib
import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import typer
from dotenv import load_dotenv
from omegaconf import OmegaConf
from typing_extensions import Annotated

from cvembed.contexts.document.exceptions import InvalidResumeInputError
from cvembed.contexts.document.logger import (
    log_import_result,
    log_import_start,
    log_presets_applied,
    setup_document_logger,
)
from cvembed.contexts.document.presets import (
    apply_presets,
    load_document_presets,
    load_nested_presets,
)
from cvembed.contexts.document.resume_io import load_resume_file, save_resume_file
from cvembed.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))


def print_diff(original: Dict[str, Any], modified: Dict[str, Any]) -> None:
    """Print unified diff between original and modified document options."""
    orig_yaml = OmegaConf.to_yaml(original)
    mod_yaml = OmegaConf.to_yaml(modified)
    diff = difflib.unified_diff(
        orig_yaml.splitlines(keepends=True),
        mod_yaml.splitlines(keepends=True),
        fromfile="original",
        tofile="modified",
        lineterm="",
    )
    typer.echo("\nDiff:")
    for line in diff:
        typer.echo(line, nl=False)


app = typer.Typer(
    help="Apply document option presets to resume files",
    add_completion=False,
)


@app.command("options")
def options_command(
    category: Annotated[
        Optional[str],
        typer.Argument(help="Category to filter (e.g., 'colors', 'spacing')"),
    ] = None,
):
    """
    List available preset options.

    Examples:\n
        $ apply_presets.py options            # All categories and presets

        $ apply_presets.py options colors     # Only color presets
    """
    nested = load_nested_presets()

    if category:
        if category not in nested:
            typer.secho(
                f"Unknown category '{category}'. Available: {', '.join(nested.keys())}",
                fg=typer.colors.RED,
                err=True,
            )
            raise typer.Exit(code=1)
        for name in nested[category]:
            typer.echo(f"{category}_{name}")
    else:
        for cat, presets in nested.items():
            typer.secho(cat, bold=True)
            for name in presets:
                typer.echo(f"  {name}")


@app.command("print")
def print_command(
    preset_name: Annotated[
        str,
        typer.Argument(help="Preset name (e.g., 'colors_ocean', 'spacing_tight')"),
    ],
):
    """Print the contents of a specific preset."""
    presets = load_document_presets()

    if preset_name not in presets:
        typer.secho(f"Unknown preset '{preset_name}'", fg=typer.colors.RED, err=True)
        typer.echo(f"\nAvailable presets: {', '.join(sorted(presets.keys()))}")
        raise typer.Exit(code=1)

    typer.secho(preset_name, bold=True)
    typer.echo(OmegaConf.to_yaml(OmegaConf.create(presets[preset_name])).rstrip())


@app.command("apply")
def apply_command(
    input_file: Annotated[
        Path,
        typer.Argument(help="Resume .json or .yaml file", exists=True, dir_okay=False),
    ],
    presets: Annotated[
        List[str],
        typer.Argument(help="Preset names to apply (e.g., spacing_tight colors_ocean)"),
    ],
    output: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            "-o",
            help="Output .json path (defaults to overwriting a .json input)",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show diff of changes"),
    ] = False,
    log: Annotated[
        bool, typer.Option("--log", help="Write a session log under LOGS_PATH")
    ] = False,
):
    """
    Apply presets to a resume's document options.

    Presets are applied in order, with later presets overriding earlier ones.
    """
    if log:
        log_file = setup_document_logger(LOGS_PATH / f"presets_{now()}", phase="presets")
        log_import_start(input_file, log_file)

    try:
        resume = load_resume_file(input_file)
    except InvalidResumeInputError as e:
        typer.secho(f"Invalid input: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if log:
        log_import_result(input_file, resume)

    typer.echo(f"Applying presets: {', '.join(presets)}")
    try:
        modified = apply_presets(resume, presets)
    except ValueError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if verbose:
        print_diff(resume["meta"]["documentOptions"], modified["meta"]["documentOptions"])

    output_path = output if output else input_file.with_suffix(".json")
    save_resume_file(modified, output_path)

    if log:
        log_presets_applied(presets, output_path)

    typer.secho("✓ Presets applied successfully", fg=typer.colors.GREEN, bold=True)
    typer.echo(f"  Output: {output_path}")

    typer.echo("\nApplied presets:")
    for preset_name in presets:
        typer.echo(f"  • {preset_name}")


if __name__ == "__main__":
    # Default to 'apply' command if no known subcommand specified
    known_commands = {"apply", "options", "print"}
    if len(sys.argv) > 1 and sys.argv[1] not in known_commands and not sys.argv[1].startswith("-"):
        sys.argv.insert(1, "apply")
    app()

#!/usr/bin/env python3
"""
Share token and embed link tools.

Examples:
    # Encode a resume as a share token
    python scripts/share_resume.py encode resume.json

    # Decode a token back into a resume file
    python scripts/share_resume.py decode eyJtZXRhIjp7... -o resume.json

    # Build an embed URL with theme options
    python scripts/share_resume.py embed-url resume.json --primary-color "#1D4ED8" --density compact

    # Print portable link, iframe and SDK snippets
    python scripts/share_resume.py artifacts resume.json --base-url cv.example.com --log
"""

import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from cvembed.contexts.document.codec import decode_resume_from_url, encode_resume_for_url
from cvembed.contexts.document.exceptions import InvalidResumeInputError
from cvembed.contexts.document.resume_io import (
    export_resume_json,
    load_resume_file,
    save_resume_file,
)
from cvembed.contexts.sharing.embed import (
    DEFAULT_PUBLIC_BASE_URL,
    EMBED_DENSITIES,
    build_embed_url,
    build_share_artifacts,
    normalize_base_url,
)
from cvembed.contexts.sharing.logger import log_token_created, setup_sharing_logger
from cvembed.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(help="Share token and embed link tools.", add_completion=False)


def _load_or_exit(input_file: Path) -> dict:
    try:
        return load_resume_file(input_file)
    except InvalidResumeInputError as e:
        typer.secho(f"Invalid input: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


@app.command("encode")
def encode_command(
    input_file: Annotated[
        Path, typer.Argument(help="Resume .json or .yaml file", exists=True, dir_okay=False)
    ],
):
    """Print the URL-safe share token of a resume."""
    typer.echo(encode_resume_for_url(_load_or_exit(input_file)))


@app.command("decode")
def decode_command(
    token: Annotated[str, typer.Argument(help="Share token (the embed link's data parameter)")],
    output: Annotated[
        Optional[Path], typer.Option("--output", "-o", help="Write the resume here instead of stdout")
    ] = None,
):
    """Decode a share token back into resume JSON."""
    resume = decode_resume_from_url(token)
    if resume is None:
        typer.secho("Invalid share token", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if output:
        save_resume_file(resume, output)
        typer.secho("✓ Resume decoded", fg=typer.colors.GREEN)
        typer.echo(f"  Output: {output}")
    else:
        typer.echo(export_resume_json(resume))


@app.command("embed-url")
def embed_url_command(
    input_file: Annotated[
        Optional[Path],
        typer.Argument(
            help="Resume to inline as data (omit to link by --resume-id)", exists=True, dir_okay=False
        ),
    ] = None,
    base_url: Annotated[
        str, typer.Option("--base-url", "-b", help="Public origin of the embed page")
    ] = DEFAULT_PUBLIC_BASE_URL,
    resume_id: Annotated[
        Optional[str], typer.Option("--resume-id", help="Stored resume id")
    ] = None,
    primary_color: Annotated[
        Optional[str], typer.Option("--primary-color", help="Theme color, e.g. #1D4ED8")
    ] = None,
    density: Annotated[
        Optional[str], typer.Option("--density", help=f"One of: {', '.join(EMBED_DENSITIES)}")
    ] = None,
    no_download: Annotated[
        bool, typer.Option("--no-download", help="Hide the download button")
    ] = False,
):
    """Print an embed URL."""
    if density is not None and density not in EMBED_DENSITIES:
        typer.secho(
            f"Unknown density '{density}'. Available: {', '.join(EMBED_DENSITIES)}",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(code=1)

    resume = _load_or_exit(input_file) if input_file else None

    try:
        url = build_embed_url(
            normalize_base_url(base_url),
            resume_id=resume_id,
            resume_data=resume,
            primary_color=primary_color,
            density=density,
            show_download=False if no_download else None,
        )
    except ValueError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.echo(url)


@app.command("artifacts")
def artifacts_command(
    input_file: Annotated[
        Path, typer.Argument(help="Resume .json or .yaml file", exists=True, dir_okay=False)
    ],
    base_url: Annotated[
        str, typer.Option("--base-url", "-b", help="Public origin of the embed page")
    ] = "",
    log: Annotated[
        bool, typer.Option("--log", help="Write a session log under LOGS_PATH")
    ] = False,
):
    """Print the portable link, iframe tag and SDK snippet."""
    resume = _load_or_exit(input_file)
    artifacts = build_share_artifacts(base_url, resume)

    if log:
        setup_sharing_logger(LOGS_PATH / f"share_{now()}", base_url or DEFAULT_PUBLIC_BASE_URL)
        log_token_created(input_file.stem, encode_resume_for_url(resume))

    typer.secho("Portable URL", bold=True)
    typer.echo(artifacts.portable_url)
    typer.secho("\niframe", bold=True)
    typer.echo(artifacts.iframe_snippet)
    typer.secho("\nSDK snippet", bold=True)
    typer.echo(artifacts.sdk_snippet)


if __name__ == "__main__":
    app()

#!/usr/bin/env python3
"""
Resume Generation and Validation CLI

Builds a LaTeX resume from a resume data file and checks LaTeX files for
structural problems before they are sent to a compiler.

Commands:
    generate - Assemble a .tex resume from a YAML/JSON data file
    validate - Check a .tex file for brace balance and document markers

Examples:\n

    build_resume.py generate data/me.yaml                      # Writes data/me.tex

    build_resume.py generate data/me.yaml -o out/resume.tex    # Custom output path

    build_resume.py generate data/me.yaml -e 1 -x 0            # Drop experience #1 and project #0

    build_resume.py validate out/resume.tex                    # Validate a .tex file
"""

import os
from pathlib import Path
from typing import List, Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from resumetex.contexts.rendering import validate_latex
from resumetex.contexts.rendering.logger import setup_rendering_logger
from resumetex.contexts.templating import (
    PreconditionViolation,
    SectionSelection,
    assemble_resume,
    find_missing_sections,
    load_resume_file,
)
from resumetex.contexts.templating.logger import log_missing_sections, setup_templating_logger
from resumetex.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(
    help="Generate LaTeX resumes from resume data and validate LaTeX files",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _echo_validation_errors(errors: List[str]) -> None:
    typer.echo("\nErrors:")
    for error in errors:
        typer.secho(f"  - {error}", fg=typer.colors.RED)


def build_selection(
    exclude_experience: Optional[List[int]], exclude_project: Optional[List[int]]
) -> SectionSelection:
    """Turn excluded indices into a SectionSelection."""
    selection = SectionSelection()
    for index in exclude_experience or []:
        selection = selection.with_experience(index, False)
    for index in exclude_project or []:
        selection = selection.with_project(index, False)
    return selection


@app.command("generate")
def generate_command(
    data_file: Annotated[
        Path,
        typer.Argument(
            help="Resume data file (YAML or JSON) in the data layer's row format",
            exists=True,
            dir_okay=False,
        ),
    ],
    output: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            "-o",
            help="Where to write the .tex file (default: next to the data file)",
        ),
    ] = None,
    exclude_experience: Annotated[
        Optional[List[int]],
        typer.Option(
            "--exclude-experience",
            "-e",
            help="Index of an experience entry to leave out (repeatable)",
        ),
    ] = None,
    exclude_project: Annotated[
        Optional[List[int]],
        typer.Option(
            "--exclude-project",
            "-x",
            help="Index of a project entry to leave out (repeatable)",
        ),
    ] = None,
    validate: Annotated[
        bool,
        typer.Option(
            "--validate/--no-validate",
            help="Validate the generated LaTeX before reporting success",
        ),
    ] = True,
):
    """
    Assemble a LaTeX resume from a resume data file.

    Examples:\n

        $ build_resume.py generate data/me.yaml                 # Writes data/me.tex

        $ build_resume.py generate data/me.yaml -e 2            # Skip the third experience entry
    """
    log_dir = LOGS_PATH / f"generate_{now()}"
    setup_templating_logger(log_dir, data_file=data_file)

    typer.secho(f"\nGenerating: {data_file}", fg=typer.colors.BLUE, bold=True)

    try:
        data = load_resume_file(data_file)

        missing = find_missing_sections(data)
        log_missing_sections(missing)
        if missing:
            typer.secho(
                f"Warning: missing or incomplete sections: {', '.join(missing)}",
                fg=typer.colors.YELLOW,
            )

        selection = build_selection(exclude_experience, exclude_project)
        latex = assemble_resume(data, selection=selection)
    except PreconditionViolation as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    output = output or data_file.with_suffix(".tex")
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(latex, encoding="utf-8")

    if validate:
        result = validate_latex(latex, source=output.name)
        if not result.valid:
            typer.secho(
                f"✗ Generated LaTeX has {len(result.errors)} problem(s)",
                fg=typer.colors.RED,
                bold=True,
            )
            _echo_validation_errors(result.errors)
            typer.echo(f"  TeX: {output}")
            raise typer.Exit(code=1)

    typer.secho("✓ Resume generated", fg=typer.colors.GREEN, bold=True)
    typer.echo(f"  TeX: {output}")
    typer.echo(f"  Log: {log_dir / 'template.log'}")
    typer.echo("")


@app.command("validate")
def validate_command(
    tex_file: Annotated[
        Path,
        typer.Argument(help="LaTeX file to check", exists=True, dir_okay=False),
    ],
):
    """
    Check a LaTeX file for unbalanced braces and missing document markers.

    Examples:\n

        $ build_resume.py validate out/resume.tex
    """
    log_dir = LOGS_PATH / f"validate_{now()}"
    setup_rendering_logger(log_dir, tex_file=tex_file)

    typer.secho(f"\nValidating: {tex_file}", fg=typer.colors.BLUE, bold=True)

    result = validate_latex(tex_file.read_text(encoding="utf-8"), source=tex_file.name)

    if result.valid:
        typer.secho(f"\n✓ {result.message}", fg=typer.colors.GREEN, bold=True)
    else:
        typer.secho("\n✗ Validation failed", fg=typer.colors.RED, bold=True)
        _echo_validation_errors(result.errors)

    typer.echo(f"  Log: {log_dir / 'render.log'}")
    typer.echo("")

    raise typer.Exit(code=0 if result.valid else 1)


if __name__ == "__main__":
    app()

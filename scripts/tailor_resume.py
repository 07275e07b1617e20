#!/usr/bin/env python3
"""
Resume Tailoring CLI

Ranks the content of a CV against a job posting and writes the tailored resume
as markdown.

Commands:
    tailor - Assemble a tailored resume from a CV and a job posting
    cloud  - Show the word cloud built from a job posting
    score  - Score a single phrase against a job posting

Examples:\n

    tailor_resume.py tailor data/cv.yaml jobs/MLEng_AcmeCorp.md                # Write outs/resumes/cv.md

    tailor_resume.py tailor data/cv.yaml jobs/MLEng_AcmeCorp.md --show-scores  # Also print scores

    tailor_resume.py cloud jobs/MLEng_AcmeCorp.md --top 20                     # Top 20 words

    tailor_resume.py score jobs/MLEng_AcmeCorp.md "Machine Learning"           # Score a phrase
"""

import os
import time
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from cvtailor.contexts.targeting import ResumeAssembler, TermFrequencyModel, format_ranking_report
from cvtailor.contexts.targeting.logger import (
    log_tailoring_result,
    log_tailoring_start,
    setup_targeting_logger,
)
from cvtailor.contexts.templating import CV, InvalidCVStructureError, write_resume_markdown
from cvtailor.utils.logger import SessionProvenance, session_log_dir

load_dotenv()
OUTPUT_PATH = Path(os.getenv("OUTPUT_PATH", "outs/resumes"))


app = typer.Typer(
    help="Tailor a CV to a job posting by word cloud relevance",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _load_model(job_file: Path) -> TermFrequencyModel:
    try:
        return TermFrequencyModel.from_file(job_file)
    except FileNotFoundError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


@app.command("tailor")
def tailor_command(
    cv_file: Annotated[Path, typer.Argument(help="CV file (YAML or JSON)")],
    job_file: Annotated[Path, typer.Argument(help="Job posting (text or markdown)")],
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Markdown output path (default: OUTPUT_PATH/<cv name>.md)"),
    ] = None,
    show_scores: Annotated[
        bool,
        typer.Option("--show-scores", "-s", help="Print every ranked item with its score"),
    ] = False,
):
    """
    Assemble a tailored resume and write it as markdown.

    Examples:\n

        $ tailor_resume.py tailor data/cv.yaml jobs/posting.md

        $ tailor_resume.py tailor data/cv.yaml jobs/posting.md -o resume.md -s
    """
    output_path = output or OUTPUT_PATH / f"{cv_file.stem}.md"
    log_file = setup_targeting_logger(
        session_log_dir("tailor"),
        SessionProvenance(cv_path=cv_file, reference_path=job_file, output_path=output_path),
    )
    log_tailoring_start(cv_file, job_file, log_file)
    start_time = time.time()

    model = _load_model(job_file)

    try:
        cv = CV.load_from_file(cv_file)
    except (FileNotFoundError, InvalidCVStructureError) as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    resume = ResumeAssembler(model).assemble(cv)

    write_resume_markdown(resume, output_path, cv=cv)
    log_tailoring_result(resume, output_path, time.time() - start_time)

    if show_scores:
        typer.echo("")
        typer.echo(format_ranking_report(resume))

    typer.echo("")
    typer.secho("✓ Resume tailored", fg=typer.colors.GREEN, bold=True)
    typer.echo(f"  Markdown: {output_path}")
    typer.echo(f"  Log: {log_file}")


@app.command("cloud")
def cloud_command(
    job_file: Annotated[Path, typer.Argument(help="Job posting (text or markdown)")],
    top: Annotated[
        Optional[int],
        typer.Option("--top", "-n", help="Only show the N most frequent words", min=1),
    ] = None,
):
    """Show the word cloud built from a job posting."""
    model = _load_model(job_file)
    typer.echo(model.describe(top=top))


@app.command("score")
def score_command(
    job_file: Annotated[Path, typer.Argument(help="Job posting (text or markdown)")],
    phrase: Annotated[str, typer.Argument(help="Phrase to score")],
):
    """Score a single phrase against a job posting."""
    model = _load_model(job_file)
    typer.echo(str(model.score(phrase)))


if __name__ == "__main__":
    app()

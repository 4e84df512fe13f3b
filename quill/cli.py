"""
Command-line interface for QUILL.

Works on resume files (YAML or JSON, camelCase keys as on the wire) and on the
configured resume store.

Commands:
    validate - Check a resume file against the schema
    score    - Show the completion percentage of a resume file
    export   - Render a resume file as pdf, docx, txt or md
    preview  - Print a markdown preview of a resume file
    list     - List stored resumes for a user
    events   - Show recent entries from the resume event log
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import typer
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException
from yaml import YAMLError

from quill.contexts.document import Resume, ResumeValidationError, validate, validate_draft
from quill.contexts.document.resume_data_structure import SERVER_ASSIGNED_FIELDS
from quill.contexts.export import EXPORT_FORMATS, ExportError, export_resume, render_markdown
from quill.contexts.scoring import score, score_breakdown
from quill.contexts.storage import StorageError, build_store
from quill.utils.config import load_settings
from quill.utils.event_logging import get_recent_events, log_resume_event
from quill.utils.logger import session_dir, setup_logger
from quill.utils.timestamp import format_timestamp, now_exact

app = typer.Typer(
    add_completion=False,
    help="Build, check and export resumes.",
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _settings() -> Dict[str, Any]:
    """Load settings, pointing the event log at logs.events_file unless the environment already does."""
    try:
        settings = load_settings()
    except (FileNotFoundError, ValueError) as e:
        typer.secho(f"ERROR: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    events_file = settings["logs"]["events_file"]
    if events_file:
        os.environ.setdefault("RESUME_EVENTS_FILE", str(events_file))

    return settings


def _start_session(command: str) -> Dict[str, Any]:
    """Load settings and start a detailed log for commands that touch config."""
    settings = _settings()
    setup_logger(
        context_name="cli",
        log_dir=session_dir(settings["logs"]["path"], command),
        extra_provenance={"Store backend": settings["store"]["backend"]},
    )
    return settings


def _read_resume_file(resume_file: Path) -> Dict[str, Any]:
    """Load a YAML or JSON resume file into a plain dict."""
    if not resume_file.exists():
        typer.secho(f"ERROR: File not found: {resume_file}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    # Resume text is literal: "${...}" is never an interpolation
    try:
        data = OmegaConf.to_container(OmegaConf.load(resume_file), resolve=False)
    except (YAMLError, OmegaConfBaseException, UnicodeDecodeError) as e:
        typer.secho(f"ERROR: Could not parse {resume_file}: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    if not isinstance(data, dict):
        typer.secho(f"ERROR: {resume_file} does not contain a resume object", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    return data


def _local_filename(filename: str) -> str:
    """Keep an export filename inside the output directory (titles may contain path separators)."""
    for separator in {"/", os.sep, os.altsep} - {None}:
        filename = filename.replace(separator, "_")
    return filename


def _to_resume(data: Dict[str, Any], resume_file: Path) -> Resume:
    """
    Validate file contents as a Resume.

    Files without identity fields (drafts) get a local id from the file name,
    user 0 and the current time.
    """
    if all(key in data for key in SERVER_ASSIGNED_FIELDS):
        return validate(data)

    draft = validate_draft(data)
    timestamp = now_exact()
    return validate(
        {
            **draft.model_dump(by_alias=True),
            "id": resume_file.stem,
            "userId": 0,
            "createdAt": timestamp,
            "updatedAt": timestamp,
        }
    )


def _load_resume(resume_file: Path) -> Resume:
    try:
        return _to_resume(_read_resume_file(resume_file), resume_file)
    except ResumeValidationError as e:
        typer.secho(f"✗ {e.message}: {resume_file}", fg=typer.colors.RED, err=True)
        for error in e.errors:
            typer.echo(f"  {error.path}: {error.message}", err=True)
        raise typer.Exit(code=1)


@app.command("validate")
def validate_command(
    resume_file: Path = typer.Argument(..., help="Resume file (YAML or JSON)"),
):
    """
    Check a resume file against the schema.

    Lists every offending field path and exits 1 when the file is invalid.
    """
    resume = _load_resume(resume_file)
    typer.secho(f"✓ Valid resume: {resume.title}", fg=typer.colors.GREEN)


@app.command("score")
def score_command(
    resume_file: Path = typer.Argument(..., help="Resume file (YAML or JSON)"),
    breakdown: bool = typer.Option(False, "--breakdown", "-b", help="Show every counted check"),
):
    """
    Show the completion percentage of a resume file.

    The file does not need to be valid: blank or missing fields simply count
    as unfilled.
    """
    data = _read_resume_file(resume_file)

    typer.echo(f"Completion: {score(data)}%")

    if breakdown:
        for check in score_breakdown(data):
            mark = "✓" if check.filled else "✗"
            color = typer.colors.GREEN if check.filled else typer.colors.RED
            typer.secho(f"  {mark} {check.path}", fg=color)


@app.command("export")
def export_command(
    resume_file: Path = typer.Argument(..., help="Resume file (YAML or JSON)"),
    export_format: str = typer.Option("txt", "--format", "-f", help=f"One of: {', '.join(EXPORT_FORMATS)}"),
    out_dir: Path = typer.Option(Path("."), "--out", "-o", help="Output directory"),
):
    """
    Render a resume file and write it to the output directory.

    Examples:\n

        $ quill export resume.yaml                 # Resume_Title_resume.txt

        $ quill export resume.yaml -f pdf -o outs  # PDF into outs/
    """
    settings = _start_session("export")
    resume = _load_resume(resume_file)

    try:
        result = export_resume(resume, export_format, settings["export"])
    except ExportError as e:
        typer.secho(f"ERROR: {e.message}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    out_path = out_dir / _local_filename(result.filename)
    try:
        out_dir.mkdir(parents=True, exist_ok=True)
        out_path.write_bytes(result.payload)
    except OSError as e:
        typer.secho(f"ERROR: Could not write {out_path}: {e.strerror or e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    log_resume_event("resume_exported", resume.id, "cli", format=export_format.lower(), filename=out_path.name)

    typer.secho(f"✓ Exported {out_path}", fg=typer.colors.GREEN)
    if result.page_count is not None:
        typer.echo(f"  Pages: {result.page_count}")


@app.command("preview")
def preview_command(
    resume_file: Path = typer.Argument(..., help="Resume file (YAML or JSON)"),
):
    """Print a markdown preview (visible sections in display order)."""
    resume = _load_resume(resume_file)
    typer.echo(render_markdown(resume), nl=False)


@app.command("list")
def list_command(
    user: int = typer.Option(..., "--user", "-u", help="Owning user id"),
    relative: bool = typer.Option(False, "--relative", "-r", help="Show relative timestamps"),
):
    """List resumes stored for a user, oldest first."""
    settings = _start_session("list")

    try:
        resumes = build_store(settings).list_for_user(user)
    except StorageError as e:
        typer.secho(f"ERROR: {e.message}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if not resumes:
        typer.secho(f"No resumes found for user {user}", fg=typer.colors.YELLOW, err=True)
        raise typer.Exit()

    for resume in resumes:
        updated = format_timestamp(resume.updated_at, relative=relative)
        typer.echo(f"{resume.id}  {resume.title}  (updated {updated}, {score(resume)}% complete)")


@app.command("events")
def events_command(
    n: int = typer.Option(10, "--num", "-n", help="Number of recent events to show"),
    resume: Optional[str] = typer.Option(None, "--resume", "-r", help="Filter to events for this resume"),
    event_type: Optional[str] = typer.Option(None, "--event-type", "-e", help="Filter to events of this type"),
    compact: bool = typer.Option(False, "--compact", "-c", help="Print one event per line"),
):
    """Show the last n events from the resume event log."""
    _settings()

    events = get_recent_events(n=n, resume_id=resume, event_type=event_type)

    if not events:
        typer.secho("No events found", fg=typer.colors.YELLOW, err=True)
        raise typer.Exit(code=1)

    for event in events:
        if compact:
            typer.echo(json.dumps(event))
        else:
            typer.echo(json.dumps(event, indent=2))
            typer.echo("")


if __name__ == "__main__":
    app()

"""CLI entrypoint for scenario-eval — typer app with `score`, `tool-calls` and `token`."""

import logging
import os
import sys
from pathlib import Path

import structlog
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from scenario_eval.config.domain.scenario import ScenarioConfig
from scenario_eval.config.infrastructure.observer import StructlogConfigObserver
from scenario_eval.config.infrastructure.yaml_loader import YamlScenarioLoader
from scenario_eval.core.errors import ScenarioEvalError
from scenario_eval.credentials.infrastructure.resolver import (
    DEFAULT_DOTENV_PATH,
    resolve_github_token,
)
from scenario_eval.evaluation.application.validator import ScenarioValidator
from scenario_eval.evaluation.domain.observer import EvaluationObserver
from scenario_eval.evaluation.domain.result import EvaluationResult
from scenario_eval.evaluation.domain.tool_calls import extract_tool_calls
from scenario_eval.evaluation.domain.verdict import BatchReport, ScenarioVerdict
from scenario_eval.evaluation.infrastructure.composite_observer import (
    CompositeEvaluationObserver,
)
from scenario_eval.evaluation.infrastructure.harness_log_observer import (
    HarnessLogObserver,
)
from scenario_eval.evaluation.infrastructure.observer import StructlogEvaluationObserver
from scenario_eval.transcript.infrastructure.jsonl_loader import (
    DEFAULT_TEXT_KEY,
    JsonlTranscriptLoader,
)
from scenario_eval.transcript.infrastructure.observer import StructlogTranscriptObserver
from scenario_eval.transcript.infrastructure.text_loader import load_transcript_text

app = typer.Typer(add_completion=False)

_console = Console()


def _echo_stderr(message: str) -> None:
    typer.echo(message, err=True)


def _configure_structlog(log_format: str, verbose: bool) -> None:
    """Configure structlog based on the requested format."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.DEBUG if verbose else logging.INFO
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _load_scenario(
    scenario_path: Path | None,
    diagnostics_path: Path | None,
    history_dir: Path | None,
    no_diagnostics: bool,
) -> ScenarioConfig:
    """Load the scenario file (or the built-in one) and apply CLI overrides."""
    if scenario_path is None:
        config = ScenarioConfig.default()
    else:
        loader = YamlScenarioLoader(observer=StructlogConfigObserver())
        config = loader.load(path=scenario_path)

    updates: dict[str, object] = {}
    if diagnostics_path is not None:
        updates["path"] = diagnostics_path
    if history_dir is not None:
        updates["keep_history"] = True
        updates["history_dir"] = history_dir
    if no_diagnostics:
        updates["enabled"] = False
    if not updates:
        return config
    return config.model_copy(
        update={"diagnostics": config.diagnostics.model_copy(update=updates)}
    )


def _print_result(
    scenario: str, result: EvaluationResult, verdict: ScenarioVerdict
) -> None:
    """Render per-check outcomes and the verdict."""
    title = f"{escape(scenario)}  ·  {result.matched_count}/{result.total_count}"
    table = Table(title=title)
    table.add_column("Check")
    table.add_column("Matched", justify="center")
    for outcome in result.outcomes:
        table.add_row(
            escape(outcome.name),
            "[green]yes[/green]" if outcome.matched else "[red]no[/red]",
        )
    _console.print(table)
    if verdict.success:
        _console.print("[bold green]PASS[/bold green]")
    else:
        detail = escape(verdict.error_message or "")
        _console.print(f"[bold red]FAIL[/bold red]  {detail}")


def _print_batch(report: BatchReport) -> None:
    title = f"{escape(report.scenario)}  ·  {report.passed}/{report.total} passed"
    table = Table(title=title)
    table.add_column("Transcript")
    table.add_column("Verdict", justify="center")
    table.add_column("Detail")
    for item in report.verdicts:
        table.add_row(
            escape(item.transcript_id),
            "[green]PASS[/green]" if item.verdict.success else "[red]FAIL[/red]",
            escape(item.verdict.error_message or ""),
        )
    _console.print(table)


@app.command()
def score(
    transcript_path: Path = typer.Argument(
        ..., help="Transcript file, '-' for stdin, or a JSONL batch with --jsonl"
    ),
    scenario_path: Path | None = typer.Option(
        None,
        "--scenario",
        "-s",
        help="Scenario YAML (defaults to the C# build-fix scenario)",
    ),
    diagnostics_path: Path | None = typer.Option(
        None, "--diagnostics-path", help="Where to write the diagnostic JSON record"
    ),
    history_dir: Path | None = typer.Option(
        None, "--history-dir", help="Also keep a timestamped copy of each record here"
    ),
    no_diagnostics: bool = typer.Option(
        False, "--no-diagnostics", help="Do not write a diagnostic record"
    ),
    jsonl: bool = typer.Option(
        False, "--jsonl", help="Treat the input as JSONL, one transcript per line"
    ),
    text_key: str = typer.Option(
        DEFAULT_TEXT_KEY, "--text-key", help="JSONL key holding the transcript text"
    ),
    log_format: str = typer.Option(
        "console", "--log-format", help="Log format: 'console' or 'json'"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every check"),
) -> None:
    """Score agent transcripts against a scenario's behavior checklist."""
    try:
        _configure_structlog(log_format=log_format, verbose=verbose)
        config = _load_scenario(
            scenario_path=scenario_path,
            diagnostics_path=diagnostics_path,
            history_dir=history_dir,
            no_diagnostics=no_diagnostics,
        )
        observers: list[EvaluationObserver] = [StructlogEvaluationObserver()]
        if log_format != "json":
            observers.append(HarnessLogObserver(sink=_echo_stderr))
        validator = ScenarioValidator.from_config(
            config=config,
            observer=CompositeEvaluationObserver(observers=observers),
        )

        if jsonl:
            loader = JsonlTranscriptLoader(observer=StructlogTranscriptObserver())
            transcripts = loader.load(path=transcript_path, text_key=text_key)
            report = validator.validate_many(transcripts)
            _print_batch(report=report)
            passed = report.all_passed
        else:
            transcript = load_transcript_text(path=transcript_path)
            verdict = validator.validate(full_response=transcript.text)
            _print_result(
                scenario=validator.scenario_name,
                result=validator.score(transcript.text),
                verdict=verdict,
            )
            passed = verdict.success

    except typer.Exit:
        raise
    except KeyboardInterrupt:
        typer.echo("Scoring interrupted.")
        sys.exit(1)
    except ScenarioEvalError as exc:
        typer.echo(str(exc))
        sys.exit(1)
    except Exception as exc:  # noqa: BLE001
        typer.echo(f"Unexpected error: {exc}\nPlease report this bug.")
        sys.exit(1)

    if not passed:
        raise typer.Exit(code=1)


@app.command("tool-calls")
def tool_calls(
    transcript_path: Path = typer.Argument(..., help="Transcript file, or '-' for stdin"),
) -> None:
    """Print every tool-call token found in a transcript, in order."""
    try:
        transcript = load_transcript_text(path=transcript_path)
    except ScenarioEvalError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1) from exc
    for call in extract_tool_calls(transcript.text):
        typer.echo(call)


@app.command()
def token(
    env_file: Path = typer.Option(
        DEFAULT_DOTENV_PATH, "--env-file", help="Fallback .env file to read"
    ),
    no_prompt: bool = typer.Option(
        False, "--no-prompt", help="Fail instead of prompting when no token is found"
    ),
) -> None:
    """Check that a GitHub token is available for running simulations."""

    def _prompt() -> str:
        return typer.prompt(
            "GitHub token", hide_input=True, default="", show_default=False
        )

    try:
        resolved = resolve_github_token(
            environ=os.environ,
            dotenv_path=env_file,
            prompt=None if no_prompt else _prompt,
        )
    except ScenarioEvalError as exc:
        typer.echo(str(exc))
        raise typer.Exit(code=1) from exc

    typer.echo(
        f"GitHub token available from {resolved.source}"
        f" ({resolved.variable}): {resolved.masked()}"
    )


if __name__ == "__main__":
    app()

from __future__ import annotations

import logging
import sys

import typer

from fanyi.core import (
    answers,
    assess as assess_core,
    config as config_core,
    envelope,
    feedback,
    similarity,
)
from fanyi.core.alignment import compare_word_by_word

VERSION = "0.1.0"

app = typer.Typer(add_completion=False, help="fanyi - translation answer assessment (Chinese -> English)")


def _emit(out: dict) -> None:
    typer.echo(envelope.dumps(out))
    if out.get("ok") is True:
        raise typer.Exit(code=0)
    raise typer.Exit(code=1)


@app.callback()
def main(
    log_level: str = typer.Option("WARNING", "--log-level", help="DEBUG|INFO|WARNING|ERROR (logs go to stderr)"),
):
    logging.basicConfig(
        stream=sys.stderr,
        level=getattr(logging, log_level.upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )


def _strictness(cli_value: str | None) -> similarity.Strictness:
    return similarity.resolve_strictness(config_core.resolve_strictness_setting(cli_value))


# ---- Global commands ----
@app.command()
def version(json_output: bool = typer.Option(False, "--json", help="Output JSON envelope")):
    if json_output:
        _emit(envelope.ok(command="version", data={"version": VERSION}))
    typer.echo(f"fanyi {VERSION}")


@app.command()
def check(
    reference: str = typer.Option(..., "--reference", help="Reference English translation"),
    candidate: str = typer.Option(..., "--candidate", help="Learner's answer"),
    strictness: str | None = typer.Option(None, "--strictness", help="lenient|moderate|strict"),
    json_output: bool = typer.Option(True, "--json"),
):
    """Score an answer against the reference, in [0, 1]."""
    try:
        level = _strictness(strictness)
    except ValueError as exc:
        _emit(envelope.err(command="check", error_type="INVALID_ARGUMENT", message=str(exc)))
    result = similarity.score_breakdown(reference, candidate, level)
    _emit(envelope.ok(command="check", data=result.to_dict()))


@app.command()
def compare(
    reference: str = typer.Option(..., "--reference"),
    candidate: str = typer.Option(..., "--candidate"),
    json_output: bool = typer.Option(True, "--json"),
):
    """Per-word matched flags for highlighting both sentences."""
    result = compare_word_by_word(reference, candidate)
    _emit(envelope.ok(command="compare", data=result.to_dict()))


@app.command()
def assess(
    reference: str = typer.Option(..., "--reference"),
    candidate: str = typer.Option(..., "--candidate"),
    strictness: str | None = typer.Option(None, "--strictness", help="lenient|moderate|strict"),
    correct_threshold: float | None = typer.Option(None, "--correct-threshold", min=0.0, max=1.0),
    partial_threshold: float | None = typer.Option(None, "--partial-threshold", min=0.0, max=1.0),
    json_output: bool = typer.Option(True, "--json"),
):
    """Score, highlight and bucket an answer as correct/partial/incorrect."""
    try:
        level = _strictness(strictness)
        thresholds = feedback.thresholds_from_config(correct=correct_threshold, partial=partial_threshold)
    except ValueError as exc:
        _emit(
            envelope.err(
                command="assess",
                error_type="INVALID_ARGUMENT",
                message=str(exc),
                details={"correct_threshold": correct_threshold, "partial_threshold": partial_threshold},
            )
        )
    result = assess_core.assess_answer(reference, candidate, strictness=level, thresholds=thresholds)
    _emit(envelope.ok(command="assess", data=result.to_dict()))


@app.command()
def batch(
    in_path: str = typer.Option(..., "--in", help="CSV with reference,candidate columns"),
    strictness: str | None = typer.Option(None, "--strictness", help="lenient|moderate|strict"),
    limit: int = typer.Option(500, "--limit", min=1),
    json_output: bool = typer.Option(True, "--json"),
):
    """Assess every row of a CSV file."""
    try:
        level = _strictness(strictness)
        thresholds = feedback.thresholds_from_config()
        rows = answers.read_answer_pairs(in_path)
    except FileNotFoundError as exc:
        _emit(envelope.err(command="batch", error_type="NOT_FOUND", message=str(exc), details={"in": in_path}))
    except ValueError as exc:
        _emit(envelope.err(command="batch", error_type="INVALID_ARGUMENT", message=str(exc), details={"in": in_path}))

    truncated = len(rows) > limit
    results = [
        {"reference": item.reference, "candidate": item.candidate, **item.to_dict()}
        for item in assess_core.assess_batch(rows[:limit], strictness=level, thresholds=thresholds)
    ]
    out = envelope.ok(
        command="batch",
        data={"count": len(results), "results": results},
        truncated=truncated,
        limits={"limit": limit},
    )
    _emit(out)


if __name__ == "__main__":
    app()

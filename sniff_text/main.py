import json
import sys
from dataclasses import replace
from pathlib import Path
from typing import Optional

import typer

from sniff_text.errors import SniffTextError
from sniff_text.languagepacks import get_language_pack
from sniff_text.log import setup_logging
from sniff_text.models import AnalysisOptions
from sniff_text.pipeline import AnalysisPipeline
from sniff_text.registry import default_registry
from sniff_text.ui import (
    build_outcomes_table,
    build_registry_table,
    console,
    render_amplification_chart,
    render_verdict,
)

app = typer.Typer(help="Sniff AI-Generated Text Detection CLI", add_completion=False)


def _fail(message: str, export_json: bool):
    if export_json:
        print(json.dumps({"error": message}))
    else:
        console.print(f"[bold red]Error[/bold red]: {message}")
    raise typer.Exit(code=1)


def _read_text(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def _build_options(lang, no_early_exit, max_ms, min_words, brief) -> AnalysisOptions:
    pack = get_language_pack(lang) if lang else None
    options = AnalysisOptions.from_config(pack)
    overrides = {}
    if no_early_exit:
        overrides["enable_early_termination"] = False
    if max_ms is not None:
        overrides["max_execution_time_ms"] = max_ms
    if min_words is not None:
        overrides["min_word_count"] = min_words
    if brief:
        overrides["include_details"] = False
    return replace(options, **overrides)


@app.command(name="analyze")
def analyze_cmd(
    path: str = typer.Argument("-", help="Text file to analyze ('-' reads stdin)"),
    lang: Optional[str] = typer.Option(None, "--lang", help="Language pack (english, german)"),
    export_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
    no_early_exit: bool = typer.Option(False, "--no-early-exit", help="Run every eligible detector"),
    max_ms: Optional[float] = typer.Option(None, "--max-ms", help="Per-detector time budget in ms"),
    min_words: Optional[int] = typer.Option(None, "--min-words", help="Minimum words required"),
    brief: bool = typer.Option(False, "--brief", help="Omit per-detector outcomes"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log pipeline decisions"),
):
    """Estimate whether a text was written by an AI system or a human."""
    setup_logging("DEBUG" if verbose else None)

    try:
        text = _read_text(path)
    except OSError as e:
        _fail(f"Could not read '{path}': {e}", export_json)

    try:
        options = _build_options(lang, no_early_exit, max_ms, min_words, brief)
    except (KeyError, ValueError) as e:
        _fail(str(e.args[0]) if e.args else str(e), export_json)

    try:
        result = AnalysisPipeline().analyze(text, options)
    except SniffTextError as e:
        _fail(str(e), export_json)

    if export_json:
        print(json.dumps(result.to_dict(), indent=2))
        return

    if result.detector_outcomes:
        console.print(build_outcomes_table(result))
        render_amplification_chart(result)
    render_verdict(result, source="stdin" if path == "-" else Path(path).name)


@app.command(name="detectors")
def detectors_cmd(
    lang: Optional[str] = typer.Option(None, "--lang", help="Show weights after applying a language pack"),
):
    """List the registered detectors in execution order."""
    registry = default_registry()
    if lang:
        try:
            registry = registry.with_language_pack(get_language_pack(lang))
        except KeyError as e:
            _fail(str(e.args[0]), False)
    console.print(build_registry_table(registry))


def main():
    app()


if __name__ == "__main__":
    main()

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
import plotille

from sniff_text.models import AnalysisResult, OutcomeStatus

console = Console()

_VERDICT_STYLES = {
    "AI": ("🔴", "AI-GENERATED", "bold red",
           "Strong machine-writing signals. Treat authorship as automated."),
    "Likely AI": ("🟠", "LIKELY AI-GENERATED", "bold yellow",
                  "Several detectors lean towards machine writing. Review recommended."),
    "Uncertain": ("🟡", "UNCERTAIN", "bold cyan",
                  "Signals are mixed or coverage is thin. A human should decide."),
    "Human": ("🟢", "LIKELY HUMAN-WRITTEN", "bold green",
              "Natural variation detected across the detectors that ran."),
}


def format_score(score) -> str:
    if score is None:
        return "[dim]-[/dim]"
    if score >= 0.7:
        color = "red bold"
    elif score >= 0.3:
        color = "yellow"
    else:
        color = "green"
    return f"[{color}]{score:.3f}[/{color}]"


def format_status(outcome) -> str:
    if outcome.status is OutcomeStatus.CONTRIBUTED:
        return "[green]contributed[/green]"
    if outcome.status is OutcomeStatus.GATED:
        return f"[dim]{outcome.failure_reason}[/dim]"
    return f"[bold red]{outcome.failure_reason}[/bold red]"


def build_outcomes_table(result: AnalysisResult) -> Table:
    table = Table(title="Detector Outcomes", show_header=True, header_style="bold magenta")
    table.add_column("Detector", width=24)
    table.add_column("Strength", style="dim", width=8)
    table.add_column("Raw", justify="center")
    table.add_column("Amplified", justify="center")
    table.add_column("Confidence", justify="center")
    table.add_column("ms", justify="right", style="dim")
    table.add_column("Status")
    for o in result.detector_outcomes:
        table.add_row(
            o.name,
            o.strength.value,
            format_score(o.raw_score),
            format_score(o.amplified_score),
            f"{o.confidence:.3f}" if o.contributes else "[dim]-[/dim]",
            f"{o.execution_time_ms:.1f}",
            format_status(o),
        )
    return table


def build_registry_table(registry) -> Table:
    table = Table(title="Registered Detectors", show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", width=3)
    table.add_column("Detector", width=24)
    table.add_column("Strength", justify="center")
    table.add_column("Weight", justify="center")
    table.add_column("Threshold", justify="center")
    table.add_column("Amp", justify="center")
    table.add_column("Min words / sentences", justify="center")
    table.add_column("Expected ms", justify="right")
    for i, d in enumerate(registry, start=1):
        strength = f"[bold]{d.strength.value}[/bold]" if d.is_strong else d.strength.value
        table.add_row(
            str(i),
            d.name,
            strength,
            f"{d.reliability_weight:.2f}",
            f"{d.threshold:.2f}",
            f"{d.amplification:g}",
            f"{d.min_words} / {d.min_sentences}",
            f"{d.expected_time_ms:g}",
        )
    return table


def render_verdict(result: AnalysisResult, source: str = "input"):
    """Render the final verdict panel."""
    icon, label, color, risk_msg = _VERDICT_STYLES[result.classification]
    metrics = result.text_metrics
    contributed = sum(1 for o in result.detector_outcomes if o.contributes)

    summary_text = (
        f"[{color}]{icon}  VERDICT: {label}[/{color}]\n\n"
        f"  AI Likelihood    : [{color}]{result.ai_likelihood:.0%}[/{color}]\n"
        f"  Certainty        : {result.certainty:.0%}\n"
        f"  Combined Score   : {result.combined_score:.3f}\n"
        f"  Consensus        : {result.consensus:.3f}\n"
        f"  Text             : {metrics.word_count} words, {metrics.sentence_count} sentences "
        f"({metrics.detected_text_type})\n"
    )
    if result.detector_outcomes:
        summary_text += f"  Detectors Used   : {contributed}/{len(result.detector_outcomes)}\n"
    if result.terminated_early:
        summary_text += "  [dim]Stopped early: consensus reached[/dim]\n"
    summary_text += f"\n  [dim]{result.explanation}.[/dim]\n  [dim]{risk_msg}[/dim]"

    console.print()
    console.print(Panel(
        summary_text,
        title=f"[bold]Analysis Complete: {source}[/bold]",
        border_style=color.replace("bold ", ""),
        expand=False,
        padding=(1, 4),
    ))
    console.print()


def render_amplification_chart(result: AnalysisResult):
    contributors = [o for o in result.detector_outcomes if o.contributes]
    if len(contributors) < 2:
        console.print("[dim]Not enough contributing detectors to chart (need at least 2).[/dim]")
        return

    console.print("\n[bold cyan]Raw vs Amplified Score per Detector (registry order)[/bold cyan]")
    x_data = list(range(1, len(contributors) + 1))

    fig = plotille.Figure()
    fig.width = 60
    fig.height = 15
    fig.set_x_limits(min_=1, max_=len(contributors))
    fig.set_y_limits(min_=0.0, max_=1.0)
    fig.y_label = "Score"
    fig.x_label = "Detector #"
    fig.plot(x_data, [o.raw_score for o in contributors], lc="cyan", label="raw")
    fig.plot(x_data, [o.amplified_score for o in contributors], lc="magenta", label="amplified")

    print(fig.show(legend=True))

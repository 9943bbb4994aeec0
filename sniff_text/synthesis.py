"""
Result Synthesizer
──────────────────
Fuses the contributing outcomes and the final consensus into the public
AnalysisResult: likelihood, certainty, combined score, label, explanation.
"""

import math
from typing import List, Sequence

from sniff_text.consensus import is_near_perfect
from sniff_text.models import (
    AnalysisResult,
    ConsensusMetrics,
    DetectorOutcome,
    OutcomeStatus,
    Strength,
    TextMetrics,
)

# Decision thresholds on the combined score.
DEFINITE_AI = 0.75
LIKELY_AI = 0.55
LIKELY_HUMAN = 0.35

# Strong raw scores above this are named in the explanation.
NOTABLE_STRONG_SIGNAL = 0.7

_TIER_TEXT = {
    "AI": "High AI likelihood due to strong signals",
    "Likely AI": "Moderate AI likelihood with mixed signals",
    "Human": "Low AI likelihood with natural variation detected",
    "Uncertain": "Uncertain classification requiring human review",
}


def classify(combined_score: float) -> str:
    if combined_score >= DEFINITE_AI:
        return "AI"
    if combined_score >= LIKELY_AI:
        return "Likely AI"
    if combined_score <= LIKELY_HUMAN:
        return "Human"
    return "Uncertain"


def certainty_label(certainty: float) -> str:
    if certainty >= 0.9:
        return "very high"
    if certainty >= 0.8:
        return "high"
    if certainty >= 0.6:
        return "moderate"
    return "low"


def _strong_multiplier(strong_scores: List[float], strong_consensus: float) -> float:
    if len(strong_scores) < 2:
        return 1.0
    mean = sum(strong_scores) / len(strong_scores)
    if mean >= 0.8 and strong_consensus >= 0.8:
        perfect = sum(1 for s in strong_scores if s >= 0.95)
        return 1.0 + perfect * 0.15 + (mean - 0.5) * 0.3
    if mean <= 0.2 and strong_consensus >= 0.8:
        perfect_human = sum(1 for s in strong_scores if s <= 0.05)
        return 1.0 - perfect_human * 0.1 - (0.5 - mean) * 0.2
    return 1.0


def _pretty(name: str) -> str:
    return name.replace("_", " ")


def build_explanation(classification: str, contributors: Sequence[DetectorOutcome],
                      outcomes: Sequence[DetectorOutcome], consensus: ConsensusMetrics,
                      certainty: float, total_known: int, include_details: bool) -> str:
    explanation = _TIER_TEXT[classification]
    if not include_details:
        return explanation

    strong = [o for o in contributors if o.strength is Strength.STRONG]
    if len(strong) >= 2:
        agreement = "strong consensus" if consensus.strong_consensus >= 0.8 else "mixed signals"
        explanation += f" with {agreement} among {len(strong)} strong algorithms"

    notable = sorted(
        (o for o in strong if o.raw_score > NOTABLE_STRONG_SIGNAL),
        key=lambda o: o.raw_score,
        reverse=True,
    )[:2]
    if notable:
        explanation += " from " + " and ".join(
            f"{_pretty(o.name)} ({o.raw_score:.2f})" for o in notable
        )

    explanation += (
        f". Overall consensus: {consensus.consensus_score:.2f} "
        f"across {len(contributors)}/{total_known} algorithms"
    )
    if consensus.strong_signal_bonus > 0:
        explanation += f" with exponential strong signal bonus (+{consensus.strong_signal_bonus:.2f})"
    explanation += f" provides {certainty_label(certainty)} certainty"

    failed = [
        o for o in outcomes
        if o.status in (OutcomeStatus.FAILED, OutcomeStatus.TIMEOUT, OutcomeStatus.INVALID_SCORE)
    ]
    if failed:
        explanation += ". Excluded: " + ", ".join(
            f"{_pretty(o.name)} ({o.status.value.replace('_', ' ')})" for o in failed
        )
    return explanation


def synthesize(outcomes: Sequence[DetectorOutcome], consensus: ConsensusMetrics,
               text_metrics: TextMetrics, total_known: int, total_time_ms: float,
               include_details: bool = True, terminated_early: bool = False) -> AnalysisResult:
    """Combine contributor outcomes and consensus into the final result.

    *outcomes* must contain at least one contributing outcome.
    """
    contributors = [o for o in outcomes if o.contributes]

    numerator = sum(o.amplified_score * o.reliability_weight * o.confidence for o in contributors)
    denominator = sum(o.reliability_weight * o.confidence for o in contributors)
    if denominator > 0:
        base = numerator / denominator
    else:
        # every contributor had zero weight: fall back to a plain mean
        base = sum(o.amplified_score for o in contributors) / len(contributors)

    strong_scores = [o.amplified_score for o in contributors if o.strength is Strength.STRONG]
    multiplier = _strong_multiplier(strong_scores, consensus.strong_consensus)

    ai_likelihood = base * multiplier + consensus.strong_signal_bonus + consensus.adjustment
    ai_likelihood = max(0.0, min(1.0, ai_likelihood))

    coverage = math.sqrt(len(contributors) / max(total_known, 1))
    certainty = consensus.uncertainty * coverage
    if len(strong_scores) >= 2 and consensus.strong_consensus >= 0.8:
        perfect_signals = sum(1 for s in strong_scores if is_near_perfect(s))
        if perfect_signals >= 2:
            certainty = min(0.95, certainty * (1 + perfect_signals * 0.25))
        elif perfect_signals >= 1:
            certainty = min(0.90, certainty * 1.3)
    certainty = max(0.0, min(1.0, certainty))

    combined = ai_likelihood * certainty
    classification = classify(combined)

    return AnalysisResult(
        ai_likelihood=round(ai_likelihood, 3),
        certainty=round(certainty, 3),
        combined_score=round(combined, 3),
        consensus=round(consensus.consensus_score, 3),
        total_execution_time_ms=round(total_time_ms, 1),
        detector_outcomes=tuple(outcomes) if include_details else (),
        text_metrics=text_metrics,
        explanation=build_explanation(
            classification, contributors, outcomes, consensus, certainty,
            total_known, include_details,
        ),
        classification=classification,
        terminated_early=terminated_early,
    )

"""
Consensus Engine
────────────────
Strength-aware agreement between the detectors that have run so far.

Strong detectors get 3x the variance weight of weak ones, and when two or
more strong detectors agree their consensus can override disagreement from
the rest. Multiple near-perfect strong scores earn an exponential bonus.
"""

from typing import NamedTuple, Sequence

import numpy as np

from sniff_text.models import ConsensusMetrics, Strength

VARIANCE_WEIGHTS = {Strength.STRONG: 3.0, Strength.MEDIUM: 2.0, Strength.WEAK: 1.0}

NEAR_PERFECT_HIGH = 0.95
NEAR_PERFECT_LOW = 0.05
MAX_UNCERTAINTY = 0.95

NEUTRAL_CONSENSUS = ConsensusMetrics(
    consensus_score=1.0,
    adjustment=0.0,
    uncertainty=0.1,
    strong_consensus=1.0,
    strong_signal_bonus=0.0,
)


class Signal(NamedTuple):
    score: float
    strength: Strength
    weight: float


def is_near_perfect(score: float) -> bool:
    return score >= NEAR_PERFECT_HIGH or score <= NEAR_PERFECT_LOW


def calculate_consensus(signals: Sequence[Signal], total_known: int,
                        total_strong: int) -> ConsensusMetrics:
    """
    Compute agreement metrics over the amplified scores collected so far.

    Args:
        signals: One entry per contributing detector.
        total_known: Number of detectors in the registry (coverage denominator).
        total_strong: Number of strong detectors in the registry.

    Returns:
        ConsensusMetrics; neutral defaults when fewer than two signals exist.
    """
    if len(signals) < 2:
        return NEUTRAL_CONSENSUS

    strong_scores = [s.score for s in signals if s.strength is Strength.STRONG]
    has_strong_group = len(strong_scores) >= 2

    # ── 1. Strong subgroup ──────────────────────────────────────────────
    strong_consensus = 1.0
    strong_signal_bonus = 0.0
    if has_strong_group:
        strong_consensus = max(0.0, 1.0 - float(np.std(strong_scores)))
        perfect = sum(1 for s in strong_scores if is_near_perfect(s))
        if perfect >= 2:
            strong_signal_bonus = perfect ** 1.5 * 0.15
        elif perfect == 1 and strong_consensus > 0.7:
            strong_signal_bonus = 0.10

    # ── 2. Strength-weighted spread across everything ──────────────────
    scores = np.asarray([s.score for s in signals], dtype=float)
    weights = np.asarray([VARIANCE_WEIGHTS[s.strength] for s in signals], dtype=float)
    mean = np.average(scores, weights=weights)
    weighted_std = float(np.sqrt(np.average((scores - mean) ** 2, weights=weights)))

    base_consensus = max(0.0, 1.0 - weighted_std)
    if has_strong_group:
        consensus_score = max(base_consensus, strong_consensus * 0.8)
    else:
        consensus_score = base_consensus

    strong_agree = has_strong_group and strong_consensus > 0.8

    # ── 3. Penalty: lighter when the strong detectors agree ────────────
    if strong_agree:
        adjustment = max(-0.05, -0.05 * weighted_std)
    else:
        adjustment = -0.1 * weighted_std

    # ── 4. Uncertainty (really: how much the estimate can be trusted) ──
    coverage = len(signals) / max(total_known, 1)
    uncertainty = max(0.1, (1.0 - weighted_std) * coverage)
    if strong_agree:
        strong_coverage = len(strong_scores) / max(total_strong, 1)
        uncertainty = min(MAX_UNCERTAINTY, uncertainty * (1 + strong_coverage * 0.5))

    return ConsensusMetrics(
        consensus_score=round(consensus_score, 3),
        adjustment=adjustment,
        uncertainty=uncertainty,
        strong_consensus=round(strong_consensus, 3),
        strong_signal_bonus=strong_signal_bonus,
    )

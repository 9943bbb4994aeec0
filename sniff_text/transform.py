"""
Score Transformer
─────────────────
Threshold-centred logistic amplification. Raw scores far from a detector's
decision boundary are pushed further out, and strong detectors at the
extremes are amplified hardest, so a few confident reliable detectors
dominate the noisy ones instead of being averaged away.
"""

import math

from sniff_text.models import Strength

# Calibration constants. Empirically tuned; keep as-is.
PERFECT_AI_CEILING = 0.999   # strong detector at raw 1.0
PERFECT_HUMAN_CAP = 0.2      # strong detector at raw 0.0
EXTREME_STEEPNESS = 10.0
EXTREME_OFFSET = 0.3
EXTREME_MAX_BONUS = 0.4


def logistic(x: float, center: float = 0.0, steepness: float = 1.0) -> float:
    z = -steepness * (x - center)
    # exp() overflows past ~709
    if z > 700:
        return 0.0
    if z < -700:
        return 1.0
    return 1.0 / (1.0 + math.exp(z))


def super_amplification(raw_score: float, strength: Strength) -> float:
    if strength is not Strength.STRONG:
        return 1.0
    if raw_score == 1.0:
        return 3.0
    if raw_score == 0.0:
        return 0.3
    if raw_score >= 0.9:
        return 2.0
    if raw_score <= 0.1:
        return 0.5
    return 1.0


def extreme_bonus(raw_score: float) -> float:
    distance = abs(raw_score - 0.5)
    if distance > 0.4:
        return 1.0
    if distance > 0.3:
        return 0.7
    if distance > 0.2:
        return 0.4
    return 0.0


def threshold_amplify(raw_score: float, threshold: float, amplification: float,
                      strength: Strength = Strength.MEDIUM) -> float:
    """Stage one: logistic around *threshold*, direction preserved."""
    effective = amplification * super_amplification(raw_score, strength) * (1 + extreme_bonus(raw_score))
    curve = logistic(raw_score, threshold, effective)

    if raw_score >= threshold:
        result = threshold + (1 - threshold) * curve
    else:
        result = threshold * (1 - curve)

    if strength is Strength.STRONG and raw_score == 1.0:
        return PERFECT_AI_CEILING
    if strength is Strength.STRONG and raw_score == 0.0:
        return max(0.0, min(PERFECT_HUMAN_CAP, result))
    return max(0.0, min(1.0, result))


def extreme_multiplier(transformed_score: float) -> float:
    distance = abs(transformed_score - 0.5)
    return 1.0 + EXTREME_MAX_BONUS * logistic(distance - EXTREME_OFFSET, 0.0, EXTREME_STEEPNESS)


def amplify_score(raw_score: float, threshold: float, amplification: float,
                  strength: Strength = Strength.MEDIUM):
    """Return ``(transformed, amplified)`` for one raw detector score."""
    transformed = threshold_amplify(raw_score, threshold, amplification, strength)
    amplified = max(0.0, min(1.0, transformed * extreme_multiplier(transformed)))
    return transformed, amplified

"""Per-run trust weight: reliability x text adequacy x timing."""

MIN_PERFORMANCE_BONUS = 0.9
MAX_PERFORMANCE_BONUS = 1.1


def performance_bonus(expected_time_ms: float, actual_time_ms: float) -> float:
    """Faster-than-expected runs earn up to +10%, slow ones lose up to 10%."""
    if actual_time_ms <= 0:
        return MAX_PERFORMANCE_BONUS
    ratio = expected_time_ms / actual_time_ms
    return max(MIN_PERFORMANCE_BONUS, min(MAX_PERFORMANCE_BONUS, ratio))


def constraint_adequacy(word_count: int, min_words: int) -> float:
    return max(0.0, min(1.0, word_count / max(min_words, 1)))


def calculate_confidence(reliability_weight: float, word_count: int, min_words: int,
                         expected_time_ms: float, actual_time_ms: float) -> float:
    return (
        reliability_weight
        * constraint_adequacy(word_count, min_words)
        * performance_bonus(expected_time_ms, actual_time_ms)
    )

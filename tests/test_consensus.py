"""
Tests for the consensus engine.

Verifies that:
- Fewer than two signals yield the neutral defaults
- Strong detectors that agree earn the lighter penalty and the bonus
- Variance weighting favours strong detectors
"""
import pytest

from sniff_text.consensus import (
    NEUTRAL_CONSENSUS,
    Signal,
    calculate_consensus,
    is_near_perfect,
)
from sniff_text.models import Strength

S, M, W = Strength.STRONG, Strength.MEDIUM, Strength.WEAK


def sig(score, strength=M):
    return Signal(score, strength, 0.1)


class TestNeutral:

    def test_no_signals(self):
        assert calculate_consensus([], 10, 4) == NEUTRAL_CONSENSUS

    def test_single_signal(self):
        metrics = calculate_consensus([sig(0.9, S)], 10, 4)
        assert metrics.consensus_score == 1.0
        assert metrics.adjustment == 0.0
        assert metrics.uncertainty == 0.1
        assert metrics.strong_consensus == 1.0
        assert metrics.strong_signal_bonus == 0.0


class TestStrongSubgroup:

    def test_two_perfect_strong_signals_earn_exponential_bonus(self):
        metrics = calculate_consensus([sig(1.0, S), sig(1.0, S)], 10, 4)
        assert metrics.strong_consensus == 1.0
        assert metrics.strong_signal_bonus == pytest.approx(2 ** 1.5 * 0.15)

    def test_one_perfect_with_agreement_earns_flat_bonus(self):
        metrics = calculate_consensus([sig(0.97, S), sig(0.85, S)], 10, 4)
        assert metrics.strong_consensus > 0.7
        assert metrics.strong_signal_bonus == pytest.approx(0.10)

    def test_disagreeing_strong_signals_get_no_bonus(self):
        metrics = calculate_consensus([sig(0.5, S), sig(0.6, S)], 10, 4)
        assert metrics.strong_signal_bonus == 0.0

    def test_strong_agreement_overrides_noisy_rest(self):
        signals = [sig(0.9, S), sig(0.9, S), sig(0.0, W), sig(0.1, W)]
        metrics = calculate_consensus(signals, 10, 4)
        assert metrics.consensus_score == pytest.approx(0.8, abs=1e-3)

    def test_lighter_penalty_when_strong_agree(self):
        signals = [sig(0.9, S), sig(0.9, S), sig(0.1, W)]
        metrics = calculate_consensus(signals, 10, 4)
        assert -0.05 <= metrics.adjustment <= 0.0


class TestWeightedSpread:

    def test_variance_weighted_std(self):
        # weights 3 and 1: mean 0.75, variance 0.1875
        metrics = calculate_consensus([sig(1.0, S), sig(0.0, W)], 10, 4)
        std = 0.1875 ** 0.5
        assert metrics.consensus_score == pytest.approx(round(1 - std, 3))
        assert metrics.adjustment == pytest.approx(-0.1 * std)

    def test_identical_scores_full_consensus(self):
        metrics = calculate_consensus([sig(0.4), sig(0.4), sig(0.4)], 10, 4)
        assert metrics.consensus_score == 1.0

    def test_uncertainty_tracks_coverage(self):
        few = calculate_consensus([sig(0.4), sig(0.4)], 10, 4)
        many = calculate_consensus([sig(0.4)] * 8, 10, 4)
        assert few.uncertainty == pytest.approx(0.2)
        assert many.uncertainty == pytest.approx(0.8)

    def test_uncertainty_floor(self):
        metrics = calculate_consensus([sig(1.0), sig(0.0)], 100, 4)
        assert metrics.uncertainty == 0.1

    def test_uncertainty_capped_with_strong_agreement(self):
        signals = [sig(1.0, S)] * 4 + [sig(1.0)] * 6
        metrics = calculate_consensus(signals, 10, 4)
        assert metrics.uncertainty == 0.95

    def test_scores_rounded(self):
        metrics = calculate_consensus([sig(0.123456, S), sig(0.987654, W)], 10, 4)
        assert metrics.consensus_score == round(metrics.consensus_score, 3)


def test_near_perfect():
    assert is_near_perfect(0.95)
    assert is_near_perfect(0.05)
    assert not is_near_perfect(0.5)

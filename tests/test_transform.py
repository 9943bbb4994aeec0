"""
Tests for the score transformer.

Verifies that:
- Saturation clamps hold for strong detectors at the extremes
- Direction relative to the threshold is preserved
- Amplified output always stays in [0, 1]
"""
import pytest

from sniff_text.models import Strength
from sniff_text.transform import (
    PERFECT_AI_CEILING,
    PERFECT_HUMAN_CAP,
    amplify_score,
    extreme_bonus,
    extreme_multiplier,
    logistic,
    super_amplification,
    threshold_amplify,
)


class TestLogistic:

    def test_center_is_half(self):
        assert logistic(0.3, 0.3, 5.0) == pytest.approx(0.5)

    def test_overflow_guarded(self):
        assert logistic(-1000.0, 0.0, 10.0) == 0.0
        assert logistic(1000.0, 0.0, 10.0) == 1.0


class TestMultipliers:

    @pytest.mark.parametrize("raw,expected", [
        (1.0, 3.0), (0.0, 0.3), (0.95, 2.0), (0.05, 0.5), (0.5, 1.0),
    ])
    def test_super_amplification_strong(self, raw, expected):
        assert super_amplification(raw, Strength.STRONG) == expected

    @pytest.mark.parametrize("strength", [Strength.MEDIUM, Strength.WEAK])
    def test_super_amplification_only_for_strong(self, strength):
        assert super_amplification(1.0, strength) == 1.0
        assert super_amplification(0.0, strength) == 1.0

    @pytest.mark.parametrize("raw,expected", [
        (0.95, 1.0), (0.05, 1.0), (0.85, 0.7), (0.25, 0.4), (0.5, 0.0), (0.7, 0.0),
    ])
    def test_extreme_bonus(self, raw, expected):
        assert extreme_bonus(raw) == expected

    def test_extreme_multiplier_range(self):
        for i in range(101):
            m = extreme_multiplier(i / 100)
            assert 1.0 <= m <= 1.4

    def test_extreme_multiplier_grows_with_distance(self):
        assert extreme_multiplier(0.99) > extreme_multiplier(0.75) > extreme_multiplier(0.5)


class TestThresholdAmplify:

    def test_strong_perfect_ai_saturates(self):
        result = threshold_amplify(1.0, 0.55, 2.0, Strength.STRONG)
        assert result == PERFECT_AI_CEILING
        assert 0.999 <= result < 1.0

    def test_strong_perfect_human_capped(self):
        result = threshold_amplify(0.0, 0.6, 2.5, Strength.STRONG)
        assert 0.0 <= result <= PERFECT_HUMAN_CAP

    def test_direction_preserved(self):
        for strength in Strength:
            assert threshold_amplify(0.8, 0.6, 2.0, strength) >= 0.6
            assert threshold_amplify(0.4, 0.6, 2.0, strength) < 0.6

    def test_at_threshold_reanchors_upwards(self):
        # logistic(0) == 0.5, so the score lands halfway between threshold and 1
        assert threshold_amplify(0.5, 0.5, 1.0) == pytest.approx(0.75)


class TestAmplifyScore:

    def test_output_bounded_everywhere(self):
        for strength in Strength:
            for threshold in (0.5, 0.6, 0.7):
                for i in range(101):
                    transformed, amplified = amplify_score(i / 100, threshold, 2.5, strength)
                    assert 0.0 <= transformed <= 1.0
                    assert 0.0 <= amplified <= 1.0

    def test_amplified_never_below_transformed(self):
        transformed, amplified = amplify_score(0.3, 0.5, 1.2, Strength.MEDIUM)
        assert amplified >= transformed

    def test_strong_ai_signal_reaches_one(self):
        _, amplified = amplify_score(1.0, 0.55, 2.0, Strength.STRONG)
        assert amplified == 1.0

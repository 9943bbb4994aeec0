"""
Tests for the built-in detectors.

Each detector is checked on a text where its signal is obviously present
and one where it is obviously absent.
"""
import pytest

from conftest import AI_SAMPLE, HUMAN_SAMPLE
from sniff_text.detectors import (
    BurstinessDetector,
    EmDashEpidemicDetector,
    NgramRepetitionDetector,
    ParticipialPhraseDetector,
    PerfectGrammarDetector,
    PerplexityApproximator,
    RuleOfThreeDetector,
    ShannonEntropyDetector,
    TransitionPhraseDetector,
    ZipfDeviationDetector,
)
from sniff_text.registry import default_registry

ALL_DETECTORS = [
    ShannonEntropyDetector(),
    BurstinessDetector(),
    EmDashEpidemicDetector(),
    NgramRepetitionDetector(),
    ZipfDeviationDetector(),
    TransitionPhraseDetector(),
    ParticipialPhraseDetector(),
    RuleOfThreeDetector(),
    PerfectGrammarDetector(),
    PerplexityApproximator(),
]


@pytest.mark.parametrize("detector", ALL_DETECTORS, ids=lambda d: d.name)
class TestContract:

    def test_returns_reason(self, detector, english_pack):
        result = detector.analyze(AI_SAMPLE, english_pack)
        assert isinstance(result, dict)
        assert result["reason"]

    def test_extracted_score_in_range(self, detector, english_pack):
        descriptor = default_registry().get(detector.name)
        for text in (AI_SAMPLE, HUMAN_SAMPLE, "word"):
            score = descriptor.score_extractor(detector.analyze(text, english_pack))
            assert 0.0 <= score <= 1.0

    def test_registered_under_own_name(self, detector):
        assert detector.name in default_registry()


class TestBurstiness:

    def test_uniform_sentences(self, english_pack):
        text = "One two three four. Five six seven eight. Nine ten eleven twelve."
        assert BurstinessDetector().analyze(text, english_pack)["burstiness"] == pytest.approx(0.0)

    def test_varied_sentences(self, english_pack):
        result = BurstinessDetector().analyze(HUMAN_SAMPLE, english_pack)
        assert result["burstiness"] > 0.6

    def test_single_sentence(self, english_pack):
        result = BurstinessDetector().analyze("Just one sentence here", english_pack)
        assert result["sentences"] == 1
        assert result["burstiness"] == 0.0


class TestTransitions:

    def test_stock_phrases_saturate(self, english_pack):
        result = TransitionPhraseDetector().analyze(AI_SAMPLE, english_pack)
        assert result["ai_likelihood"] == 1.0
        assert "furthermore" in result["matches"]

    def test_plain_prose(self, english_pack):
        result = TransitionPhraseDetector().analyze(HUMAN_SAMPLE, english_pack)
        assert result["ai_likelihood"] == 0.0

    def test_whole_words_only(self, english_pack):
        result = TransitionPhraseDetector().analyze("The overalls were muddy.", english_pack)
        assert "overall" not in result["matches"]


class TestEmDash:

    def test_dash_heavy(self, english_pack):
        text = "This is — quite frankly — the best approach — and it works — every time. " * 3
        result = EmDashEpidemicDetector().analyze(text, english_pack)
        assert result["ai_likelihood"] > 0.0
        assert "—" in result["overused"]

    def test_no_punctuation(self, english_pack):
        text = "plain words without any special marks at all " * 3
        assert EmDashEpidemicDetector().analyze(text, english_pack)["ai_likelihood"] == 0.0


class TestRuleOfThree:

    def test_triads_detected(self, english_pack):
        text = ("Our platform is fast, reliable, and secure. "
                "It helps teams plan, build, and ship. "
                "Users love the speed, the design, and the support.")
        result = RuleOfThreeDetector().analyze(text, english_pack)
        assert result["triads"] >= 2
        assert result["ai_likelihood"] > 0.5

    def test_no_triads(self, english_pack):
        result = RuleOfThreeDetector().analyze(HUMAN_SAMPLE, english_pack)
        assert result["triads"] == 0


class TestNgrams:

    def test_repetitive_text(self, english_pack):
        text = "the cat sat on the mat " * 6
        assert NgramRepetitionDetector().analyze(text, english_pack)["diversity_ratio"] < 0.3

    def test_unique_text(self, english_pack):
        text = "every single word here appears exactly once without any repetition whatsoever"
        assert NgramRepetitionDetector().analyze(text, english_pack)["diversity_ratio"] == 1.0


class TestZipfAndEntropy:

    def test_zipf_too_few_words(self, english_pack):
        result = ZipfDeviationDetector().analyze("hi hi", english_pack)
        assert result["ai_likelihood"] == 0.5

    def test_entropy_single_character(self, english_pack):
        assert ShannonEntropyDetector().analyze("aaaa", english_pack)["entropy"] == 0.0

    def test_entropy_empty(self, english_pack):
        assert ShannonEntropyDetector().analyze("   ", english_pack)["characters"] == 0

"""
Shared pytest fixtures for sniff_text tests.

Pipeline tests run against a fake clock and stub detectors, so timing
(and therefore confidence) is fully deterministic.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from sniff_text.languagepacks import ENGLISH_LANGUAGE_PACK
from sniff_text.models import AnalysisOptions, DetectorDescriptor, Strength
from sniff_text.registry import likelihood_extractor


class FakeClock:
    """Monotonic clock in seconds that only moves when told to."""

    def __init__(self):
        self.now = 100.0

    def __call__(self) -> float:
        return self.now

    def advance_ms(self, ms: float):
        self.now += ms / 1000.0


class StubDetector:
    """Returns a fixed result dict, optionally costing fake time or raising."""

    def __init__(self, score=0.5, clock: FakeClock = None, cost_ms: float = 0.0, error=None):
        self.score = score
        self.clock = clock
        self.cost_ms = cost_ms
        self.error = error
        self.calls = 0

    def analyze(self, text, language_pack):
        self.calls += 1
        if self.clock is not None:
            self.clock.advance_ms(self.cost_ms)
        if self.error is not None:
            raise self.error
        return {"ai_likelihood": self.score, "reason": "stub"}


def make_descriptor(name, detector, strength=Strength.MEDIUM, expected_time_ms=1.0,
                    min_words=0, min_sentences=0, threshold=0.5, amplification=1.0,
                    reliability_weight=0.1, score_extractor=likelihood_extractor):
    return DetectorDescriptor(
        name=name,
        detector=detector,
        min_words=min_words,
        min_sentences=min_sentences,
        expected_time_ms=expected_time_ms,
        score_extractor=score_extractor,
        threshold=threshold,
        amplification=amplification,
        strength=strength,
        reliability_weight=reliability_weight,
    )


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def english_pack():
    return ENGLISH_LANGUAGE_PACK


@pytest.fixture
def options(english_pack):
    return AnalysisOptions(language_pack=english_pack)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep SNIFF_TEXT_* variables from the developer's shell out of tests."""
    import os

    for key in list(os.environ):
        if key.startswith("SNIFF_TEXT_"):
            monkeypatch.delenv(key, raising=False)


AI_SAMPLE = (
    "Furthermore, it is important to note that the solution delivers value. "
    "Moreover, the strategy improves efficiency across the organization. "
    "Additionally, the roadmap ensures alignment with key objectives. "
    "Consequently, stakeholders benefit from improved outcomes overall. "
    "In conclusion, the approach provides a robust and scalable framework."
)

HUMAN_SAMPLE = (
    "I missed the bus again. Typical! So I walked, which honestly wasn't the worst thing "
    "since the rain had finally stopped and the whole street smelled like wet pavement "
    "and somebody's barbecue. Got to work late. My boss didn't even notice, thank god, "
    "because she was stuck on a call about the printer that's been broken since March."
)

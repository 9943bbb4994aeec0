"""
Detector Registry
─────────────────
Ordered, immutable descriptor table. Cheapest detectors run first so early
termination skips the expensive tail.

  name                     ms    strength  weight  threshold  amp
  shannon_entropy          0.5   medium    0.10    0.50       1.5
  burstiness               1.2   strong    0.12    0.55       2.0
  em_dash_epidemic         1.8   weak      0.06    0.50       1.0
  ngram_repetition         2.8   medium    0.08    0.50       1.2
  zipf_deviation           3.1   weak      0.07    0.50       1.0
  ai_transition_phrases    4.2   strong    0.15    0.60       2.5
  participial_phrases      5.7   strong    0.11    0.60       1.8
  rule_of_three            6.3   strong    0.13    0.65       2.2
  perfect_grammar          8.9   medium    0.09    0.70       1.4
  perplexity_approximator 12.4   medium    0.09    0.55       1.3

Language packs may override the weights of the locale-sensitive detectors
(grammar, transitions, participles); the merge produces a new registry.
"""

from dataclasses import replace
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

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
from sniff_text.detectors.base import clamp
from sniff_text.models import DetectorDescriptor, Strength


def baseline_extractor(key: str, human_baseline: float, ai_baseline: float):
    """Linear map of a metric between its human and AI baselines onto [0, 1]."""

    def extract(result: dict) -> float:
        value = result[key]
        return clamp((human_baseline - value) / (human_baseline - ai_baseline))

    return extract


def likelihood_extractor(result: dict) -> float:
    return result["ai_likelihood"]


class DetectorRegistry:
    """Immutable, cost-ordered collection of detector descriptors."""

    def __init__(self, descriptors: Iterable[DetectorDescriptor]):
        ordered = sorted(descriptors, key=lambda d: d.expected_time_ms)
        seen = set()
        for d in ordered:
            if d.name in seen:
                raise ValueError(f"Duplicate detector name: {d.name!r}")
            seen.add(d.name)
            _validate(d)
        self._descriptors: Tuple[DetectorDescriptor, ...] = tuple(ordered)
        self._by_name: Dict[str, DetectorDescriptor] = {d.name: d for d in ordered}

    def __iter__(self) -> Iterator[DetectorDescriptor]:
        return iter(self._descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)

    def __contains__(self, name: str) -> bool:
        return name in self._by_name

    @property
    def descriptors(self) -> Tuple[DetectorDescriptor, ...]:
        return self._descriptors

    @property
    def names(self) -> List[str]:
        return [d.name for d in self._descriptors]

    @property
    def strong_count(self) -> int:
        return sum(1 for d in self._descriptors if d.is_strong)

    def get(self, name: str) -> Optional[DetectorDescriptor]:
        return self._by_name.get(name)

    def with_weights(self, overrides: Dict[str, float]) -> "DetectorRegistry":
        """Return a new registry with *overrides* merged over the default weights."""
        if not overrides:
            return self
        return DetectorRegistry(
            replace(d, reliability_weight=overrides[d.name]) if d.name in overrides else d
            for d in self._descriptors
        )

    def with_language_pack(self, language_pack) -> "DetectorRegistry":
        return self.with_weights(language_pack.weight_overrides())


def _validate(d: DetectorDescriptor) -> None:
    if not 0.0 <= d.threshold <= 1.0:
        raise ValueError(f"{d.name}: threshold must be in [0, 1], got {d.threshold}")
    if d.amplification <= 0:
        raise ValueError(f"{d.name}: amplification must be positive, got {d.amplification}")
    if not 0.0 <= d.reliability_weight <= 1.0:
        raise ValueError(
            f"{d.name}: reliability weight must be in [0, 1], got {d.reliability_weight}"
        )
    if not isinstance(d.strength, Strength):
        raise ValueError(f"{d.name}: unknown strength {d.strength!r}")


BUILTIN_DESCRIPTORS = (
    DetectorDescriptor(
        name="shannon_entropy",
        detector=ShannonEntropyDetector(),
        min_words=0,
        min_sentences=0,
        expected_time_ms=0.5,
        # Human baseline ~4.2 bits, AI baseline ~3.5 bits
        score_extractor=baseline_extractor("entropy", 4.2, 3.5),
        threshold=0.5,
        amplification=1.5,
        strength=Strength.MEDIUM,
        reliability_weight=0.10,
    ),
    DetectorDescriptor(
        name="burstiness",
        detector=BurstinessDetector(),
        min_words=0,
        min_sentences=2,
        expected_time_ms=1.2,
        # Human baseline CV ~0.85, AI baseline ~0.12
        score_extractor=baseline_extractor("burstiness", 0.85, 0.12),
        threshold=0.55,
        amplification=2.0,
        strength=Strength.STRONG,
        reliability_weight=0.12,
    ),
    DetectorDescriptor(
        name="em_dash_epidemic",
        detector=EmDashEpidemicDetector(),
        min_words=20,
        min_sentences=0,
        expected_time_ms=1.8,
        score_extractor=likelihood_extractor,
        threshold=0.5,
        amplification=1.0,
        strength=Strength.WEAK,
        reliability_weight=0.06,
    ),
    DetectorDescriptor(
        name="ngram_repetition",
        detector=NgramRepetitionDetector(),
        min_words=10,
        min_sentences=0,
        expected_time_ms=2.8,
        # Human diversity ~0.8, AI ~0.6
        score_extractor=baseline_extractor("diversity_ratio", 0.8, 0.6),
        threshold=0.5,
        amplification=1.2,
        strength=Strength.MEDIUM,
        reliability_weight=0.08,
    ),
    DetectorDescriptor(
        name="zipf_deviation",
        detector=ZipfDeviationDetector(),
        min_words=10,
        min_sentences=0,
        expected_time_ms=3.1,
        score_extractor=likelihood_extractor,
        threshold=0.5,
        amplification=1.0,
        strength=Strength.WEAK,
        reliability_weight=0.07,
    ),
    DetectorDescriptor(
        name="ai_transition_phrases",
        detector=TransitionPhraseDetector(),
        min_words=20,
        min_sentences=0,
        expected_time_ms=4.2,
        score_extractor=likelihood_extractor,
        threshold=0.6,
        amplification=2.5,
        strength=Strength.STRONG,
        reliability_weight=0.15,
    ),
    DetectorDescriptor(
        name="participial_phrases",
        detector=ParticipialPhraseDetector(),
        min_words=25,
        min_sentences=0,
        expected_time_ms=5.7,
        score_extractor=likelihood_extractor,
        threshold=0.6,
        amplification=1.8,
        strength=Strength.STRONG,
        reliability_weight=0.11,
    ),
    DetectorDescriptor(
        name="rule_of_three",
        detector=RuleOfThreeDetector(),
        min_words=30,
        min_sentences=0,
        expected_time_ms=6.3,
        score_extractor=likelihood_extractor,
        threshold=0.65,
        amplification=2.2,
        strength=Strength.STRONG,
        reliability_weight=0.13,
    ),
    DetectorDescriptor(
        name="perfect_grammar",
        detector=PerfectGrammarDetector(),
        min_words=30,
        min_sentences=0,
        expected_time_ms=8.9,
        score_extractor=likelihood_extractor,
        threshold=0.7,
        amplification=1.4,
        strength=Strength.MEDIUM,
        reliability_weight=0.09,
    ),
    DetectorDescriptor(
        name="perplexity_approximator",
        detector=PerplexityApproximator(),
        min_words=15,
        min_sentences=0,
        expected_time_ms=12.4,
        score_extractor=likelihood_extractor,
        threshold=0.55,
        amplification=1.3,
        strength=Strength.MEDIUM,
        reliability_weight=0.09,
    ),
)

_DEFAULT_REGISTRY = DetectorRegistry(BUILTIN_DESCRIPTORS)


def default_registry() -> DetectorRegistry:
    """The process-wide built-in registry (shared, never mutated)."""
    return _DEFAULT_REGISTRY

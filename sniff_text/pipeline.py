"""
Pipeline Orchestrator
─────────────────────
Runs the registry strictly in order, one detector at a time:

  idle ─► running ─┬─► terminated_normal   (registry exhausted)
                   ├─► terminated_early    (consensus reached)
                   └─► failed_no_data      (nothing contributed, raises)

Gated, crashing, slow or garbage-returning detectors are recorded as
non-contributing outcomes; they never abort the call.
"""

import logging
import math
import time
from numbers import Real

from sniff_text.confidence import calculate_confidence
from sniff_text.consensus import Signal, calculate_consensus
from sniff_text.errors import (
    InvalidConfiguration,
    InvalidInput,
    MissingConfiguration,
    NoViableDetectors,
)
from sniff_text.models import (
    AnalysisOptions,
    DetectorOutcome,
    OutcomeStatus,
    PipelineState,
    Strength,
)
from sniff_text.registry import DetectorRegistry, default_registry
from sniff_text.segmentation import compute_text_metrics
from sniff_text.synthesis import synthesize
from sniff_text.transform import amplify_score

logger = logging.getLogger(__name__)

EARLY_TERMINATION_CONSENSUS = 0.90
EARLY_TERMINATION_STRONG_CONSENSUS = 0.85
EARLY_TERMINATION_MIN_CONTRIBUTORS = 3


def _valid_score(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    value = float(value)
    return math.isfinite(value) and 0.0 <= value <= 1.0


class AnalysisPipeline:
    """
    Orchestrates one analysis: validates, gates, runs, weighs, fuses.

    Args:
        registry: Detector registry (defaults to the built-in ten detectors).
        clock: Zero-argument callable returning seconds; injectable so timing
            (and therefore confidence) is deterministic under test.
    """

    def __init__(self, registry: DetectorRegistry = None, clock=time.perf_counter):
        self.registry = registry if registry is not None else default_registry()
        self.clock = clock

    def _elapsed_ms(self, started: float) -> float:
        return (self.clock() - started) * 1000.0

    # -- validation ----------------------------------------------------------

    @staticmethod
    def _validate(text, options) -> AnalysisOptions:
        if not isinstance(text, str):
            raise InvalidInput("Input 'text' must be a string")
        if not text.strip():
            raise InvalidInput("Cannot analyze empty text")
        if options is None or getattr(options, "language_pack", None) is None:
            raise MissingConfiguration("Parameter 'language_pack' is required")
        return options

    # -- public API ----------------------------------------------------------

    def analyze(self, text: str, options: AnalysisOptions):
        options = self._validate(text, options)

        started = self.clock()
        metrics = compute_text_metrics(text, options.language_pack)
        if metrics.word_count < options.min_word_count:
            raise InvalidInput(
                f"Text must contain at least {options.min_word_count} words for meaningful analysis"
            )

        try:
            registry = self.registry.with_language_pack(options.language_pack)
        except ValueError as e:
            raise InvalidConfiguration(
                f"Language pack '{options.language_pack.name}' has invalid detector weights: {e}"
            ) from e
        total_known = len(registry)
        total_strong = registry.strong_count
        logger.debug("Pipeline %s with %d detectors", PipelineState.RUNNING.value, total_known)

        outcomes = []
        signals = []
        terminated_early = False

        for d in registry:
            if metrics.word_count < d.min_words or metrics.sentence_count < d.min_sentences:
                logger.debug("%s gated (%d words, %d sentences)",
                             d.name, metrics.word_count, metrics.sentence_count)
                outcomes.append(DetectorOutcome(
                    name=d.name,
                    status=OutcomeStatus.GATED,
                    strength=d.strength,
                    reliability_weight=d.reliability_weight,
                    failure_reason=(
                        f"Insufficient text (needs {d.min_words}+ words, "
                        f"{d.min_sentences}+ sentences)"
                    ),
                ))
                continue

            outcome = self._run_detector(d, text, metrics.word_count, options)
            outcomes.append(outcome)
            if not outcome.contributes:
                continue

            signals.append(Signal(outcome.amplified_score, d.strength, d.reliability_weight))

            if options.enable_early_termination and len(signals) >= EARLY_TERMINATION_MIN_CONTRIBUTORS:
                current = calculate_consensus(signals, total_known, total_strong)
                strong_ran = sum(1 for s in signals if s.strength is Strength.STRONG)
                if (current.consensus_score >= EARLY_TERMINATION_CONSENSUS
                        or (current.strong_consensus >= EARLY_TERMINATION_STRONG_CONSENSUS
                            and strong_ran >= 2)):
                    logger.debug("Early termination after %s (consensus=%.3f, strong=%.3f)",
                                 d.name, current.consensus_score, current.strong_consensus)
                    terminated_early = True
                    break

        if not signals:
            logger.debug("Pipeline %s", PipelineState.FAILED_NO_DATA.value)
            raise NoViableDetectors(
                "No detectors could successfully analyze the text - "
                "text may be too short or invalid"
            )

        consensus = calculate_consensus(signals, total_known, total_strong)
        result = synthesize(
            outcomes,
            consensus,
            metrics,
            total_known=total_known,
            total_time_ms=self._elapsed_ms(started),
            include_details=options.include_details,
            terminated_early=terminated_early,
        )
        logger.info("Verdict %s (likelihood=%.3f, certainty=%.3f, %d/%d detectors, %s)",
                    result.classification, result.ai_likelihood, result.certainty,
                    len(signals), total_known, result.pipeline_state.value)
        return result

    def _run_detector(self, d, text: str, word_count: int, options: AnalysisOptions) -> DetectorOutcome:
        base = dict(name=d.name, strength=d.strength, reliability_weight=d.reliability_weight)
        run_started = self.clock()
        try:
            result = d.detector.analyze(text, options.language_pack)
        except Exception as e:
            elapsed = self._elapsed_ms(run_started)
            logger.warning("%s failed: %s", d.name, e)
            return DetectorOutcome(status=OutcomeStatus.FAILED, execution_time_ms=elapsed,
                                   failure_reason=f"Algorithm failed: {e}", **base)
        elapsed = self._elapsed_ms(run_started)

        if elapsed > options.max_execution_time_ms:
            logger.warning("%s exceeded %.1f ms (took %.1f ms)",
                           d.name, options.max_execution_time_ms, elapsed)
            return DetectorOutcome(status=OutcomeStatus.TIMEOUT, execution_time_ms=elapsed,
                                   failure_reason=f"Timeout (>{options.max_execution_time_ms:g}ms)",
                                   **base)

        try:
            raw = d.score_extractor(result)
        except Exception as e:
            logger.warning("%s score extraction failed: %s", d.name, e)
            raw = None
        if not _valid_score(raw):
            logger.warning("%s returned invalid score %r", d.name, raw)
            return DetectorOutcome(status=OutcomeStatus.INVALID_SCORE, execution_time_ms=elapsed,
                                   failure_reason="Invalid score returned", **base)

        raw = float(raw)
        transformed, amplified = amplify_score(raw, d.threshold, d.amplification, d.strength)
        confidence = calculate_confidence(
            d.reliability_weight, word_count, d.min_words, d.expected_time_ms, elapsed,
        )
        return DetectorOutcome(
            status=OutcomeStatus.CONTRIBUTED,
            raw_score=raw,
            transformed_score=transformed,
            amplified_score=amplified,
            execution_time_ms=elapsed,
            confidence=confidence,
            **base,
        )


def analyze(text: str, options: AnalysisOptions = None):
    """Analyze *text* with the built-in registry."""
    return AnalysisPipeline().analyze(text, options)

"""
Data Model
──────────
Immutable records passed between the registry, the pipeline and the
synthesizer. Only DetectorDescriptor outlives a single analyze() call.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, Tuple

from sniff_text import config


class Strength(str, Enum):
    STRONG = "strong"
    MEDIUM = "medium"
    WEAK = "weak"


class PipelineState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    TERMINATED_NORMAL = "terminated_normal"
    TERMINATED_EARLY = "terminated_early"
    FAILED_NO_DATA = "failed_no_data"


class OutcomeStatus(str, Enum):
    CONTRIBUTED = "contributed"
    GATED = "gated"
    FAILED = "failed"
    TIMEOUT = "timeout"
    INVALID_SCORE = "invalid_score"


@dataclass(frozen=True)
class DetectorDescriptor:
    """Static metadata for one detector.

    ``detector`` exposes ``analyze(text, language_pack) -> dict`` and
    ``score_extractor`` turns that dict into a raw AI-likelihood in [0, 1].
    """

    name: str
    detector: Any
    min_words: int
    min_sentences: int
    expected_time_ms: float
    score_extractor: Callable[[dict], float]
    threshold: float
    amplification: float
    strength: Strength
    reliability_weight: float

    @property
    def is_strong(self) -> bool:
        return self.strength is Strength.STRONG


@dataclass(frozen=True)
class DetectorOutcome:
    name: str
    status: OutcomeStatus
    strength: Strength
    reliability_weight: float
    raw_score: Optional[float] = None
    transformed_score: Optional[float] = None
    amplified_score: Optional[float] = None
    execution_time_ms: float = 0.0
    confidence: float = 0.0
    failure_reason: Optional[str] = None

    @property
    def contributes(self) -> bool:
        return self.status is OutcomeStatus.CONTRIBUTED

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "rawScore": self.raw_score,
            "transformedScore": self.transformed_score,
            "amplifiedScore": self.amplified_score,
            "executionTimeMs": self.execution_time_ms,
            "confidence": self.confidence,
            "weight": self.reliability_weight,
            "strength": self.strength.value,
            "contributes": self.contributes,
            "status": self.status.value,
            "failureReason": self.failure_reason,
        }


@dataclass(frozen=True)
class ConsensusMetrics:
    consensus_score: float
    adjustment: float
    uncertainty: float
    strong_consensus: float
    strong_signal_bonus: float


@dataclass(frozen=True)
class TextMetrics:
    word_count: int
    sentence_count: int
    character_count: int
    detected_text_type: str

    def to_dict(self) -> dict:
        return {
            "wordCount": self.word_count,
            "sentenceCount": self.sentence_count,
            "characterCount": self.character_count,
            "detectedTextType": self.detected_text_type,
        }


@dataclass(frozen=True)
class AnalysisResult:
    ai_likelihood: float
    certainty: float
    combined_score: float
    consensus: float
    total_execution_time_ms: float
    detector_outcomes: Tuple[DetectorOutcome, ...]
    text_metrics: TextMetrics
    explanation: str
    classification: str
    terminated_early: bool = False

    @property
    def pipeline_state(self) -> PipelineState:
        """Terminal state of the run that produced this result."""
        if self.terminated_early:
            return PipelineState.TERMINATED_EARLY
        return PipelineState.TERMINATED_NORMAL

    def to_dict(self) -> dict:
        """Serialise using the stable camelCase field names."""
        return {
            "aiLikelihood": self.ai_likelihood,
            "certainty": self.certainty,
            "combinedScore": self.combined_score,
            "consensus": self.consensus,
            "totalExecutionTimeMs": self.total_execution_time_ms,
            "detectorOutcomes": [o.to_dict() for o in self.detector_outcomes],
            "textMetrics": self.text_metrics.to_dict(),
            "explanation": self.explanation,
            "classification": self.classification,
            "terminatedEarly": self.terminated_early,
        }


@dataclass(frozen=True)
class AnalysisOptions:
    language_pack: Any
    include_details: bool = True
    enable_early_termination: bool = True
    max_execution_time_ms: float = 50.0
    min_word_count: int = 2

    @classmethod
    def from_config(cls, language_pack=None) -> "AnalysisOptions":
        """Build options from SNIFF_TEXT_* settings (and .env, if present)."""
        if language_pack is None:
            from sniff_text.languagepacks import get_language_pack
            language_pack = get_language_pack(config.get("language"))
        return cls(
            language_pack=language_pack,
            include_details=config.get("include_details"),
            enable_early_termination=config.get("enable_early_termination"),
            max_execution_time_ms=config.get("max_execution_time_ms"),
            min_word_count=config.get("min_word_count"),
        )

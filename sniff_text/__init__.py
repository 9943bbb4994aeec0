"""Fused-signal AI text detection."""

from sniff_text.errors import (
    InvalidConfiguration,
    InvalidInput,
    MissingConfiguration,
    NoViableDetectors,
    SniffTextError,
)
from sniff_text.languagepacks import get_language_pack
from sniff_text.models import (
    AnalysisOptions,
    AnalysisResult,
    ConsensusMetrics,
    DetectorDescriptor,
    DetectorOutcome,
    OutcomeStatus,
    PipelineState,
    Strength,
    TextMetrics,
)
from sniff_text.pipeline import AnalysisPipeline, analyze
from sniff_text.registry import DetectorRegistry, default_registry

__version__ = "1.0.0"

__all__ = [
    "AnalysisOptions",
    "AnalysisPipeline",
    "AnalysisResult",
    "ConsensusMetrics",
    "DetectorDescriptor",
    "DetectorOutcome",
    "DetectorRegistry",
    "InvalidConfiguration",
    "InvalidInput",
    "MissingConfiguration",
    "NoViableDetectors",
    "OutcomeStatus",
    "PipelineState",
    "SniffTextError",
    "Strength",
    "TextMetrics",
    "analyze",
    "default_registry",
    "get_language_pack",
]

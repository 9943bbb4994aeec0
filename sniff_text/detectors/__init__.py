"""Built-in detectors."""

from sniff_text.detectors.base import TextDetector
from sniff_text.detectors.entropy import ShannonEntropyDetector
from sniff_text.detectors.burstiness import BurstinessDetector
from sniff_text.detectors.punctuation import EmDashEpidemicDetector
from sniff_text.detectors.ngram import NgramRepetitionDetector
from sniff_text.detectors.zipf import ZipfDeviationDetector
from sniff_text.detectors.transitions import TransitionPhraseDetector
from sniff_text.detectors.participial import ParticipialPhraseDetector
from sniff_text.detectors.rule_of_three import RuleOfThreeDetector
from sniff_text.detectors.grammar import PerfectGrammarDetector
from sniff_text.detectors.perplexity import PerplexityApproximator

__all__ = [
    "TextDetector",
    "ShannonEntropyDetector",
    "BurstinessDetector",
    "EmDashEpidemicDetector",
    "NgramRepetitionDetector",
    "ZipfDeviationDetector",
    "TransitionPhraseDetector",
    "ParticipialPhraseDetector",
    "RuleOfThreeDetector",
    "PerfectGrammarDetector",
    "PerplexityApproximator",
]

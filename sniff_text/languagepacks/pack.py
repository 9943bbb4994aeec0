"""Locale resources consumed by the text-type detector and some detectors."""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Mapping, Optional, Tuple


@dataclass(frozen=True)
class TextCategory:
    tokens: FrozenSet[str] = frozenset()
    phrases: FrozenSet[str] = frozenset()


@dataclass(frozen=True)
class TransitionProfile:
    phrases: FrozenSet[str]
    weight: Optional[float] = None


@dataclass(frozen=True)
class ParticipleProfile:
    # Regexes matched against the start of each sentence.
    openers: Tuple[str, ...]
    weight: Optional[float] = None


@dataclass(frozen=True)
class GrammarProfile:
    # Regexes for the slips and informal markers human writers leave behind.
    imperfections: Tuple[str, ...]
    weight: Optional[float] = None


@dataclass(frozen=True)
class RuleOfThreeProfile:
    conjunctions: FrozenSet[str]


@dataclass(frozen=True)
class PunctuationProfile:
    # mark -> (expected uses per 1000 words in human prose, weight)
    baselines: Mapping[str, Tuple[float, float]]


@dataclass(frozen=True)
class LanguagePack:
    name: str
    default_type: str
    priority: Tuple[str, ...]
    categories: Mapping[str, TextCategory]
    transitions: TransitionProfile
    participles: ParticipleProfile
    grammar: GrammarProfile
    rule_of_three: RuleOfThreeProfile
    punctuation: PunctuationProfile
    common_words: FrozenSet[str] = field(default_factory=frozenset)

    def weight_overrides(self) -> Dict[str, float]:
        """Sparse {detector_name: reliability_weight} overrides for this locale."""
        overrides = {}
        if self.grammar.weight is not None:
            overrides["perfect_grammar"] = self.grammar.weight
        if self.transitions.weight is not None:
            overrides["ai_transition_phrases"] = self.transitions.weight
        if self.participles.weight is not None:
            overrides["participial_phrases"] = self.participles.weight
        return overrides

"""
Text Segmentation & Metrics
───────────────────────────
Word/sentence splitting shared by the pipeline gates and the detectors, plus
the per-call TextMetrics (counts + a coarse text-type guess).
"""

import re

from nltk.tokenize import RegexpTokenizer

from sniff_text.models import TextMetrics

_WORD_TOKENIZER = RegexpTokenizer(r"[^\W\d_]+(?:['’][^\W\d_]+)?")
_SENTENCE_BREAK = re.compile(r"[.!?;…]+")


def tokenize_words(text: str) -> list:
    """Lower-cased alphabetic word tokens (contractions kept whole)."""
    return [w.lower() for w in _WORD_TOKENIZER.tokenize(text)]


def split_sentences(text: str) -> list:
    return [s.strip() for s in _SENTENCE_BREAK.split(text) if s.strip()]


def detect_text_type(text: str, language_pack) -> str:
    """Pick the category with the most token/phrase hits.

    Ties go to the category listed first in the pack's priority; with no hits
    at all the pack's default type is returned.
    """
    words = tokenize_words(text)
    padded = f" {' '.join(words)} "
    word_set = set(words)

    best_type, best_hits = language_pack.default_type, 0
    ordered = list(language_pack.priority) + [
        name for name in language_pack.categories if name not in language_pack.priority
    ]
    for name in ordered:
        category = language_pack.categories.get(name)
        if category is None:
            continue
        hits = sum(1 for token in category.tokens if token in word_set)
        hits += sum(2 for phrase in category.phrases if f" {phrase} " in padded)
        if hits > best_hits:
            best_type, best_hits = name, hits
    return best_type


def compute_text_metrics(text: str, language_pack) -> TextMetrics:
    words = [w for w in text.split() if w]
    return TextMetrics(
        word_count=len(words),
        sentence_count=len(split_sentences(text)),
        character_count=len(text),
        detected_text_type=detect_text_type(text, language_pack),
    )

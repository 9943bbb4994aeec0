"""N-gram repetition: share of distinct word bigrams and trigrams."""

from nltk.util import ngrams

from sniff_text.detectors.base import TextDetector
from sniff_text.segmentation import tokenize_words


class NgramRepetitionDetector(TextDetector):
    name = "ngram_repetition"

    def analyze(self, text: str, language_pack) -> dict:
        words = tokenize_words(text)
        ratios = []
        for n in (2, 3):
            grams = list(ngrams(words, n))
            if grams:
                ratios.append(len(set(grams)) / len(grams))

        diversity = sum(ratios) / len(ratios) if ratios else 1.0
        return {
            "diversity_ratio": diversity,
            "reason": f"N-gram diversity {diversity:.2f}",
        }

"""
Perplexity Approximation Engine
───────────────────────────────
No language model here: predictability is approximated from the share of
very common words and the type-token ratio. Predictable, low-variety word
choice reads as generated.
"""

from sniff_text.detectors.base import TextDetector, clamp
from sniff_text.segmentation import tokenize_words

COMMON_WORD_BASELINE = 0.65
TYPE_TOKEN_BASELINE = 0.75


class PerplexityApproximator(TextDetector):
    name = "perplexity_approximator"

    def analyze(self, text: str, language_pack) -> dict:
        words = tokenize_words(text)
        if not words:
            return {"ai_likelihood": 0.0, "predictability": 0.0, "reason": "No words"}

        common_ratio = sum(1 for w in words if w in language_pack.common_words) / len(words)
        type_token = len(set(words)) / len(words)
        predictability = (
            0.6 * min(1.0, common_ratio / COMMON_WORD_BASELINE)
            + 0.4 * (1.0 - min(1.0, type_token / TYPE_TOKEN_BASELINE))
        )
        return {
            "ai_likelihood": clamp((predictability - 0.35) / 0.5),
            "predictability": predictability,
            "type_token_ratio": type_token,
            "reason": f"Predictability {predictability:.2f} (TTR {type_token:.2f})",
        }

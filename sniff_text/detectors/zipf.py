"""
Zipf Deviation Engine
─────────────────────
Fits log(frequency) against log(rank). Natural text has an exponent near 1;
a flattened head (recycled mid-frequency vocabulary) pulls it away.
"""

import numpy as np
from nltk.probability import FreqDist

from sniff_text.detectors.base import TextDetector, clamp
from sniff_text.segmentation import tokenize_words


class ZipfDeviationDetector(TextDetector):
    name = "zipf_deviation"

    def __init__(self, max_ranks: int = 100):
        self.max_ranks = max_ranks

    def analyze(self, text: str, language_pack) -> dict:
        dist = FreqDist(tokenize_words(text))
        freqs = [count for _, count in dist.most_common(self.max_ranks)]
        if len(freqs) < 3:
            return {"ai_likelihood": 0.5, "zipf_exponent": 0.0, "r_squared": 0.0,
                    "reason": "Too few distinct words for a rank fit"}

        x = np.log(np.arange(1, len(freqs) + 1))
        y = np.log(np.asarray(freqs, dtype=float))
        slope, intercept = np.polyfit(x, y, 1)
        residual = y - (slope * x + intercept)
        total = float(((y - y.mean()) ** 2).sum())
        r_squared = 1.0 - float((residual ** 2).sum()) / total if total > 0 else 0.0

        exponent = float(-slope)
        deviation = abs(exponent - 1.0)
        return {
            "ai_likelihood": clamp(deviation / 0.6),
            "zipf_exponent": exponent,
            "r_squared": clamp(r_squared),
            "reason": f"Zipf exponent {exponent:.2f} (deviation {deviation:.2f})",
        }

"""
Shannon Entropy Engine
──────────────────────
Character-level entropy of the lower-cased text. Human English prose sits
around 4.2 bits/char; generated prose with a narrower, more predictable
vocabulary drifts toward 3.5.
"""

import math
import re

from nltk.probability import FreqDist

from sniff_text.detectors.base import TextDetector


class ShannonEntropyDetector(TextDetector):
    name = "shannon_entropy"

    def analyze(self, text: str, language_pack) -> dict:
        chars = re.sub(r"\s+", " ", text.lower()).strip()
        if not chars:
            return {"entropy": 0.0, "characters": 0, "reason": "No characters to measure"}

        dist = FreqDist(chars)
        total = dist.N()
        entropy = -sum((n / total) * math.log2(n / total) for n in dist.values())

        return {
            "entropy": entropy,
            "characters": total,
            "reason": f"Character entropy {entropy:.2f} bits across {total} characters",
        }

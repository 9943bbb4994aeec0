"""Rule-of-three obsession: "fast, reliable, and secure" style triads."""

import re

from sniff_text.detectors.base import TextDetector, clamp

# Triads per 100 words at which the signal saturates.
_SATURATION_RATE = 2.5


class RuleOfThreeDetector(TextDetector):
    name = "rule_of_three"

    def analyze(self, text: str, language_pack) -> dict:
        word_count = len(text.split())
        if word_count == 0:
            return {"ai_likelihood": 0.0, "triads": 0, "reason": "No words"}

        conjunctions = "|".join(
            re.escape(c) for c in sorted(language_pack.rule_of_three.conjunctions)
        )
        item = r"[^\W\d_]+(?:\s[^\W\d_]+)?"
        triad = re.compile(
            rf"\b{item},\s+{item},?\s+(?:{conjunctions})\s+{item}\b", re.IGNORECASE
        )
        triads = len(triad.findall(text))
        rate = triads * 100.0 / word_count
        return {
            "ai_likelihood": clamp(rate / _SATURATION_RATE),
            "triads": triads,
            "reason": f"{triads} triadic list(s), {rate:.1f} per 100 words",
        }

"""
Perfect Grammar Engine
──────────────────────
An inverse signal: human writing carries slips, contractions without
apostrophes and informal markers. Their complete absence in a long text is
mildly suspicious.
"""

import re

from sniff_text.detectors.base import TextDetector, clamp

# Imperfections per 100 words at which the text reads as fully human.
_HUMAN_ERROR_RATE = 2.0


class PerfectGrammarDetector(TextDetector):
    name = "perfect_grammar"

    def analyze(self, text: str, language_pack) -> dict:
        word_count = len(text.split())
        if word_count == 0:
            return {"ai_likelihood": 0.0, "imperfections": 0, "reason": "No words"}

        imperfections = sum(
            len(re.findall(pattern, text)) for pattern in language_pack.grammar.imperfections
        )
        rate = imperfections * 100.0 / word_count
        score = clamp(1.0 - rate / _HUMAN_ERROR_RATE)
        if imperfections == 0:
            reason = "Zero grammatical slips or informal markers"
        else:
            reason = f"{imperfections} human-style imperfection(s)"
        return {"ai_likelihood": score, "imperfections": imperfections, "reason": reason}

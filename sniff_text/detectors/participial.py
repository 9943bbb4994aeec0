"""Participial phrase formula: "Leveraging X, the team ..." and ", ensuring Y"."""

import re

from sniff_text.detectors.base import TextDetector, clamp
from sniff_text.segmentation import split_sentences


class ParticipialPhraseDetector(TextDetector):
    name = "participial_phrases"

    def analyze(self, text: str, language_pack) -> dict:
        patterns = [re.compile(p) for p in language_pack.participles.openers]
        sentences = split_sentences(text)
        if not sentences:
            return {"ai_likelihood": 0.0, "flagged": 0, "reason": "No sentences"}

        flagged = sum(1 for s in sentences if any(p.search(s) for p in patterns))
        share = flagged / len(sentences)
        # Half the sentences built on the formula is already saturation.
        return {
            "ai_likelihood": clamp(share / 0.5),
            "flagged": flagged,
            "reason": f"{flagged}/{len(sentences)} sentences use participial formulas",
        }

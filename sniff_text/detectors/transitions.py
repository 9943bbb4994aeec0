"""
AI Transition Phrase Engine
───────────────────────────
Counts the stock connectors ("furthermore", "it is important to note")
generated prose leans on. Sentence-initial use counts extra, since that is
where the mechanical pattern shows.
"""

import re

from sniff_text.detectors.base import TextDetector, clamp
from sniff_text.segmentation import split_sentences

# Transitions per 100 words at which the signal saturates.
_SATURATION_DENSITY = 3.0


class TransitionPhraseDetector(TextDetector):
    name = "ai_transition_phrases"

    def analyze(self, text: str, language_pack) -> dict:
        lowered = text.lower()
        word_count = len(lowered.split())
        if word_count == 0:
            return {"ai_likelihood": 0.0, "matches": {}, "reason": "No words"}

        matches = {}
        for phrase in language_pack.transitions.phrases:
            hits = len(re.findall(r"(?<!\w)" + re.escape(phrase) + r"(?!\w)", lowered))
            if hits:
                matches[phrase] = hits

        openers = 0
        for sentence in split_sentences(lowered):
            if any(sentence.startswith(p) for p in matches):
                openers += 1

        weighted_hits = sum(matches.values()) + 0.5 * openers
        density = weighted_hits * 100.0 / word_count
        if matches:
            top = sorted(matches, key=matches.get, reverse=True)[:3]
            reason = f"Mechanical transitions: {', '.join(top)}"
        else:
            reason = "No stock transition phrases"
        return {
            "ai_likelihood": clamp(density / _SATURATION_DENSITY),
            "density": density,
            "matches": matches,
            "reason": reason,
        }

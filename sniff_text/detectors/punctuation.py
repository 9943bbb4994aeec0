"""
Em-Dash Epidemic Engine
───────────────────────
Generated prose overuses em-dashes, semicolons and colons relative to the
human per-1000-word baselines stored in the language pack.
"""

from sniff_text.detectors.base import TextDetector, clamp

# Overuse is capped per mark so one stray dash in a short text cannot dominate.
_MAX_OVERUSE = 4.0


class EmDashEpidemicDetector(TextDetector):
    name = "em_dash_epidemic"

    def analyze(self, text: str, language_pack) -> dict:
        word_count = len(text.split())
        if word_count == 0:
            return {"ai_likelihood": 0.0, "overused": [], "reason": "No words"}

        weighted = 0.0
        overused = []
        for mark, (baseline, weight) in language_pack.punctuation.baselines.items():
            rate = text.count(mark) * 1000.0 / word_count
            overuse = max(0.0, rate / baseline - 1.0) if baseline > 0 else 0.0
            if overuse > 0:
                overused.append(mark)
                weighted += weight * min(overuse, _MAX_OVERUSE) / _MAX_OVERUSE

        score = clamp(weighted / 2.0)
        reason = (
            f"Punctuation overuse: {' '.join(overused)}" if overused
            else "Punctuation within human baselines"
        )
        return {"ai_likelihood": score, "overused": overused, "reason": reason}

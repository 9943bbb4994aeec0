from abc import ABC, abstractmethod


class TextDetector(ABC):
    """A single AI-likelihood signal.

    ``analyze`` returns the detector's own result dict (always with a
    ``reason``); the registry descriptor knows how to turn it into a score.
    """

    name = "unnamed"

    @abstractmethod
    def analyze(self, text: str, language_pack) -> dict:
        ...


def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, value))

"""Fatal errors raised by the analysis pipeline.

Per-detector problems (gating, crashes, timeouts, bad scores) never raise;
they are recorded on the detector outcomes instead.
"""


class SniffTextError(Exception):
    """Base class for every fatal analysis error."""


class InvalidInput(SniffTextError, ValueError):
    """Text is not a string, is blank, or is too short to analyze."""


class MissingConfiguration(SniffTextError):
    """Options or the required language pack were not supplied."""


class NoViableDetectors(SniffTextError):
    """Every detector was gated, failed, timed out or returned garbage."""


class InvalidConfiguration(SniffTextError, ValueError):
    """Supplied options or language pack carry out-of-range values."""

"""Landis & Koch (1977) interpretation of Cohen's Kappa."""
import math
from enum import Enum
from typing import Optional


class KappaBand(Enum):
    """Reliability bands with their display ranges."""
    NOT_APPLICABLE = ("N/A", "")
    POOR = ("Poor", "< 0")
    SLIGHT = ("Slight", "0–0.20")
    FAIR = ("Fair", "0.21–0.40")
    MODERATE = ("Moderate", "0.41–0.60")
    SUBSTANTIAL = ("Substantial", "0.61–0.80")
    ALMOST_PERFECT = ("Almost Perfect", "0.81–1.00")

    def __init__(self, label: str, score_range: str):
        self.label = label
        self.score_range = score_range

    @property
    def description(self) -> str:
        if not self.score_range:
            return self.label
        return f"{self.label} ({self.score_range})"


# Lower bound (inclusive) of each band above Poor.
_THRESHOLDS = [
    (0.8, KappaBand.ALMOST_PERFECT),
    (0.6, KappaBand.SUBSTANTIAL),
    (0.4, KappaBand.MODERATE),
    (0.2, KappaBand.FAIR),
    (0.0, KappaBand.SLIGHT),
]


def _is_undefined(value: Optional[float]) -> bool:
    return value is None or math.isnan(value)


def kappa_band(value: Optional[float]) -> KappaBand:
    """Map a Kappa value to its band. ``None`` and NaN map to NOT_APPLICABLE."""
    if _is_undefined(value):
        return KappaBand.NOT_APPLICABLE
    for lower, band in _THRESHOLDS:
        if value >= lower:
            return band
    return KappaBand.POOR


def interpret_kappa(value: Optional[float]) -> str:
    """Human-readable band name, e.g. ``"Moderate"`` or ``"N/A"``."""
    return kappa_band(value).label


def describe_kappa(value: Optional[float]) -> str:
    """Band name with its score range, e.g. ``"Moderate (0.41–0.60)"``."""
    return kappa_band(value).description


def format_kappa(value: Optional[float], digits: int = 3) -> str:
    if _is_undefined(value):
        return "N/A"
    return f"{value:.{digits}f}"

import logging
import math
from typing import Any, Dict, List, Mapping, Tuple, Union

from urlsentry.models import NormalizedAssessment, RawAssessment, ScoreRange
from urlsentry.rules.types import ThreatLabel

logger = logging.getLogger(__name__)

# Evaluated high to low: (label, lower bound, lower bound inclusive).
# Each bracket ends where the previous one starts, so 80 and 90 both land in safeBlue.
BRACKETS: List[Tuple[ThreatLabel, float, bool]] = [
    (ThreatLabel.SUPER_SAFE, 90, False),
    (ThreatLabel.SAFE_BLUE, 80, True),
    (ThreatLabel.MODERATELY_SAFE, 60, True),
    (ThreatLabel.SUSPICIOUS_YELLOW, 40, True),
    (ThreatLabel.UNSAFE_ORANGE, 25, True),
    (ThreatLabel.HIGH_RISK, -math.inf, True),
]

LABEL_CATEGORIES: Dict[ThreatLabel, str] = {
    ThreatLabel.SUPER_SAFE: "Super Safe",
    ThreatLabel.SAFE_BLUE: "Safe",
    ThreatLabel.MODERATELY_SAFE: "Moderately Safe",
    ThreatLabel.SUSPICIOUS_YELLOW: "Suspicious",
    ThreatLabel.UNSAFE_ORANGE: "Unsafe",
    ThreatLabel.HIGH_RISK: "High Risk",
}


def label_for(mid: float) -> ThreatLabel:
    for label, lower, inclusive in BRACKETS:
        if mid > lower or (inclusive and mid == lower):
            return label
    return ThreatLabel.HIGH_RISK


def clamp_score(value: Any) -> int:
    """Coerce to an integer in [0, 100]. Garbage counts as 0."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0
    if math.isnan(number):
        return 0
    number = min(max(number, 0.0), 100.0)
    # halves away from zero, not banker's rounding
    return int(math.floor(number + 0.5))


def normalize(raw: Union[RawAssessment, Mapping[str, Any]]) -> NormalizedAssessment:
    """
    Validate an externally produced score range and re-derive its label.

    Bounds are clamped independently; a max below min is raised to min
    (never swapped). The label comes from the midpoint of the range and the
    supplied label, if any, is ignored.
    """
    if not isinstance(raw, RawAssessment):
        raw = RawAssessment.from_dict(dict(raw))

    score_min = clamp_score(raw.score_min)
    score_max = clamp_score(raw.score_max)
    if score_max < score_min:
        logger.debug("scoreMax %s below scoreMin %s, raised to min", score_max, score_min)
        score_max = score_min

    score_range = ScoreRange(score_min, score_max)
    label = label_for(score_range.mid)

    if raw.label is not None and raw.label != label.value:
        logger.debug("label %r disagrees with range %s-%s, using %s",
                     raw.label, score_min, score_max, label.value)

    return NormalizedAssessment(
        score_range=score_range,
        label=label,
        category=LABEL_CATEGORIES[label],
    )

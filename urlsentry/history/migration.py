import logging
import uuid
from typing import Any, Dict, Mapping, Optional, Tuple

from urlsentry.models import HistoryEntry, RawAssessment
from urlsentry.rules.types import LegacyThreatLevel, ThreatLabel
from urlsentry.scoring.normalizer import normalize

logger = logging.getLogger(__name__)

SCORE_KEYS = (
    "domainReputationScoreMin",
    "domainReputationScoreMax",
    "domainReputationScore",
    "scoreMin",
    "scoreMax",
)

# Representative range of each label, used when a record carries a label but no score.
LABEL_RANGES: Dict[str, Tuple[int, int]] = {
    ThreatLabel.SUPER_SAFE.value: (91, 100),
    ThreatLabel.SAFE_BLUE.value: (80, 90),
    ThreatLabel.MODERATELY_SAFE.value: (60, 79),
    ThreatLabel.SUSPICIOUS_YELLOW.value: (40, 59),
    ThreatLabel.UNSAFE_ORANGE.value: (25, 39),
    ThreatLabel.HIGH_RISK.value: (0, 24),
    LegacyThreatLevel.SAFE.value: (80, 90),
    LegacyThreatLevel.SUSPICIOUS.value: (40, 59),
    LegacyThreatLevel.DANGEROUS.value: (0, 24),
}


def _timestamp(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return 0


def migrate_record(record: Any) -> Optional[HistoryEntry]:
    """
    Turn one persisted history record, current or legacy, into a HistoryEntry.

    Handled shapes:
    - current: domainReputationScoreMin / domainReputationScoreMax
    - older: a single domainReputationScore
    - oldest: only a threatLevel of safe / suspicious / dangerous

    The label is always re-derived from the (normalized) range. Returns None
    for records that cannot be salvaged.
    """
    if not isinstance(record, Mapping):
        return None

    url = record.get("url")
    if not isinstance(url, str) or not url:
        return None

    if any(record.get(key) is not None for key in SCORE_KEYS):
        raw = RawAssessment.from_dict(dict(record))
    else:
        level = record.get("threatLevel") or record.get("label")
        score_range = LABEL_RANGES.get(level)
        if score_range is None:
            return None
        raw = RawAssessment(score_min=score_range[0], score_max=score_range[1], label=level)

    normalized = normalize(raw)
    category = record.get("overallSafetyCategory")
    if not isinstance(category, str) or not category:
        category = normalized.category

    return HistoryEntry(
        id=str(record.get("id") or uuid.uuid4().hex),
        url=url,
        label=normalized.label,
        category=category,
        score_range=normalized.score_range,
        threat_description=str(record.get("threatDescription") or ""),
        reputation_description=str(record.get("reputationDescription") or ""),
        timestamp=_timestamp(record.get("timestamp")),
    )

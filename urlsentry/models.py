from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from urlsentry.rules.types import ReputationCategory, ThreatLabel, Source


@dataclass(frozen=True)
class ReputationAssessment:
    score: int
    category: ReputationCategory
    description: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "category": self.category.value,
            "description": self.description,
        }


@dataclass(frozen=True)
class ScoreRange:
    min: int
    max: int

    @property
    def mid(self) -> float:
        return (self.min + self.max) / 2


@dataclass(frozen=True)
class RawAssessment:
    """
    Candidate assessment handed over by the content-analysis collaborator.
    Nothing here is trusted: the normalizer re-derives label and category.
    """

    score_min: Any
    score_max: Any
    label: Optional[str] = None
    category: Optional[str] = None
    threat_description: str = ""
    reputation_description: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RawAssessment":
        """Accept both the current keys and the older ones."""
        def pick(*keys, default=None):
            for key in keys:
                if data.get(key) is not None:
                    return data[key]
            return default

        return cls(
            score_min=pick("scoreMin", "domainReputationScoreMin", "domainReputationScore", default=0),
            score_max=pick("scoreMax", "domainReputationScoreMax", "domainReputationScore", default=0),
            label=pick("label", "threatLevel"),
            category=pick("category", "overallSafetyCategory"),
            threat_description=pick("threatDescription", default="") or "",
            reputation_description=pick("reputationDescription", default="") or "",
        )


@dataclass(frozen=True)
class NormalizedAssessment:
    score_range: ScoreRange
    label: ThreatLabel
    category: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "scoreMin": self.score_range.min,
            "scoreMax": self.score_range.max,
            "label": self.label.value,
            "category": self.category,
        }


@dataclass(frozen=True)
class UnifiedAssessment:
    url: str
    root_domain: str
    label: ThreatLabel
    category: str
    score_range: ScoreRange
    threat_description: str
    reputation_description: str
    source: Source
    reputation: ReputationAssessment

    @property
    def score_min(self) -> int:
        return self.score_range.min

    @property
    def score_max(self) -> int:
        return self.score_range.max

    def to_dict(self) -> Dict[str, Any]:
        return {
            "url": self.url,
            "rootDomain": self.root_domain,
            "label": self.label.value,
            "category": self.category,
            "scoreMin": self.score_min,
            "scoreMax": self.score_max,
            "threatDescription": self.threat_description,
            "reputationDescription": self.reputation_description,
            "source": self.source.value,
            "reputation": self.reputation.to_dict(),
        }


@dataclass(frozen=True)
class HistoryEntry:
    id: str
    url: str
    label: ThreatLabel
    category: str
    score_range: ScoreRange
    threat_description: str
    reputation_description: str
    timestamp: int = field(default=0)

    def to_dict(self) -> Dict[str, Any]:
        """Persisted layout, one JSON object per entry."""
        return {
            "id": self.id,
            "url": self.url,
            "timestamp": self.timestamp,
            "threatLevel": self.label.value,
            "threatDescription": self.threat_description,
            "domainReputationScoreMin": self.score_range.min,
            "domainReputationScoreMax": self.score_range.max,
            "reputationDescription": self.reputation_description,
            "overallSafetyCategory": self.category,
        }

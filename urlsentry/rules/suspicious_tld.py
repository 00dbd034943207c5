from typing import Optional

from urlsentry.config import get_setting
from urlsentry.rules.base import Rule, FALLBACK
from urlsentry.rules.types import ReputationCategory

SUSPICIOUS_TLDS = (
    ".xyz", ".tk", ".ml", ".ga", ".cf",
    ".gq", ".top", ".loan", ".work", ".club",
)


class SuspiciousTLDRule(Rule):
    """
    TLDs often seen in spam campaigns. Only a share of them is reported as
    Low; the rest skip the keyword rule and go to the hash fallback.
    """

    name = "suspicious_tld"
    category = ReputationCategory.LOW
    score_range = (30, 49)
    description = (
        "This domain uses a TLD often associated with spam or malicious "
        "activities. Caution is advised."
    )

    def __init__(self, probability: Optional[float] = None):
        if probability is None:
            probability = get_setting("heuristics", "suspicious_tld_probability", 0.7)
        self.probability = float(probability)

    def run(self, hostname, rng):
        if not hostname.endswith(SUSPICIOUS_TLDS):
            return None
        if rng.random() < self.probability:
            return self.assess(rng)
        return FALLBACK

import random
from typing import Optional, Tuple

from urlsentry.models import ReputationAssessment
from urlsentry.rules.types import ReputationCategory


class _Fallback:
    """Marker returned by a rule that wants the chain to jump to the hash fallback."""

    def __repr__(self):
        return "FALLBACK"


FALLBACK = _Fallback()


class Rule:
    """
    Base class for reputation rules.

    Attributes:
        name:        unique identifier, used in logs
        category:    category emitted on a match
        score_range: inclusive (low, high) bounds of the random score
        description: text attached to the assessment
    """

    name = "base"
    category: ReputationCategory = ReputationCategory.UNKNOWN
    score_range: Tuple[int, int] = (0, 0)
    description = ""

    # -------------------------------------------------------
    # Output helpers
    # -------------------------------------------------------

    def assess(
        self,
        rng: random.Random,
        score_range: Optional[Tuple[int, int]] = None,
        category: Optional[ReputationCategory] = None,
        description: Optional[str] = None,
    ) -> ReputationAssessment:
        """Draw a score uniformly from the inclusive range and build the result."""
        low, high = score_range or self.score_range
        return ReputationAssessment(
            score=rng.randint(low, high),
            category=category or self.category,
            description=description or self.description,
        )

    # -------------------------------------------------------

    def run(self, hostname: str, rng: random.Random):
        """
        MUST be overridden by each rule.

        Returns a ReputationAssessment on a match, None to let the next
        rule try, or FALLBACK to skip straight to the hash fallback.
        """
        raise NotImplementedError()

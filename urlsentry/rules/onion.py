from urlsentry.rules.base import Rule
from urlsentry.rules.types import ReputationCategory


class OnionRule(Rule):
    name = "onion"
    category = ReputationCategory.CRITICAL
    score_range = (0, 19)
    description = (
        "Accessing .onion sites carries inherent risks. This domain is part of "
        "the Tor network and may host illicit content or pose security threats."
    )

    def run(self, hostname, rng):
        if hostname.endswith(".onion"):
            return self.assess(rng)
        return None

from urlsentry.rules.base import Rule
from urlsentry.rules.types import ReputationCategory

TRUSTED_DOMAINS = {
    "google.com", "youtube.com", "amazon.com", "wikipedia.org",
    "facebook.com", "twitter.com", "linkedin.com", "microsoft.com",
    "apple.com", "github.com", "stackoverflow.com", "developer.mozilla.org",
}


class TrustedDomainRule(Rule):
    name = "trusted_domain"
    category = ReputationCategory.SUPER_SAFE
    score_range = (90, 99)
    description = (
        "This is a globally recognized and highly trusted domain "
        "with excellent security practices."
    )

    def run(self, hostname, rng):
        if hostname in TRUSTED_DOMAINS:
            return self.assess(rng)
        return None

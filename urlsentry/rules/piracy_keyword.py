from urlsentry.rules.base import Rule
from urlsentry.rules.types import ReputationCategory

LOW_REPUTATION_KEYWORDS = (
    "katmovies", "zxcstream", "123movies", "fmovies", "putlocker",
    "piratebay", "torrent", "yts", "rarbg", "sockshare", "ganool",
)


class PiracyKeywordRule(Rule):
    name = "piracy_keyword"
    category = ReputationCategory.LOW
    score_range = (30, 49)
    description = (
        "This domain is associated with content piracy or other questionable "
        "activities. Caution is strongly advised."
    )

    def run(self, hostname, rng):
        # Case-sensitive on purpose: the hostname is already lower-cased by the parser.
        if any(keyword in hostname for keyword in LOW_REPUTATION_KEYWORDS):
            return self.assess(rng)
        return None

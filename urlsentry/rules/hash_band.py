from typing import List, Tuple

from urlsentry.rules.base import Rule
from urlsentry.rules.types import ReputationCategory


def domain_hash(hostname: str) -> int:
    """Spread hostnames over 0-99. Stable across runs and platforms."""
    acc = 0
    for char in hostname:
        acc = acc + ord(char) * (acc % 13 + 1)
    return acc % 100


# (upper bound exclusive, category, score range, description)
BANDS: List[Tuple[int, ReputationCategory, Tuple[int, int], str]] = [
    (
        5,
        ReputationCategory.CRITICAL,
        (10, 29),
        "This domain exhibits characteristics that may indicate potential "
        "security risks. Exercise extreme caution.",
    ),
    (
        20,
        ReputationCategory.LOW,
        (30, 49),
        "This domain has a lower reputation score. Proceed with caution and "
        "verify its legitimacy.",
    ),
    (
        45,
        ReputationCategory.MEDIUM,
        (50, 69),
        "This domain has a moderate reputation. Some aspects may warrant "
        "caution, ensure it is the intended site.",
    ),
    (
        100,
        ReputationCategory.SAFE,
        (70, 89),
        "This domain generally has a good reputation. Standard security "
        "practices are recommended.",
    ),
]


class HashBandRule(Rule):
    """Always matches: last rule of the chain."""

    name = "hash_band"

    def run(self, hostname, rng):
        value = domain_hash(hostname)
        for upper, category, score_range, description in BANDS:
            if value < upper:
                return self.assess(rng, score_range, category, description)
        # unreachable: value is always < 100
        raise AssertionError(f"hash {value} outside of bands")

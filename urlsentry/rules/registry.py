from typing import List

from .base import Rule
from .hash_band import HashBandRule
from .onion import OnionRule
from .piracy_keyword import PiracyKeywordRule
from .suspicious_tld import SuspiciousTLDRule
from .trusted_domain import TrustedDomainRule


def build_rules() -> List[Rule]:
    """Rules in evaluation order. The first match wins."""
    return [
        TrustedDomainRule(),
        OnionRule(),
        SuspiciousTLDRule(),
        PiracyKeywordRule(),
    ]


RULES = build_rules()

FALLBACK_RULE: Rule = HashBandRule()

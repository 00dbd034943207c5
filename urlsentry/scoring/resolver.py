import logging
import random
from typing import Optional, Sequence
from urllib.parse import urlparse

import idna

from urlsentry.errors import MalformedURLError
from urlsentry.models import ReputationAssessment
from urlsentry.rules.base import Rule, FALLBACK
from urlsentry.rules.registry import RULES, FALLBACK_RULE
from urlsentry.rules.types import ReputationCategory

logger = logging.getLogger(__name__)

INVALID_URL_ASSESSMENT = ReputationAssessment(
    score=10,
    category=ReputationCategory.CRITICAL,
    description="Invalid URL provided. Unable to assess reputation.",
)

_rng = random.Random()


def extract_hostname(url: str) -> str:
    """
    Hostname of `url`, lower-cased, punycode-encoded, without a leading "www.".
    Raises MalformedURLError when there is no scheme, no host or a bad port.
    """
    try:
        parsed = urlparse(url.strip())
        hostname = parsed.hostname
        # raises ValueError on a non-numeric or out-of-range port
        parsed.port
    except (AttributeError, TypeError, ValueError) as e:
        raise MalformedURLError(str(url)) from e

    if not parsed.scheme or not hostname:
        raise MalformedURLError(url)
    if any(ch.isspace() for ch in hostname):
        raise MalformedURLError(url, "Hostname contains whitespace")

    if not hostname.isascii():
        try:
            hostname = idna.encode(hostname, uts46=True, transitional=False).decode("ascii")
        except idna.IDNAError as e:
            raise MalformedURLError(url, "Hostname is not a valid IDN") from e

    if hostname.startswith("www."):
        hostname = hostname[4:]
    return hostname


def resolve_hostname(
    hostname: str,
    rng: Optional[random.Random] = None,
    rules: Optional[Sequence[Rule]] = None,
    fallback: Optional[Rule] = None,
) -> ReputationAssessment:
    rng = rng or _rng
    rules = RULES if rules is None else rules
    fallback = fallback or FALLBACK_RULE

    for rule in rules:
        result = rule.run(hostname, rng)
        if result is None:
            continue
        if result is FALLBACK:
            logger.debug("%s: %s deferred to %s", hostname, rule.name, fallback.name)
            break
        logger.debug("%s: matched %s → %s", hostname, rule.name, result.category.value)
        return result

    return fallback.run(hostname, rng)


def resolve(url: str, rng: Optional[random.Random] = None) -> ReputationAssessment:
    """Heuristic reputation for `url`. Never raises."""
    try:
        hostname = extract_hostname(url)
    except MalformedURLError as e:
        logger.debug("%s", e)
        return INVALID_URL_ASSESSMENT
    return resolve_hostname(hostname, rng)

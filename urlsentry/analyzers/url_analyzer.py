import random
from typing import Any, Mapping, Optional, Union

import tldextract

from urlsentry.models import RawAssessment, ScoreRange, UnifiedAssessment
from urlsentry.rules.types import Source
from urlsentry.scoring.normalizer import label_for, normalize
from urlsentry.scoring.resolver import extract_hostname, resolve_hostname

# Bundled public suffix snapshot only, no network fetch
_extract = tldextract.TLDExtract(suffix_list_urls=())

NO_CONTENT_ANALYSIS = (
    "No content analysis available. This assessment is based on domain "
    "reputation heuristics only."
)


def extract_root(hostname: str) -> str:
    ext = _extract(hostname)
    if ext.domain and ext.suffix:
        return f"{ext.domain}.{ext.suffix}"
    return hostname


def classify(
    url: str,
    external: Optional[Union[RawAssessment, Mapping[str, Any]]] = None,
    rng: Optional[random.Random] = None,
) -> UnifiedAssessment:
    """
    Single entry point for one URL.

    The heuristic reputation is always computed. When the content-analysis
    collaborator supplied an assessment, its normalized range, label and
    descriptions win; otherwise the heuristic result is used.

    A heuristic-only result keeps the resolver's category vocabulary
    (Super Safe, Safe, Medium, Low, Critical) while the label comes from the
    bracket table, so the two can name different buckets: a trusted domain
    scored exactly 90 is "Super Safe" with label safeBlue.

    Raises MalformedURLError if `url` cannot be parsed.
    """
    hostname = extract_hostname(url)
    reputation = resolve_hostname(hostname, rng)
    root = extract_root(hostname)

    if external is None:
        return UnifiedAssessment(
            url=url,
            root_domain=root,
            label=label_for(reputation.score),
            category=reputation.category.value,
            score_range=ScoreRange(reputation.score, reputation.score),
            threat_description=NO_CONTENT_ANALYSIS,
            reputation_description=reputation.description,
            source=Source.HEURISTIC,
            reputation=reputation,
        )

    if not isinstance(external, RawAssessment):
        external = RawAssessment.from_dict(dict(external))
    normalized = normalize(external)

    return UnifiedAssessment(
        url=url,
        root_domain=root,
        label=normalized.label,
        category=normalized.category,
        score_range=normalized.score_range,
        threat_description=external.threat_description,
        reputation_description=external.reputation_description or reputation.description,
        source=Source.CONTENT_ANALYSIS,
        reputation=reputation,
    )

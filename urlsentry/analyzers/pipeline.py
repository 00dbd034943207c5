import logging
import random
import re
from typing import Any, Callable, Mapping, Optional, Protocol

from urlsentry.analyzers.url_analyzer import classify
from urlsentry.errors import AnalysisError, FetchError, MalformedURLError
from urlsentry.fetch.content_fetcher import fetch_content
from urlsentry.history.store import HistoryStore, entry_from_assessment
from urlsentry.models import UnifiedAssessment

logger = logging.getLogger(__name__)

URL_PATTERN = re.compile(r"^https?://.+")


class ContentAnalyzer(Protocol):
    """
    Natural-language content analysis. Returns an unverified candidate with
    scoreMin, scoreMax and optionally label, category, threatDescription,
    reputationDescription.
    """

    def analyze(self, url: str, content: str) -> Mapping[str, Any]: ...


def analyze_url(
    url: str,
    analyzer: Optional[ContentAnalyzer] = None,
    fetcher: Callable[[str], str] = fetch_content,
    store: Optional[HistoryStore] = None,
    rng: Optional[random.Random] = None,
) -> UnifiedAssessment:
    """
    Fetch, analyze, classify and record one URL.

    Without an analyzer nothing is fetched and the heuristic reputation is
    returned. The result goes into `store` only when the whole chain succeeded.
    """
    if not url or not URL_PATTERN.match(url):
        raise MalformedURLError(url, "Invalid URL format. Please include http:// or https://")

    candidate = None
    if analyzer is not None:
        content = fetcher(url)
        if not content:
            raise FetchError(
                "Fetched content is empty. The website might be protected or inaccessible.",
                status=502,
            )
        try:
            candidate = analyzer.analyze(url, content)
        except AnalysisError:
            raise
        except Exception as e:  # noqa: BLE001
            logger.error("Error analyzing %s: %s", url, e)
            raise AnalysisError(f"Failed to analyze URL: {e}") from e

    result = classify(url, candidate, rng)

    if store is not None:
        store.insert(entry_from_assessment(result))
    return result

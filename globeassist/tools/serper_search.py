"""
Serper search tool for apply-link discovery.

Uses the Serper Google Search API to find job posting pages.
"""

import logging
import time
from collections.abc import Callable, Sequence

import httpx

from globeassist.models import JobDescriptor, SearchResult

logger = logging.getLogger(__name__)

SERPER_API_URL = "https://google.serper.dev/search"


def build_search_queries(job: JobDescriptor) -> list[str]:
    """Build the three fixed search queries for a job, in submission order."""
    return [
        f'"{job.title}" "{job.company}" site:careers',
        f'"{job.company}" "{job.title}" apply',
        f"{job.company} careers {job.title}",
    ]


class WebSearchClient:
    """
    Runs queries against Serper.

    A failed query never raises: it contributes an empty result list and the
    remaining queries still run.
    """

    def __init__(
        self,
        api_key: str,
        num_results: int = 10,
        timeout: float = 30.0,
        delay: float = 0.2,
        transport: httpx.BaseTransport | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.api_key = api_key
        self.num_results = num_results
        self.timeout = timeout
        self.delay = delay
        self._transport = transport
        self._sleep = sleep

    def search(self, query: str, region: str = "us") -> list[SearchResult]:
        """
        Search the web for a single query.

        Args:
            query: Search query (e.g., '"Acme" "Backend Engineer" apply')
            region: Two-letter country code passed as `gl`

        Returns:
            Organic results in engine order, or [] if the request failed
        """
        logger.info(f"Searching Serper for: {query}")
        try:
            headers = {
                "X-API-KEY": self.api_key,
                "Content-Type": "application/json",
            }
            payload = {
                "q": query,
                "num": self.num_results,
                "gl": region,
            }

            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                response = client.post(SERPER_API_URL, headers=headers, json=payload)
                response.raise_for_status()
                data = response.json()

            organic = data.get("organic") or []
            results = [SearchResult.from_organic(r) for r in organic if isinstance(r, dict)]
            logger.info(f"Got {len(results)} results from Serper for query")
            return results

        except httpx.HTTPStatusError as e:
            logger.warning(f"Serper request failed with status: {e.response.status_code}")
            return []
        except Exception as e:
            logger.error(f'Serper search error for query "{query}": {e}')
            return []

    def search_all(self, queries: Sequence[str], region: str = "us") -> list[list[SearchResult]]:
        """Run queries one after another, pausing `delay` seconds between calls."""
        per_query: list[list[SearchResult]] = []
        for i, query in enumerate(queries):
            if i > 0 and self.delay > 0:
                self._sleep(self.delay)
            per_query.append(self.search(query, region))
        return per_query

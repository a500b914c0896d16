"""
Apply-Link Resolver.

Finds the application page for a job:
query -> search -> aggregate -> rank -> (validate) -> fallback.

Always returns a navigable link for valid input. Upstream failures only lower
precision (the generic Google search fallback), never availability.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any
from urllib.parse import quote

from globeassist.agents.link_ranker import LinkRanker
from globeassist.agents.link_validator import LinkValidator
from globeassist.config import Settings, settings
from globeassist.models import (
    NOT_FOUND,
    JobDescriptor,
    ResolvedApplyLink,
    ResolverConfig,
    SearchResult,
)
from globeassist.tools.openrouter import OpenRouterClient
from globeassist.tools.serper_search import WebSearchClient, build_search_queries

logger = logging.getLogger(__name__)

GOOGLE_SEARCH_URL = "https://www.google.com/search?q="

# Characters encodeURIComponent leaves alone
_URI_COMPONENT_SAFE = "-_.!~*'()"


def aggregate_results(
    per_query: Sequence[Sequence[SearchResult]],
    limit: int = 12,
    dedupe: bool = True,
) -> list[SearchResult]:
    """
    Merge per-query results into one candidate pool.

    Concatenates in query order, optionally drops repeated URLs (first one
    wins), then keeps the first `limit` entries.
    """
    pool: list[SearchResult] = []
    seen: set[str] = set()

    for results in per_query:
        for result in results:
            if dedupe:
                if result.url in seen:
                    continue
                seen.add(result.url)
            pool.append(result)

    return pool[:limit]


def fallback_link(job: JobDescriptor) -> str:
    """Generic Google search URL for the job. Pure, never fails."""
    text = f"{job.title} {job.company} careers apply"
    return GOOGLE_SEARCH_URL + quote(text, safe=_URI_COMPONENT_SAFE)


class ApplyLinkResolver:
    """End-to-end apply-link pipeline. One instance can serve many requests."""

    def __init__(
        self,
        config: ResolverConfig,
        search_client: WebSearchClient | None = None,
        ranker: LinkRanker | None = None,
        validator: LinkValidator | None = None,
    ):
        self.config = config
        self.validator = validator or LinkValidator()

        # Collaborators are only built when the smart path is usable
        if search_client is None and config.search_api_key:
            search_client = WebSearchClient(
                api_key=config.search_api_key,
                num_results=config.results_per_query,
                timeout=config.request_timeout,
                delay=config.query_delay,
            )
        if ranker is None and config.ranking_api_key:
            ranker = LinkRanker(
                OpenRouterClient(config.ranking_api_key, timeout=config.request_timeout),
                model=config.ranking_model,
            )
        self.search_client = search_client
        self.ranker = ranker

    def resolve(
        self,
        job: JobDescriptor | Mapping[str, Any],
        validate_link: bool | None = None,
    ) -> ResolvedApplyLink:
        """
        Resolve the best application link for a job.

        Args:
            job: Descriptor or raw payload with at least title and company
            validate_link: Gate the ranked link through LinkValidator;
                None uses `config.validate_links`

        Raises:
            InvalidJobError: title or company missing (no network calls made)
        """
        job = JobDescriptor.coerce(job)
        logger.info(f"Fetching apply link for: {job.title} at {job.company}")

        if not self.config.has_credentials or self.search_client is None or self.ranker is None:
            logger.info("Search or ranking API key missing, using fallback search link")
            return self._fallback(job)

        queries = build_search_queries(job)
        per_query = self.search_client.search_all(queries, region=self.config.search_region)
        pool = aggregate_results(
            per_query,
            limit=self.config.max_candidates,
            dedupe=self.config.dedupe_results,
        )

        if not pool:
            logger.info(f"No search results found for {job.company} {job.title}")
            return self._fallback(job)

        logger.info(f"Got {len(pool)} candidates, sending to ranking model")
        link = self.ranker.rank(job, pool)

        if link == NOT_FOUND:
            return self._fallback(job)

        gate = self.config.validate_links if validate_link is None else validate_link
        if gate and not self.validator.is_valid(link, job):
            logger.info(f"Ranked link failed validation: {link}")
            return self._fallback(job)

        logger.info(f"Found apply link: {link}")
        return ResolvedApplyLink(link=link, source="ranked")

    def _fallback(self, job: JobDescriptor) -> ResolvedApplyLink:
        logger.info(f"Using fallback Google search for {job.company}")
        return ResolvedApplyLink(link=fallback_link(job), source="fallback")


def create_apply_link_resolver(app_settings: Settings | None = None) -> ApplyLinkResolver:
    """Create a resolver from application settings."""
    return ApplyLinkResolver(ResolverConfig.from_settings(app_settings or settings))

"""
Link Ranker.

Asks a language model to pick the single best application URL from a pool of
search results. Any failure degrades to NOT_FOUND.
"""

import logging
from collections.abc import Sequence

import httpx

from globeassist.models import NOT_FOUND, JobDescriptor, SearchResult
from globeassist.tools.openrouter import OpenRouterClient
from globeassist.utils.parser import parse_ranked_link

logger = logging.getLogger(__name__)

LINK_RANKER_PROMPT = """You are an expert at finding the EXACT job application page. Given the search results below, pick the SINGLE BEST URL that leads to the application page for the position "{title}" at "{company}".

SEARCH RESULTS:
{results}

RULES:
1) Prefer the official "{company}" careers site.
2) Known job boards (LinkedIn, Indeed, Glassdoor, Greenhouse, Lever, Workday, ...) are acceptable when they host this exact posting.
3) Avoid news articles, blog posts, company info pages and generic job listing pages.
4) Return ONLY the single best URL as plain text. The URL must start with http:// or https://.
5) If no result is the application page for this job, return exactly: {sentinel}

OUTPUT:"""


def format_candidates(pool: Sequence[SearchResult]) -> str:
    """Render candidates as numbered entries for the prompt."""
    return "\n\n".join(
        f"{idx}. {r.url}\nTitle: {r.title}\nSnippet: {r.snippet}"
        for idx, r in enumerate(pool, start=1)
    )


def build_ranking_prompt(job: JobDescriptor, pool: Sequence[SearchResult]) -> str:
    return LINK_RANKER_PROMPT.format(
        title=job.title,
        company=job.company,
        results=format_candidates(pool),
        sentinel=NOT_FOUND,
    )


class LinkRanker:
    """Picks the best candidate URL with one chat-completion call (no retry)."""

    def __init__(
        self,
        client: OpenRouterClient,
        model: str = "openai/gpt-4o-mini",
        temperature: float = 0.0,
        max_tokens: int = 250,
    ):
        self.client = client
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens

    def rank(self, job: JobDescriptor, pool: Sequence[SearchResult]) -> str:
        """Return the chosen URL verbatim, or NOT_FOUND."""
        if not pool:
            return NOT_FOUND

        prompt = build_ranking_prompt(job, pool)
        try:
            raw_text = self.client.complete(
                [{"role": "user", "content": prompt}],
                model=self.model,
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 401:
                logger.error("Ranking API unauthorized (401). Check the OpenRouter API key.")
            else:
                logger.error(f"Ranking API error: {e.response.status_code}")
            return NOT_FOUND
        except Exception as e:
            logger.error(f"Ranking call failed for {job.company} {job.title}: {e}")
            return NOT_FOUND

        logger.info(f"Ranking model raw response: {raw_text}")
        return parse_ranked_link(raw_text)

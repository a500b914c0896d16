"""
Data models for the apply-link pipeline.

JobDescriptor is the caller's input, SearchResult is one organic search hit,
ResolvedApplyLink is what the resolver hands back.
"""

from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from globeassist.config import Settings

# Ranking outcome meaning "no candidate qualifies"
NOT_FOUND = "NOT_FOUND"


class InvalidJobError(ValueError):
    """Raised when a job descriptor lacks a title or company."""


class JobDescriptor(BaseModel):
    """The job to find an application link for."""

    model_config = ConfigDict(frozen=True, extra="ignore", str_strip_whitespace=True)

    title: str = Field(min_length=1)
    company: str = Field(min_length=1)
    location: str | None = None
    description: str | None = None
    country: str | None = None

    @classmethod
    def coerce(cls, job: "JobDescriptor | Mapping[str, Any] | None") -> "JobDescriptor":
        """Build a descriptor from a payload, raising InvalidJobError if unusable."""
        if isinstance(job, cls):
            return job
        if not isinstance(job, Mapping):
            raise InvalidJobError("Invalid job data")
        try:
            return cls.model_validate(dict(job))
        except ValidationError as e:
            raise InvalidJobError("Invalid job data") from e


class SearchResult(BaseModel):
    """One organic web search hit."""

    model_config = ConfigDict(frozen=True)

    url: str = ""
    title: str = ""
    snippet: str = ""

    @classmethod
    def from_organic(cls, entry: Mapping[str, Any]) -> "SearchResult":
        """Build from a provider `organic` entry; missing fields become ''."""
        return cls(
            url=str(entry.get("link") or entry.get("url") or ""),
            title=str(entry.get("title") or ""),
            snippet=str(entry.get("snippet") or entry.get("description") or ""),
        )


class ResolvedApplyLink(BaseModel):
    """Resolver output. `source` tells whether ranking or the fallback produced it."""

    link: str
    source: Literal["ranked", "fallback"]


class ResolverConfig(BaseModel):
    """Explicit configuration handed to ApplyLinkResolver at construction."""

    search_api_key: str | None = None
    ranking_api_key: str | None = None
    search_region: str = "us"
    results_per_query: int = 10
    max_candidates: int = 12
    dedupe_results: bool = True
    query_delay: float = 0.2
    request_timeout: float = 30.0
    ranking_model: str = "openai/gpt-4o-mini"
    validate_links: bool = False

    @property
    def has_credentials(self) -> bool:
        return bool(self.search_api_key) and bool(self.ranking_api_key)

    @classmethod
    def from_settings(cls, settings: Settings) -> "ResolverConfig":
        return cls(
            search_api_key=settings.serper_api_key or None,
            ranking_api_key=settings.openrouter_api_key or None,
            search_region=settings.search_region,
            results_per_query=settings.search_results_per_query,
            max_candidates=settings.max_candidates,
            query_delay=settings.search_delay,
            request_timeout=settings.search_timeout,
            ranking_model=settings.ranking_model,
            validate_links=settings.validate_apply_links,
        )

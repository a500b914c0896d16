import json

import httpx
import pytest
from fastapi.testclient import TestClient

from globeassist.agents.apply_link import ApplyLinkResolver
from globeassist.agents.link_ranker import LinkRanker
from globeassist.api.app import app
from globeassist.api.limiter import limiter
from globeassist.models import JobDescriptor, ResolverConfig
from globeassist.tools.openrouter import OpenRouterClient
from globeassist.tools.serper_search import WebSearchClient


class FakeUpstream:
    """
    Stands in for Serper and OpenRouter behind an httpx.MockTransport.

    `search_replies` is consumed one entry per Serper call: a list of organic
    entries, an int status code, or an exception to raise. Calls past the end
    get an empty organic list. `ranker_reply` works the same way for the
    OpenRouter call, with a string meaning the model's text.
    """

    def __init__(self, search_replies=None, ranker_reply="NOT_FOUND"):
        self.search_replies = list(search_replies or [])
        self.ranker_reply = ranker_reply
        self.requests: list[httpx.Request] = []

    @property
    def search_requests(self):
        return [r for r in self.requests if r.url.host == "google.serper.dev"]

    @property
    def ranker_requests(self):
        return [r for r in self.requests if r.url.host == "openrouter.ai"]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.host == "google.serper.dev":
            idx = len(self.search_requests) - 1
            reply = self.search_replies[idx] if idx < len(self.search_replies) else []
            return self._reply(reply, lambda organic: {"organic": organic}, request)
        return self._reply(
            self.ranker_reply,
            lambda text: {"choices": [{"message": {"role": "assistant", "content": text}}]},
            request,
        )

    @staticmethod
    def _reply(reply, body, request):
        if isinstance(reply, Exception):
            raise reply
        if isinstance(reply, int):
            return httpx.Response(reply, json={"error": "upstream"})
        return httpx.Response(200, json=body(reply))

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def search_payloads(self) -> list[dict]:
        return [json.loads(r.content) for r in self.search_requests]

    def ranker_payload(self) -> dict:
        return json.loads(self.ranker_requests[-1].content)


def organic(url, title="", snippet=""):
    return {"link": url, "title": title, "snippet": snippet}


def make_resolver(fake: FakeUpstream, config: ResolverConfig | None = None) -> ApplyLinkResolver:
    """Resolver wired to the fake upstream, with no inter-query delay."""
    if config is None:
        config = ResolverConfig(search_api_key="serper-key", ranking_api_key="router-key", query_delay=0)
    search = WebSearchClient("serper-key", delay=0, transport=fake.transport)
    ranker = LinkRanker(OpenRouterClient("router-key", transport=fake.transport))
    return ApplyLinkResolver(config, search_client=search, ranker=ranker)


@pytest.fixture
def job():
    return JobDescriptor(title="Backend Engineer", company="Acme")


@pytest.fixture(autouse=True)
def no_rate_limit():
    original = limiter.enabled
    limiter.enabled = False
    yield
    limiter.enabled = original


@pytest.fixture
def client():
    c = TestClient(app)
    yield c
    app.dependency_overrides.clear()

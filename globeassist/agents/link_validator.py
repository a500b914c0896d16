"""
Link Validator.

Plausibility check for a ranked link: it must look like a job or application
page, either on a known job board / applicant-tracking system or on a page
that names the company.
"""

import re
from urllib.parse import urlparse

from globeassist.models import JobDescriptor
from globeassist.utils.parser import is_http_url

JOB_BOARD_DOMAINS = (
    "indeed.com",
    "linkedin.com",
    "glassdoor.com",
    "monster.com",
    "ziprecruiter.com",
    "careerbuilder.com",
    "dice.com",
    "simplyhired.com",
    "jobstreet.com",
    "seek.com",
    "reed.co.uk",
    "totaljobs.com",
    "stepstone.de",
    "xing.com",
    "naukri.com",
    "bayt.com",
    "jobkorea.co.kr",
    "saramin.co.kr",
    "wanted.co.kr",
    # Applicant tracking systems
    "greenhouse.io",
    "lever.co",
    "myworkdayjobs.com",
    "smartrecruiters.com",
    "workable.com",
    "ashbyhq.com",
)

JOB_PATH_KEYWORDS = (
    "/careers",
    "/jobs",
    "/job/",
    "/apply",
    "/job-opportunities",
    "/hiring",
    "/vacancies",
    "/positions",
)

# Search pages and feeds, never an application page
BLOCKED_PATTERNS = (
    "google.com/search",
    "indeed.com/find",
    "linkedin.com/feed",
)

# Legal-form suffixes that rarely appear in a company's domain
COMPANY_STOPWORDS = {"inc", "llc", "ltd", "gmbh", "corp", "corporation", "co", "plc", "the", "group", "sa", "ag"}


def company_tokens(company: str) -> list[str]:
    """Lower-case name tokens usable for substring matching, plus the joined form ("acme corp" -> "acmecorp")."""
    words = company_words(company)
    tokens = [w for w in words if len(w) >= 3]
    if len(words) > 1:
        tokens.append("".join(words))
    return tokens


def company_words(company: str) -> list[str]:
    return [w for w in re.findall(r"[a-z0-9]+", company.lower()) if w not in COMPANY_STOPWORDS]


def names_company(url: str, host: str, path: str, company: str) -> bool:
    """
    True if the URL mentions the company.

    Tokens of 3+ characters may appear anywhere in the URL. Shorter words
    ("hp", "3m", "ge") only count as a whole host label or path segment.
    """
    url_lower = url.lower()
    if any(token in url_lower for token in company_tokens(company)):
        return True

    segments = set(host.split(".")) | {s for s in path.split("/") if s}
    return any(w in segments for w in company_words(company))


def _on_domain(host: str, domain: str) -> bool:
    return host == domain or host.endswith("." + domain)


class LinkValidator:
    """Checks that a URL plausibly is the company's job/application page."""

    def __init__(
        self,
        job_board_domains: tuple[str, ...] = JOB_BOARD_DOMAINS,
        path_keywords: tuple[str, ...] = JOB_PATH_KEYWORDS,
    ):
        self.job_board_domains = job_board_domains
        self.path_keywords = path_keywords

    def is_valid(self, url: str, job: JobDescriptor) -> bool:
        if not is_http_url(url) or len(url) < 10:
            return False

        parsed = urlparse(url)
        host = (parsed.hostname or "").lower()
        if not host:
            return False

        url_lower = url.lower()
        if any(p in url_lower for p in BLOCKED_PATTERNS):
            return False

        if any(_on_domain(host, d) for d in self.job_board_domains):
            return True

        path = (parsed.path or "").lower()
        careers_host = host.split(".")[0] in ("careers", "jobs")
        if not careers_host and not any(k in path + "/" for k in self.path_keywords):
            return False

        return names_company(url, host, path, job.company)

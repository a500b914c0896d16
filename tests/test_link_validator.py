import pytest

from globeassist.agents.link_validator import LinkValidator, company_tokens
from globeassist.models import JobDescriptor


@pytest.fixture
def validator():
    return LinkValidator()


class TestCompanyTokens:
    def test_drops_legal_suffixes(self):
        assert company_tokens("Acme Inc.") == ["acme"]

    def test_multi_word_adds_joined_form(self):
        assert company_tokens("Blue Origin LLC") == ["blue", "origin", "blueorigin"]

    def test_short_words_only_match_joined(self):
        assert company_tokens("EY") == []
        assert company_tokens("AB InBev") == ["inbev", "abinbev"]


class TestLinkValidator:
    def test_company_careers_page(self, validator, job):
        assert validator.is_valid("https://acme.com/careers/backend-engineer", job)

    def test_careers_subdomain(self, validator, job):
        assert validator.is_valid("https://careers.acme.com/123", job)

    def test_job_board(self, validator, job):
        assert validator.is_valid("https://www.linkedin.com/jobs/view/42", job)
        assert validator.is_valid("https://boards.greenhouse.io/acme/jobs/4", job)

    def test_other_company_careers_page(self, validator, job):
        assert not validator.is_valid("https://globex.com/careers/backend", job)

    def test_company_page_without_job_path(self, validator, job):
        assert not validator.is_valid("https://acme.com/about-us", job)

    def test_search_pages_rejected(self, validator, job):
        assert not validator.is_valid("https://www.google.com/search?q=acme+jobs", job)
        assert not validator.is_valid("https://www.indeed.com/find?q=acme", job)
        assert not validator.is_valid("https://www.linkedin.com/feed/update/1", job)

    def test_not_a_url(self, validator, job):
        assert not validator.is_valid("acme.com/careers", job)
        assert not validator.is_valid("NOT_FOUND", job)
        assert not validator.is_valid("", job)

    def test_lookalike_domain_is_not_a_job_board(self, validator, job):
        assert not validator.is_valid("https://notindeed.com.evil.io/page", job)

    @pytest.mark.parametrize("company, url", [
        ("HP", "https://jobs.hp.com/careers/job/123"),
        ("HP Inc", "https://www.hp.com/us-en/careers/apply"),
        ("3M", "https://www.3m.com/careers/job/1"),
        ("GE", "https://ge.com/careers/apply/9"),
        ("EY", "https://careers.ey.com/job/london-analyst/42"),
    ])
    def test_short_company_name_own_careers_page(self, validator, company, url):
        job = JobDescriptor(title="Engineer", company=company)
        assert validator.is_valid(url, job)

    def test_short_company_name_needs_whole_label(self, validator):
        job = JobDescriptor(title="Engineer", company="GE")
        assert not validator.is_valid("https://geico.com/careers/apply/9", job)
        assert not validator.is_valid("https://orange.com/careers/apply/9", job)

    def test_multi_word_company_joined_in_domain(self, validator):
        job = JobDescriptor(title="Engineer", company="Blue Origin")
        assert validator.is_valid("https://www.blueorigin.com/careers/search", job)

"""
CLI smoke test for apply-link resolution against the live APIs.

Tests the full pipeline:
1. Build the resolver from .env settings
2. Run the three Serper queries
3. Rank the candidate pool with the LLM
4. Compare the ranked link with the fallback

Usage:
    uv run python scripts/test_apply_link.py ["Job Title" "Company"]
"""

import sys
import time

from dotenv import load_dotenv

load_dotenv()


def main():
    print("=" * 60)
    print("GlobeAssist: apply-link live test")
    print("=" * 60)

    from globeassist.agents.apply_link import aggregate_results, create_apply_link_resolver, fallback_link
    from globeassist.models import JobDescriptor
    from globeassist.tools.serper_search import build_search_queries

    title, company = (sys.argv[1], sys.argv[2]) if len(sys.argv) > 2 else ("Software Engineer", "Stripe")
    job = JobDescriptor(title=title, company=company)

    resolver = create_apply_link_resolver()
    if not resolver.config.has_credentials:
        print("\nSERPER_API_KEY / OPENROUTER_API_KEY not set, only the fallback is available:")
        print(f"  {fallback_link(job)}")
        return 1

    # Step 1: search
    print(f"\n[1/3] Searching for {title} at {company}...")
    t0 = time.time()
    queries = build_search_queries(job)
    per_query = resolver.search_client.search_all(queries, region=resolver.config.search_region)
    for query, results in zip(queries, per_query):
        print(f"  {len(results):>2} results  {query}")
    pool = aggregate_results(per_query, limit=resolver.config.max_candidates)
    print(f"  Pool: {len(pool)} candidates in {time.time() - t0:.1f}s")

    # Step 2: rank
    print("\n[2/3] Ranking candidates...")
    t0 = time.time()
    ranked = resolver.ranker.rank(job, pool)
    print(f"  Ranker chose: {ranked} ({time.time() - t0:.1f}s)")
    print(f"  Passes validation: {resolver.validator.is_valid(ranked, job)}")

    # Step 3: full resolve
    print("\n[3/3] Full resolve...")
    result = resolver.resolve(job)
    print(f"  [{result.source}] {result.link}")

    ok = result.link.startswith("http")
    print("\n" + ("PASS" if ok else "FAIL"))
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())

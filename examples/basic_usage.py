#!/usr/bin/env python3
"""
Basic ghtrending usage example.

Run with: python examples/basic_usage.py [language] [daily|weekly|monthly]
"""

import asyncio
import json
import logging
import sys

from ghtrending import Query, TrendingClient, TrendingError, configure_logging, handle
from ghtrending.extract import extract_repositories

configure_logging(level=logging.INFO)

print("=== ghtrending Basic Usage Example ===\n")

# 1. Extraction from markup, no network
print("1. Extracting from a static snippet...")
html = """
<article class="Box-row">
  <h2 class="h3 lh-condensed">
    <a href="/octocat/hello-world"><span class="text-normal">octocat /</span> hello-world</a>
  </h2>
  <span itemprop="programmingLanguage">Python</span>
  <a href="/octocat/hello-world/stargazers">1,234</a>
  <span class="d-inline-block float-sm-right">56 stars today</span>
</article>
"""
for repo in extract_repositories(html):
    print(f"   {repo.author}: stars={repo.stars!r} today={repo.today_stars}")

# 2. Query validation
print("\n2. Validating a query...")
try:
    Query.from_dict({"since": "yearly"})
except TrendingError as e:
    print(f"   Caught {type(e).__name__}: {e}")

# 3. Live lookup through the handler
language = sys.argv[1] if len(sys.argv) > 1 else None
since = sys.argv[2] if len(sys.argv) > 2 else None
query = Query(language=language, since=since)

print("\n3. Fetching the live trending page...")
response = asyncio.run(handle(query))
print(json.dumps(response.to_dict()["repos"][:3], indent=2))

# 4. Failure reason through the blocking client
print("\n4. Inspecting a failed lookup...")
with TrendingClient(base_url="http://127.0.0.1:9/trending") as client:
    result = client.search(query)
    print(f"   ok={result.ok} error={result.error}")

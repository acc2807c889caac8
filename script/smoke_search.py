import json
import os
import sys

import requests

# -------------------------
# Target settings
# -------------------------
API_URL = os.getenv("API_BASE_URL", "http://127.0.0.1:8000")
REPO_SCOPE = os.getenv("REPO_SCOPE", "github.com/elastic/kibana")
AUTH = os.getenv("SMOKE_AUTHORIZATION")

ENDPOINTS = [
    ("/api/code/search/repo", {"q": "kibana"}),
    ("/api/code/suggestions/repo", {"q": "kib"}),
    ("/api/code/search/doc", {"q": "router", "langs": "typescript,javascript"}),
    ("/api/code/suggestions/doc", {"q": "rout"}),
    ("/api/code/search/symbol", {"q": "createRouter"}),
    ("/api/code/suggestions/symbol", {"q": "createR"}),
]

headers = {"Authorization": AUTH} if AUTH else {}
failures = 0

for path, params in ENDPOINTS:
    resp = requests.get(f"{API_URL}{path}", params={**params, "repoScope": REPO_SCOPE}, headers=headers, timeout=30)
    if resp.status_code == 200:
        print(f"OK   {path}")
        print(json.dumps(resp.json(), indent=2)[:500])
    else:
        failures += 1
        print(f"FAIL {path} -> {resp.status_code} {resp.text}")

# Missing repoScope must be rejected on every endpoint.
for path, params in ENDPOINTS:
    resp = requests.get(f"{API_URL}{path}", params=params, headers=headers, timeout=30)
    if resp.status_code != 400:
        failures += 1
        print(f"FAIL {path} accepted a request without repoScope ({resp.status_code})")

sys.exit(1 if failures else 0)

import sys

import requests

BASE = sys.argv[1] if len(sys.argv) > 1 else "http://localhost:5000"

print("Checking specific endpoints...", flush=True)

# 1. Health check
try:
    r = requests.get(f"{BASE}/api/health", timeout=2)
    print(f"HEALTH: {r.status_code} - {r.text[:80]}", flush=True)
except requests.RequestException as e:
    print(f"HEALTH FAIL: {e}", flush=True)

# 2. Chat endpoint
try:
    r = requests.post(f"{BASE}/api/chat", json={"message": "hello", "session_id": "ping"}, timeout=5)
    print(f"CHAT: {r.status_code} - {r.text[:50]}", flush=True)
except requests.RequestException as e:
    print(f"CHAT FAIL: {e}", flush=True)

# 3. Suggestions
try:
    r = requests.get(f"{BASE}/api/suggestions", timeout=2)
    print(f"SUGGESTIONS: {r.status_code} - {len(r.json().get('suggestions', []))} questions", flush=True)
except (requests.RequestException, ValueError) as e:
    print(f"SUGGESTIONS FAIL: {e}", flush=True)

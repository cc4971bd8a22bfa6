"""
wrike_search.wrike

Wrike API boundary.

Responsibilities:
- Typed task/user records parsed from Wrike JSON.
- An async HTTP client for the `contacts` and `tasks` endpoints.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The search layer depends on this boundary, never on httpx directly.

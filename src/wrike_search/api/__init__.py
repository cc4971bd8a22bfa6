"""
wrike_search.api

HTTP/WebSocket API package.

Responsibilities:
- FastAPI app factory and routers.
- Dependency wiring for settings and the shared Wrike HTTP client.
"""

# Package marker.

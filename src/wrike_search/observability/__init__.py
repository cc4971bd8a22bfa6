"""
wrike_search.observability

Observability package.

Responsibilities:
- Structured logging configuration.
- Connection context propagation (HTTP and WebSocket) for consistent log enrichment.
"""

# Package marker.

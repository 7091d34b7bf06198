"""
blog_api.observability

Observability package.

Responsibilities:
- Structured logging configuration (structlog, JSON).
- Request context propagation and access logging.
"""

# Package marker.

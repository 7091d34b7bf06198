"""
blog_api.api

API package for the Blog content service.

Responsibilities:
- FastAPI app factory and router modules.
- API-layer dependency wiring and error mapping.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The API layer stays thin: request validation + auth gate + delegation to services.

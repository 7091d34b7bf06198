"""
blog_api.db

Persistence package (SQLAlchemy async).

Responsibilities:
- Provide ORM models, engine/session setup, paging, and repositories.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Services depend on repositories only; nothing above this package builds SQL.

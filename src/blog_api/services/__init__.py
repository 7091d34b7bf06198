"""
blog_api.services

Service-layer package (resource orchestrators).

Responsibilities:
- Own transaction boundaries (commit after each mutation).
- Enforce referential checks (category exists, comment belongs to post).
- Compose repositories; never touch HTTP concerns.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Authorization happens before these services are called (see `auth.deps`).

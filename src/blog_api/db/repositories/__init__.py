"""
blog_api.db.repositories

Repository package.

Responsibilities:
- Group data-access repositories for categories, posts, and comments.
"""

# Package marker; repositories are imported directly from submodules.


# --- Module Notes -----------------------------------------------------------
# Repositories flush but never commit; services own the transaction boundary.

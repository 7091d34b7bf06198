"""
blog_api

Top-level package for the Blog content API service.

Responsibilities:
- Expose package version metadata.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"


# --- Module Notes -----------------------------------------------------------
# Importing the package must stay free of settings/DB side effects; tests build
# their own Settings and app instances.

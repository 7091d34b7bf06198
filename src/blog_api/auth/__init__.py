"""
blog_api.auth

Authentication/authorization package.

Responsibilities:
- Signed credential encoding/decoding (codec).
- Credential issuance and verification with failure classification.
- FastAPI authorization gate (Subject + ADMIN role checks).
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Nothing here touches storage: credentials are verified statelessly per request.

"""
Server-wide constants.

Values here are fixed at build time; anything that varies per deployment
belongs in ``config.Settings``.
"""

PROJECT_NAME: str = "Accountability AI"
API_V1_STR: str = "/api/v1"
API_VERSION: str = "0.1.0"
SCHEMA_VERSION: str = "v1"
USER_ID_HEADER: str = "X-User-Id"

"""Application-wide constants.

This module defines constants used throughout the application
to avoid magic numbers and ensure consistency.
"""

# Role weights for hierarchy comparisons
ADMIN_WEIGHT = 3
MANAGER_WEIGHT = 2
VIEWER_WEIGHT = 1

# String field lengths
MAX_EMAIL_LENGTH = 255
MAX_NAME_LENGTH = 255
MAX_MODEL_NAME_LENGTH = 100
MAX_FIELD_NAME_LENGTH = 100
MAX_ROLE_LENGTH = 20
MAX_IPV6_LENGTH = 45
MAX_REQUEST_ID_LENGTH = 64
MAX_ENTITY_TYPE_LENGTH = 50
MAX_ACTION_LENGTH = 20
ID_LENGTH = 36

# Password requirements
MIN_PASSWORD_LENGTH = 8
MAX_PASSWORD_LENGTH = 128
BCRYPT_ROUNDS = 12

# Audit log listing
DEFAULT_AUDIT_PAGE_SIZE = 50
MAX_AUDIT_PAGE_SIZE = 100

# Secret key requirements
MIN_SECRET_KEY_LENGTH = 32
DEFAULT_INSECURE_SECRET = "change-me-in-production"

# Cookie fallback for browser sessions
AUTH_COOKIE_NAME = "auth_token"

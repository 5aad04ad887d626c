"""
Application Constants

Messages and tunables shared between the services and the HTTP layer.
"""

# ============================================================================
# Versioning
# ============================================================================

API_TITLE = "Skill Match API"
API_VERSION = "1.0"

# ============================================================================
# Auth
# ============================================================================

SUPABASE_USER_ENDPOINT = "/auth/v1/user"
BEARER_SCHEME = "Bearer"

AUTH_HEADER_MALFORMED = "Authorization header missing or malformed"
AUTH_TOKEN_INVALID = "Invalid or expired token"
AUTH_SERVICE_ERROR = "Auth error"

# ============================================================================
# Validation messages (returned verbatim as {"error": ...})
# ============================================================================

USER_ID_REQUIRED = "user_id required"
MATCH_USERS_REQUIRED = "user_a & user_b required"
USER_ID_INVALID = "invalid user id"
MATCH_ID_REQUIRED = "match id required"
MATCH_ID_INVALID = "invalid match id"
MATCH_NOT_FOUND = "match not found"

SKILL_NOT_FOUND = "skill not found"
SKILL_TYPE_INVALID = "type must be 'want' or 'give'"
USER_SKILL_NOT_FOUND = "skill interest not found"

FEEDBACK_MESSAGE_REQUIRED = "message required"
FEEDBACK_RATING_INVALID = "rating must be between 1 and 5"

# ============================================================================
# Feedback
# ============================================================================

MIN_FEEDBACK_RATING = 1
MAX_FEEDBACK_RATING = 5

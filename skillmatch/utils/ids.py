"""Identifier parsing shared by the services."""
import uuid
from skillmatch.config.constants import MATCH_ID_INVALID, MATCH_ID_REQUIRED, USER_ID_INVALID
from skillmatch.core.errors import InputValidationError


def normalize_user_id(user_id) -> str:
    """
    Canonical text form of a Supabase user id (lowercase, hyphenated).

    Postgres hands UUID columns back in this form, so ids coming from requests
    must be normalized before they are compared or ordered against stored ones.
    """
    try:
        return str(uuid.UUID(str(user_id)))
    except ValueError:
        raise InputValidationError(USER_ID_INVALID)


def parse_match_id(match_id) -> uuid.UUID:
    if not match_id:
        raise InputValidationError(MATCH_ID_REQUIRED)
    if isinstance(match_id, uuid.UUID):
        return match_id
    try:
        return uuid.UUID(str(match_id))
    except ValueError:
        raise InputValidationError(MATCH_ID_INVALID)

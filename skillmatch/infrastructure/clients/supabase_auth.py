"""Supabase Auth (GoTrue) client used to verify user access tokens."""
import asyncio
import logging
from typing import Any, Dict, Optional
import aiohttp
from skillmatch.config.constants import SUPABASE_USER_ENDPOINT, AUTH_SERVICE_ERROR
from skillmatch.core.errors import StorageError

logger = logging.getLogger(__name__)


class SupabaseAuthClient:
    """Verifies bearer tokens by asking the Supabase Auth service who they belong to."""

    def __init__(self, base_url: str, service_role_key: str, timeout_seconds: int = 10):
        """
        Initialize the auth client.

        Args:
            base_url: Supabase project URL, e.g. https://xyz.supabase.co
            service_role_key: Key sent as ``apikey`` with every request
            timeout_seconds: Total timeout for one verification call
        """
        self.base_url = base_url.rstrip("/")
        self.service_role_key = service_role_key
        self.timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    async def get_user(self, token: str) -> Optional[Dict[str, Any]]:
        """
        Resolve an access token to its user.

        Returns:
            The user object (``id``, ``email``, ...) or None if the token was rejected.

        Raises:
            StorageError: the auth service could not be reached.
        """
        url = f"{self.base_url}{SUPABASE_USER_ENDPOINT}"
        headers = {
            "apikey": self.service_role_key,
            "Authorization": f"Bearer {token}",
        }

        try:
            async with aiohttp.ClientSession(timeout=self.timeout) as session:
                async with session.get(url, headers=headers) as response:
                    if response.status in (401, 403):
                        return None
                    if response.status != 200:
                        error_text = await response.text()
                        logger.warning(f"Supabase auth error {response.status}: {error_text}")
                        return None

                    data = await response.json()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Supabase auth network error: {e}")
            raise StorageError(AUTH_SERVICE_ERROR) from e

        if not data or not data.get("id"):
            return None
        return data

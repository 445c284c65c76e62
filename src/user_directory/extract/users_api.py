"""
Users API Client - Pure I/O Operations

This module handles all external API calls to the users endpoints with no
business logic. Returns raw JSON payloads that the transformation layer maps.
"""

import logging
from typing import Any, Dict, List, Optional

import requests

from user_directory.coreutils.config import APIConfig
from user_directory.coreutils.request import get_json, new_session
from user_directory.errors import MalformedRecord

logger = logging.getLogger(__name__)

# API Endpoints
USERS_ENDPOINT = "/users"
USER_ENDPOINT_TEMPLATE = "/users/{user_id}"


class UsersAPIClient:
    """Pure API client for the users endpoints"""

    def __init__(
        self,
        config: Optional[APIConfig] = None,
        session: Optional[requests.Session] = None,
    ):
        self.config = config or APIConfig()
        self.session = session or new_session()

    def fetch_raw(self, path: str) -> Any:
        """
        GET `{base_url}{path}` with timeout and bounded retry

        Args:
            path: Endpoint path, e.g. "/users" or "/users/3"

        Returns:
            Parsed JSON payload
        """
        url = f"{self.config.base_url}{path}"
        logger.debug(f"Fetching from {url}")
        return get_json(
            self.session,
            url,
            timeout=self.config.timeout_seconds,
            max_retries=self.config.max_retries,
            backoff_base_ms=self.config.backoff_base_ms,
            backoff_cap_ms=self.config.backoff_cap_ms,
        )

    def get_users(self) -> List[Dict[str, Any]]:
        """
        Fetch every user

        Returns:
            List[Dict]: Raw user records
        """
        data = self.fetch_raw(USERS_ENDPOINT)
        if not isinstance(data, list):
            raise MalformedRecord(
                f"expected a JSON array from {USERS_ENDPOINT}, got {type(data).__name__}"
            )
        logger.info(f"Fetched {len(data)} raw user records")
        return data

    def get_user(self, user_id: int) -> Dict[str, Any]:
        """
        Fetch a single user; an unknown id surfaces as HttpStatusError(404)

        Args:
            user_id: Upstream identifier

        Returns:
            Dict: Raw user record
        """
        path = USER_ENDPOINT_TEMPLATE.format(user_id=user_id)
        data = self.fetch_raw(path)
        if not isinstance(data, dict):
            raise MalformedRecord(
                f"expected a JSON object from {path}, got {type(data).__name__}"
            )
        return data

    def close(self):
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

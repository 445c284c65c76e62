"""
User Queries - read-only facade over the users pipeline

Three entry points compose fetch + normalize for the caller:
1. fetch_all_users  - GET /users, normalize every record
2. fetch_user_by_id - GET /users/{id}, normalize the record
3. search_users     - GET /users, validate all, filter by substring, enrich the matches

Filtering runs on the already-fetched raw records; the API has no search parameter.
"""

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence

from user_directory.extract.schemas import RawUser
from user_directory.extract.users_api import UsersAPIClient
from user_directory.transformation.schemas import EnrichedUser
from user_directory.transformation.transformers import enrich, normalize, normalize_all
from user_directory.transformation.validators import validate_raw_users

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 12
SEARCH_FIELDS = ("name", "username", "email")


@dataclass(frozen=True)
class UsersPage:
    """One page of an already-filtered user list"""

    users: List[EnrichedUser]
    page: int
    page_size: int
    total: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.page_size)


def matches_query(user: RawUser, query: str) -> bool:
    """True if the lowercased name, username or email contains the query"""
    needle = query.lower()
    return any(needle in getattr(user, field).lower() for field in SEARCH_FIELDS)


def paginate(
    users: Sequence[EnrichedUser], page: int, page_size: int = DEFAULT_PAGE_SIZE
) -> UsersPage:
    """
    Slice a user list into 1-based pages

    Args:
        users: Full (already filtered) list
        page: 1-based page number; past the end gives an empty page
        page_size: Users per page

    Returns:
        UsersPage: The requested slice plus totals
    """
    if page < 1:
        raise ValueError(f"page must be >= 1, got {page}")
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")

    start = (page - 1) * page_size
    return UsersPage(
        users=list(users[start : start + page_size]),
        page=page,
        page_size=page_size,
        total=len(users),
    )


class UserQueries:
    """Read-only queries over the Users API"""

    def __init__(self, client: Optional[UsersAPIClient] = None):
        self.client = client or UsersAPIClient()

    def fetch_all_users(self) -> List[EnrichedUser]:
        logger.info("🔄 Fetching all users...")
        return normalize_all(self.client.get_users())

    def fetch_user_by_id(self, user_id: int) -> EnrichedUser:
        logger.info(f"🔄 Fetching user {user_id}...")
        return normalize(self.client.get_user(user_id))

    def search_users(self, query: str) -> List[EnrichedUser]:
        """
        Users whose name, username or email contains `query` (case-insensitive)

        An empty query matches everyone.

        The whole list is validated first, so a malformed record or a repeated
        id fails the search exactly as it fails fetch_all_users.
        """
        raw_users = validate_raw_users(self.client.get_users())
        matched = [user for user in raw_users if matches_query(user, query)]
        logger.info(f"Search {query!r} matched {len(matched)}/{len(raw_users)} users")
        return [enrich(user) for user in matched]

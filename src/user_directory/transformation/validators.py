"""
Data Validators - Transform Layer

Pure functions that check raw records before they are enriched.
A failed check raises MalformedRecord; nothing here fills in missing data.
"""

import logging
from typing import Any, Iterable, List, Optional

from pydantic import ValidationError

from user_directory.errors import MalformedRecord
from user_directory.extract.schemas import RawUser

logger = logging.getLogger(__name__)


def _describe(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "<record>"
        parts.append(f"{location}: {item['msg']}")
    return "; ".join(parts)


def validate_raw_user(raw: Any, index: Optional[int] = None) -> RawUser:
    """
    Validate one raw record against the upstream schema

    Args:
        raw: Record as decoded from JSON
        index: Position in a batch, used in the error message

    Returns:
        RawUser: Parsed record

    Raises:
        MalformedRecord: if a required field is absent or has the wrong shape
    """
    if not isinstance(raw, dict):
        raise MalformedRecord(
            f"expected an object, got {type(raw).__name__}", index=index
        )
    try:
        return RawUser.model_validate(raw)
    except ValidationError as e:
        raise MalformedRecord(_describe(e), index=index) from e


def validate_raw_users(raws: Iterable[Any]) -> List[RawUser]:
    """
    Validate a batch; the first bad record or repeated id aborts the batch

    Returns:
        List[RawUser]: Parsed records in input order
    """
    users = []
    seen_ids = set()
    for index, raw in enumerate(raws):
        user = validate_raw_user(raw, index=index)
        if user.id in seen_ids:
            raise MalformedRecord(f"duplicate id {user.id}", index=index)
        seen_ids.add(user.id)
        users.append(user)

    logger.debug(f"Raw users validation passed: {len(users)} records")
    return users

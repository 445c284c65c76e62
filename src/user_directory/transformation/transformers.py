"""
User Transformers - Transform Layer

Pure functions that map raw user records into the enriched view-model.
Every derived field is a deterministic function of the record's id and raw
fields; nothing here reads the clock, randomness or the network.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

from user_directory.extract.schemas import RawAddress, RawUser
from .schemas import Address, Bank, Company, Coordinates, Crypto, EnrichedUser, Hair
from .validators import validate_raw_user, validate_raw_users

logger = logging.getLogger(__name__)

# Categorical lookups, indexed by id mod len(list)
BLOOD_GROUPS = ["A+", "B+", "O+", "AB+"]
EYE_COLORS = ["Blue", "Brown", "Green", "Gray"]
HAIR_COLORS = ["Black", "Brown", "Blonde", "Red"]
HAIR_TYPES = ["Straight", "Curly", "Wavy"]

FIRST_NAME_FALLBACK = "User"
LAST_NAME_FALLBACK = "Name"
COUNTRY = "USA"
BIRTH_DATE = "1990-01-01"
AVATAR_URL_TEMPLATE = "https://i.pravatar.cc/150?img={user_id}"

DISPLAY_LABELS = {
    "en": {
        "name": "Name",
        "nickname": "Nick",
        "email": "Email",
        "phone": "Phone",
        "website": "Website",
        "address": "Address",
        "company": "Company",
    },
    "ru": {
        "name": "Имя",
        "nickname": "Ник",
        "email": "Почта",
        "phone": "Телефон",
        "website": "Сайт",
        "address": "Адрес",
        "company": "Компания",
    },
}


def split_name(name: str) -> tuple[str, str]:
    """Split a display name into (first, last) with the literal fallbacks"""
    first, *rest = name.split(" ")
    return first or FIRST_NAME_FALLBACK, " ".join(rest) or LAST_NAME_FALLBACK


def enrich_address(raw_address: RawAddress) -> Address:
    return Address(
        address=raw_address.street,
        city=raw_address.city,
        state=raw_address.suite,
        state_code=raw_address.zipcode[:2],
        postal_code=raw_address.zipcode,
        coordinates=Coordinates(
            lat=float(raw_address.geo.lat),
            lng=float(raw_address.geo.lng),
        ),
        country=COUNTRY,
    )


def enrich(raw: RawUser) -> EnrichedUser:
    """Map an already-validated raw user into an enriched user"""
    user_id = raw.id
    first_name, last_name = split_name(raw.name)
    address = enrich_address(raw.address)

    return EnrichedUser(
        id=user_id,
        first_name=first_name,
        last_name=last_name,
        maiden_name="",
        age=25 + user_id % 40,
        gender="male" if user_id % 2 == 0 else "female",
        email=raw.email,
        phone=raw.phone,
        username=raw.username,
        website=raw.website,
        password="",
        birth_date=BIRTH_DATE,
        image=AVATAR_URL_TEMPLATE.format(user_id=user_id),
        blood_group=BLOOD_GROUPS[user_id % len(BLOOD_GROUPS)],
        height=160 + user_id % 30,
        weight=60 + user_id % 40,
        eye_color=EYE_COLORS[user_id % len(EYE_COLORS)],
        hair=Hair(
            color=HAIR_COLORS[user_id % len(HAIR_COLORS)],
            type=HAIR_TYPES[user_id % len(HAIR_TYPES)],
        ),
        ip="0.0.0.0",
        address=address,
        mac_address="",
        university=f"University of {raw.address.city}",
        bank=Bank(
            card_expire="12/26",
            card_number="****1234",
            card_type="Visa",
            currency="USD",
            iban="",
        ),
        company=Company(
            department="Engineering",
            name=raw.company.name,
            title="Employee",
            address=address,
        ),
        ein="",
        ssn="",
        user_agent="",
        crypto=Crypto(coin="Bitcoin", wallet="", network=""),
        role="user",
    )


def normalize(raw: Dict[str, Any]) -> EnrichedUser:
    """
    Map one raw user record into an enriched user

    Args:
        raw: Record as returned by the Users API (not modified)

    Returns:
        EnrichedUser: The view-model record

    Raises:
        MalformedRecord: if id, name, address or company is missing or mis-shaped
    """
    return enrich(validate_raw_user(raw))


def normalize_all(raws: Iterable[Dict[str, Any]]) -> List[EnrichedUser]:
    """
    Map a batch of raw records, preserving order

    The whole batch is validated before anything is enriched: one malformed
    record or a repeated id fails the batch with MalformedRecord.
    """
    users = [enrich(raw) for raw in validate_raw_users(raws)]
    logger.info(f"Normalized {len(users)} user records")
    return users


def full_name(user: EnrichedUser) -> str:
    return f"{user.first_name} {user.last_name}"


def full_address(user: EnrichedUser) -> str:
    address = user.address
    return (
        f"{address.address}, {address.city}, "
        f"{address.state_code} {address.postal_code}, {address.country}"
    )


def format_for_display(
    user: EnrichedUser,
    locale: str = "en",
    labels: Optional[Dict[str, str]] = None,
) -> Dict[str, Optional[str]]:
    """
    Project the detail-view fields under localized labels

    Args:
        user: Enriched user
        locale: Key into DISPLAY_LABELS
        labels: Optional overrides for individual labels

    Returns:
        Dict: Label → value, in display order
    """
    if locale not in DISPLAY_LABELS:
        raise ValueError(
            f"Unknown locale {locale!r}, expected one of {sorted(DISPLAY_LABELS)}"
        )
    names = {**DISPLAY_LABELS[locale], **(labels or {})}

    return {
        names["name"]: full_name(user),
        names["nickname"]: f"@{user.username}",
        names["email"]: user.email,
        names["phone"]: user.phone,
        names["website"]: user.website,
        names["address"]: f"{user.address.address}, {user.address.city}",
        names["company"]: user.company.name,
    }

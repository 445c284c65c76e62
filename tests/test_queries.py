"""
Test Orchestration Layer - query facade and paging
"""

from unittest.mock import Mock

import pytest

from user_directory.errors import HttpStatusError, MalformedRecord
from user_directory.extract.users_api import UsersAPIClient
from user_directory.orchestration.queries import (
    UserQueries,
    UsersPage,
    matches_query,
    paginate,
)
from user_directory.transformation.transformers import normalize
from user_directory.transformation.validators import validate_raw_user


@pytest.fixture
def api(raw_users, raw_user):
    api = Mock(spec=UsersAPIClient)
    api.get_users.return_value = raw_users
    api.get_user.return_value = raw_user
    return api


@pytest.fixture
def queries(api):
    return UserQueries(api)


def test_fetch_all_users(queries, api):
    users = queries.fetch_all_users()

    assert [u.id for u in users] == [1, 2, 3]
    api.get_users.assert_called_once_with()


def test_fetch_user_by_id(queries, api):
    user = queries.fetch_user_by_id(1)

    assert user.first_name == "Leanne"
    api.get_user.assert_called_once_with(1)


def test_fetch_user_by_id_propagates_not_found(queries, api):
    api.get_user.side_effect = HttpStatusError(404, url="https://users.test/users/9")

    with pytest.raises(HttpStatusError):
        queries.fetch_user_by_id(9)


def test_search_returns_only_matching_record(queries, raw_users):
    users = queries.search_users("ana")

    assert len(users) == 1
    assert users[0] == normalize(raw_users[2])


def test_search_is_case_insensitive_across_fields(queries):
    assert [u.id for u in queries.search_users("BRET")] == [1]
    assert [u.id for u in queries.search_users("melissa.tv")] == [2]
    assert [u.id for u in queries.search_users("howell")] == [2]


def test_search_empty_query_matches_all(queries):
    assert len(queries.search_users("")) == 3


def test_search_no_match(queries):
    assert queries.search_users("zzz") == []


def test_search_surfaces_malformed_records(queries, api, raw_users):
    api.get_users.return_value = raw_users + ["garbage"]

    with pytest.raises(MalformedRecord):
        queries.search_users("ana")


def test_search_rejects_malformed_record_that_does_not_match(queries, api, raw_users):
    no_address = {key: value for key, value in raw_users[0].items() if key != "address"}
    no_address["id"] = 9
    api.get_users.return_value = raw_users + [no_address]

    with pytest.raises(MalformedRecord) as excinfo:
        queries.search_users("ana")

    assert excinfo.value.index == 3


def test_search_rejects_duplicate_ids_outside_the_match(queries, api, raw_users):
    duplicate = dict(raw_users[1], id=1)
    api.get_users.return_value = raw_users + [duplicate]

    with pytest.raises(MalformedRecord, match="duplicate id 1"):
        queries.search_users("ana")
    with pytest.raises(MalformedRecord, match="duplicate id 1"):
        queries.fetch_all_users()


def test_matches_query_checks_name_username_and_email(raw_user):
    user = validate_raw_user(raw_user)

    assert matches_query(user, "LEANNE")
    assert matches_query(user, "bret")
    assert matches_query(user, "april.biz")
    assert not matches_query(user, "hildegard")


def test_paginate_splits_into_pages(raw_user):
    users = []
    for user_id in range(1, 26):
        raw_user["id"] = user_id
        users.append(normalize(raw_user))

    first = paginate(users, 1)
    last = paginate(users, 3)

    assert isinstance(first, UsersPage)
    assert first.total == 25
    assert first.total_pages == 3
    assert [u.id for u in first.users] == list(range(1, 13))
    assert [u.id for u in last.users] == [25]


def test_paginate_past_end_is_empty(queries):
    users = queries.fetch_all_users()

    page = paginate(users, 5, page_size=2)

    assert page.users == []
    assert page.total == 3
    assert page.total_pages == 2


def test_paginate_empty_list():
    page = paginate([], 1)

    assert page.users == []
    assert page.total_pages == 0


@pytest.mark.parametrize("page, page_size", [(0, 12), (1, 0), (-1, 5)])
def test_paginate_rejects_bad_arguments(page, page_size):
    with pytest.raises(ValueError):
        paginate([], page, page_size)

"""Users Routes: GET /users pagination contract and GET /users/count."""

import pytest

from postboard.api.dependencies import get_app_settings
from postboard.config import Settings
from postboard.main import app


async def test_count_users(client, seed_users):
    res = await client.get("/users/count")
    assert res.status_code == 200
    assert res.json() == {"count": 10}


async def test_count_users_empty(client):
    res = await client.get("/users/count")
    assert res.json() == {"count": 0}


async def test_list_users_defaults_to_first_page_of_four(client, seed_users):
    res = await client.get("/users")
    assert res.status_code == 200
    assert [u["id"] for u in res.json()] == ["u00", "u01", "u02", "u03"]


async def test_list_users_pagination(client, seed_users):
    res = await client.get("/users", params={"pageNumber": 2, "pageSize": 4})
    assert res.status_code == 200
    assert [u["id"] for u in res.json()] == ["u08", "u09"]


async def test_list_users_past_the_end_is_empty(client, seed_users):
    res = await client.get("/users", params={"pageNumber": 10, "pageSize": 4})
    assert res.status_code == 200
    assert res.json() == []


async def test_list_users_non_numeric_params_use_defaults(client, seed_users):
    res = await client.get("/users", params={"pageNumber": "abc", "pageSize": "x"})
    assert res.status_code == 200
    assert len(res.json()) == 4


@pytest.mark.parametrize(
    "params",
    [{"pageNumber": -1}, {"pageSize": 0}, {"pageSize": -5}],
)
async def test_list_users_invalid_pagination(client, seed_users, params):
    res = await client.get("/users", params=params)
    assert res.status_code == 400
    assert res.json() == {"message": "Invalid page number or page size"}


async def test_list_users_address_fields_are_strings(client, test_db, user_factory):
    test_db.add(user_factory("u1", street=None, city=" Paris ", state=None, zipcode=None))
    await test_db.commit()

    res = await client.get("/users", params={"pageNumber": 0, "pageSize": 4})

    [user] = res.json()
    assert user == {
        "id": "u1",
        "name": "Name u1",
        "username": "user_u1",
        "email": "u1@example.com",
        "phone": "555-0100",
        "street": "",
        "city": "Paris",
        "state": "",
        "zipcode": "",
    }


async def test_list_users_respects_configured_cap(client, seed_users):
    app.dependency_overrides[get_app_settings] = lambda: Settings(users_max_page_size=5)

    assert (await client.get("/users", params={"pageSize": 5})).status_code == 200
    res = await client.get("/users", params={"pageSize": 6})

    assert res.status_code == 400
    assert res.json() == {"message": "Invalid page number or page size"}


@pytest.mark.parametrize(
    "params",
    [
        {"pageNumber": "99999999999999999999", "pageSize": "4"},
        {"pageNumber": "0", "pageSize": "99999999999999999999"},
    ],
)
async def test_list_users_offset_beyond_storage_range(client, seed_users, params):
    res = await client.get("/users", params=params)
    assert res.status_code == 400
    assert res.json() == {"message": "Invalid page number or page size"}

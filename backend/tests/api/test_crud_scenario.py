"""End-to-end walk through the whole API with one seeded user."""


async def test_seed_count_list_create_delete(client, test_db, user_factory):
    test_db.add(user_factory("U1", street=None, city=None, state=None, zipcode=None))
    await test_db.commit()

    res = await client.get("/users/count")
    assert res.json() == {"count": 1}

    res = await client.get("/users", params={"pageNumber": 0, "pageSize": 4})
    [user] = res.json()
    assert user["id"] == "U1"
    assert [user[f] for f in ("street", "city", "state", "zipcode")] == ["", "", "", ""]

    res = await client.post(
        "/posts", json={"title": "Hi", "body": "World", "userId": "U1"},
    )
    assert res.status_code == 201
    post = res.json()
    assert post["id"] and post["created_at"]

    res = await client.get("/posts", params={"userId": "U1"})
    assert res.json() == [post]

    res = await client.delete(f"/posts/{post['id']}")
    assert res.status_code == 204

    res = await client.get("/posts", params={"userId": "U1"})
    assert res.json() == []

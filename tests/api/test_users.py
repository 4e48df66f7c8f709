"""Users routes — listing and lookup over the static directory."""

from app.core.user_directory import User, UserDirectory, get_user_directory
from app.main import app


async def test_list_users_returns_non_empty_array(client):
    res = await client.get("/api/users")
    assert res.status_code == 200
    body = res.json()
    assert isinstance(body, list)
    assert len(body) > 0


async def test_list_users_elements_have_id_and_name(client):
    body = (await client.get("/api/users")).json()
    for user in body:
        assert set(user) == {"id", "name"}
        assert isinstance(user["id"], int)
        assert isinstance(user["name"], str)


async def test_list_users_is_idempotent(client):
    first = await client.get("/api/users")
    second = await client.get("/api/users")
    assert first.json() == second.json()


async def test_list_users_preserves_directory_order(client):
    directory = UserDirectory([User(id=9, name="Zed"), User(id=4, name="Amy")])
    app.dependency_overrides[get_user_directory] = lambda: directory
    res = await client.get("/api/users")
    assert res.json() == [{"id": 9, "name": "Zed"}, {"id": 4, "name": "Amy"}]


async def test_get_user_by_id(client):
    res = await client.get("/api/users/1")
    assert res.status_code == 200
    assert res.json() == {"id": 1, "name": "John Doe"}


async def test_get_unknown_user_returns_404_envelope(client):
    res = await client.get("/api/users/999")
    assert res.status_code == 404
    err = res.json()["error"]
    assert err["code"] == "RESOURCE_NOT_FOUND"
    assert err["category"] == "resource_not_found"
    assert err["message"] == "User '999' not found"
    assert err["context"]["resource_id"] == "999"
    assert err["context"]["path"] == "/api/users/999"


async def test_get_user_with_non_integer_id_returns_400(client):
    res = await client.get("/api/users/abc")
    assert res.status_code == 400
    err = res.json()["error"]
    assert err["code"] == "VALIDATION_ERROR"
    assert err["details"][0]["field"] == "path.user_id"

"""
Tags and categories: global resources shared by every user.
"""
import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
@pytest.mark.parametrize("resource", ["tags", "categories"])
async def test_crud_round_trip(async_client: AsyncClient, alice, resource):
    h = alice["headers"]
    resp = await async_client.post(f"/api/v1/{resource}", json={"name": "python"}, headers=h)
    assert resp.status_code == 201
    created = resp.json()
    assert created == {"id": created["id"], "name": "python"}

    resp = await async_client.get(f"/api/v1/{resource}/{created['id']}", headers=h)
    assert resp.json() == created

    resp = await async_client.put(
        f"/api/v1/{resource}/{created['id']}", json={"name": "Python 3"}, headers=h
    )
    assert resp.json()["name"] == "Python 3"

    resp = await async_client.delete(f"/api/v1/{resource}/{created['id']}", headers=h)
    assert resp.status_code == 204
    resp = await async_client.get(f"/api/v1/{resource}/{created['id']}", headers=h)
    assert resp.status_code == 400


@pytest.mark.asyncio
@pytest.mark.parametrize("resource,entity", [("tags", "Tag"), ("categories", "Category")])
async def test_missing_is_bad_request(async_client: AsyncClient, alice, resource, entity):
    resp = await async_client.get(f"/api/v1/{resource}/777", headers=alice["headers"])
    assert resp.status_code == 400
    assert resp.json()["detail"] == f"{entity} not found"


@pytest.mark.asyncio
async def test_tags_are_shared_between_users(async_client: AsyncClient, alice, bob):
    tag = (await async_client.post(
        "/api/v1/tags", json={"name": "shared"}, headers=alice["headers"]
    )).json()

    resp = await async_client.get(f"/api/v1/tags/{tag['id']}", headers=bob["headers"])
    assert resp.status_code == 200
    resp = await async_client.put(
        f"/api/v1/tags/{tag['id']}", json={"name": "renamed by bob"}, headers=bob["headers"]
    )
    assert resp.status_code == 200


@pytest.mark.asyncio
async def test_tag_search_and_dropdown(async_client: AsyncClient, alice):
    h = alice["headers"]
    for name in ["python", "pytest", "cpython", "pandas", "pydantic", "pyright", "pypy"]:
        await async_client.post("/api/v1/tags", json={"name": name}, headers=h)

    body = (await async_client.get("/api/v1/tags", params={"search": "py"}, headers=h)).json()
    names = {t["name"] for t in body["result"]}
    assert "cpython" not in names
    assert body["total"] == 5

    rows = (await async_client.get("/api/v1/tags/dropdown", params={"keyword": "py"}, headers=h)).json()
    assert len(rows) == 5
    assert all(set(r) == {"id", "name"} for r in rows)

    rows = (await async_client.get(
        "/api/v1/categories/dropdown", params={"keyword": "py"}, headers=h
    )).json()
    assert rows == []


@pytest.mark.asyncio
async def test_blank_tag_name_rejected(async_client: AsyncClient, alice):
    resp = await async_client.post("/api/v1/tags", json={"name": ""}, headers=alice["headers"])
    assert resp.status_code == 422

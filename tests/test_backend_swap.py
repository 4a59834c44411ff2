"""
Given the same data, both backends must produce byte-identical responses.
"""
import pytest
from httpx import AsyncClient


@pytest.mark.parametrize(
    "path",
    [
        "/api/dog-breeds",
        "/api/dog-breeds/3",
        "/api/dogs",
        "/api/dogs/1",
        "/api/cat-breeds",
        "/api/cat-breeds/1",
        "/api/cats",
        "/api/cats/2",
        "/api/breeders",
        "/api/breeders/1",
        "/api/breeders/999",
    ],
)
async def test_backends_return_identical_json(client: AsyncClient, mysql_client: AsyncClient, path: str):
    from_fixture = await client.get(path)
    from_mysql = await mysql_client.get(path)

    assert from_fixture.status_code == from_mysql.status_code == 200
    assert from_fixture.content == from_mysql.content


async def test_every_breed_average_matches_bounds(client: AsyncClient, mysql_client: AsyncClient):
    for ac in (client, mysql_client):
        for path in ("/api/dog-breeds", "/api/cat-breeds"):
            for breed in (await ac.get(path)).json():
                low, high = breed["weight_low_lbs"], breed["weight_high_lbs"]
                assert breed["average_weight"] == (low + high + 1) // 2


async def test_relational_keys_follow_declared_order(mysql_client: AsyncClient):
    breeder = (await mysql_client.get("/api/breeders/1")).json()
    dog = (await mysql_client.get("/api/dogs/1")).json()

    assert list(breeder) == [
        "id", "breeder_name", "address", "city", "prov_state", "country", "zip", "phone", "email", "active",
    ]
    assert list(dog) == [
        "id", "dog_name", "breed_id", "breeder_id", "color", "date_of_birth", "spayed_neutered", "description",
        "weight",
    ]
    assert dog["date_of_birth"] == "2020-01-15T00:00:00Z"

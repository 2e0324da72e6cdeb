from fastapi.testclient import TestClient

from abrigo.api import create_app
from abrigo.catalog import DEFAULT_CATALOG


def _client() -> TestClient:
    return TestClient(create_app(DEFAULT_CATALOG))


def test_adoptions_endpoint_returns_sorted_placements():
    client = _client()

    response = client.post(
        "/api/adoptions",
        json={"pessoa1": "RATO,BOLA", "pessoa2": "RATO,NOVELO", "ordem": "Rex,Fofo"},
    )

    assert response.status_code == 200
    assert response.json() == {"lista": ["Fofo - abrigo", "Rex - pessoa 1"]}


def test_adoptions_endpoint_accepts_field_names():
    client = _client()

    response = client.post(
        "/api/adoptions",
        json={"adopter1": "SKATE,RATO,BOLA", "adopter2": "LASER", "animals": "Loco,Rex"},
    )

    assert response.status_code == 200
    assert response.json() == {"lista": ["Loco - pessoa 1", "Rex - pessoa 1"]}


def test_adoptions_endpoint_rejects_invalid_input():
    client = _client()

    response = client.post(
        "/api/adoptions",
        json={"pessoa1": "RATO,RATO", "pessoa2": "", "ordem": "Rex"},
    )

    assert response.status_code == 422
    assert response.json() == {"erro": "Brinquedo inválido"}


def test_adoptions_endpoint_trace():
    client = _client()

    response = client.post(
        "/api/adoptions",
        json={"pessoa1": "RATO,BOLA", "pessoa2": "RATO,BOLA", "ordem": "Zero", "trace": True},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["lista"] == ["Zero - abrigo"]
    assert body["trace"] == [
        {"animal": "Zero", "eligible": [1, 2], "destination": "abrigo", "reason": "tie"}
    ]


def test_catalog_endpoint_lists_animals_and_toys():
    client = _client()

    response = client.get("/api/catalog")

    assert response.status_code == 200
    body = response.json()
    assert [animal["name"] for animal in body["animals"]] == [a.name for a in DEFAULT_CATALOG]
    assert body["toys"] == sorted(DEFAULT_CATALOG.toys)
    assert body["special_species"] == "jabuti"


def test_adoptions_endpoint_long_input_uses_error_shape():
    client = _client()

    response = client.post(
        "/api/adoptions",
        json={"pessoa1": ",".join(["RATO"] * 400), "pessoa2": "", "ordem": "Rex"},
    )

    assert response.status_code == 422
    assert response.json() == {"erro": "Brinquedo inválido"}

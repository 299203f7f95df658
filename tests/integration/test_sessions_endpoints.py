"""
Testes de integração de /sessions.

Cenários:
- POST normaliza a data para ISO UTC com milissegundos
- entries[].exerciseId não é checado (diferente do plan de /workouts)
- GET ?from=&to= filtra por data, ignora limites inválidos, ordena desc
- PATCH parcial com revalidação dos campos enviados; null → 400
"""

import pytest

from app.repositories.document_store import SESSIONS
from tests.conftest import USER_ID

pytestmark = pytest.mark.integration


def session_body(date: str, **extra) -> dict:
    body = {
        "date": date,
        "entries": [{"exerciseId": "e-agach", "name": "Agachamento", "sets": [{"weight": 60, "reps": 10}]}],
    }
    body.update(extra)
    return body


@pytest.mark.asyncio
async def test_create_session_normalizes_date(client):
    response = await client.post("/sessions", json=session_body("2024-03-10T09:30:00-03:00", customName="Extra"))

    assert response.status_code == 201
    data = response.json()
    assert data["date"] == "2024-03-10T12:30:00.000Z"
    assert data["customName"] == "Extra"
    assert data["userId"] == USER_ID


@pytest.mark.asyncio
async def test_create_session_date_only_is_utc_midnight(client):
    response = await client.post("/sessions", json=session_body("2024-03-10"))

    assert response.json()["date"] == "2024-03-10T00:00:00.000Z"


@pytest.mark.asyncio
async def test_session_entries_exercise_ids_are_not_validated(client, fake_db):
    """Assimetria intencional: /workouts valida exerciseId, /sessions não."""
    response = await client.post("/sessions", json=session_body(
        "2024-03-10",
        workoutId="treino-que-nao-existe",
        entries=[{"exerciseId": "exercicio-que-nao-existe", "sets": [{"weight": 0, "reps": 1}]}],
    ))

    assert response.status_code == 201
    assert response.json()["entries"][0]["exerciseId"] == "exercicio-que-nao-existe"


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [
    session_body("ontem"),
    session_body("2024-03-10", entries=[]),
    session_body("2024-03-10", entries=[{"exerciseId": "e1", "sets": []}]),
    session_body("2024-03-10", entries=[{"exerciseId": "e1", "sets": [{"weight": -5, "reps": 10}]}]),
    session_body("2024-03-10", entries=[{"exerciseId": "e1", "sets": [{"weight": 5, "reps": 0}]}]),
    session_body("2024-03-10", entries=[{"exerciseId": "e1", "sets": [{"weight": "60", "reps": 10}]}]),
    session_body("2024-03-10", entries=[{"exerciseId": "e1", "sets": [{"weight": 60, "reps": "10"}]}]),
    session_body("2024-03-10", entries=[{"exerciseId": "e1", "sets": [{"weight": 60, "reps": 9.5}]}]),
    {"entries": session_body("2024-03-10")["entries"]},
])
async def test_create_session_invalid_payload_returns_400(client, body):
    response = await client.post("/sessions", json=body)

    assert response.status_code == 400
    assert response.json()["error"]


@pytest.mark.asyncio
async def test_list_sessions_filters_and_sorts_by_date(client, fake_db):
    for date in ["2024-01-05", "2024-02-10", "2024-03-15"]:
        await client.post("/sessions", json=session_body(date))
    fake_db.seed(SESSIONS, "sem-data", userId=USER_ID, entries=[])

    response = await client.get("/sessions", params={"from": "2024-02-01", "to": "2024-03-31"})

    assert response.status_code == 200
    dates = [s.get("date") for s in response.json()]
    assert dates == ["2024-03-15T00:00:00.000Z", "2024-02-10T00:00:00.000Z", None]


@pytest.mark.asyncio
async def test_list_sessions_ignores_invalid_bounds(client):
    for date in ["2024-01-05", "2024-03-15"]:
        await client.post("/sessions", json=session_body(date))

    response = await client.get("/sessions", params={"from": "lixo", "to": "2024-02-01"})

    assert [s["date"] for s in response.json()] == ["2024-01-05T00:00:00.000Z"]


@pytest.mark.asyncio
async def test_patch_session_updates_sent_fields(client):
    created = (await client.post("/sessions", json=session_body("2024-01-05"))).json()

    response = await client.patch(f"/sessions/{created['id']}", json={"date": "2024-01-06T18:00:00Z"})

    assert response.status_code == 200
    data = response.json()
    assert data["date"] == "2024-01-06T18:00:00.000Z"
    assert data["entries"] == created["entries"]


@pytest.mark.asyncio
async def test_patch_session_invalid_date_returns_400(client):
    created = (await client.post("/sessions", json=session_body("2024-01-05"))).json()

    response = await client.patch(f"/sessions/{created['id']}", json={"date": "amanhã"})

    assert response.status_code == 400


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [{"date": None}, {"entries": None}, {"customName": None}])
async def test_patch_session_with_null_field_returns_400(client, fake_db, body):
    created = (await client.post("/sessions", json=session_body("2024-01-05"))).json()

    response = await client.patch(f"/sessions/{created['id']}", json=body)

    assert response.status_code == 400
    stored = fake_db.data[SESSIONS][created["id"]]
    assert stored["date"] == created["date"]
    assert stored["entries"] == created["entries"]


@pytest.mark.asyncio
async def test_patch_unknown_session_returns_404(client):
    response = await client.patch("/sessions/nope", json={"customName": "X"})

    assert response.status_code == 404
    assert response.json() == {"error": "Session not found"}


@pytest.mark.asyncio
async def test_delete_session_returns_204(client, fake_db):
    created = (await client.post("/sessions", json=session_body("2024-01-05"))).json()

    response = await client.delete(f"/sessions/{created['id']}")

    assert response.status_code == 204
    assert fake_db.data[SESSIONS] == {}

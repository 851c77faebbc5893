from http import HTTPStatus
from unittest.mock import AsyncMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession


def error_fields(response):
    body = response.json()
    assert body["success"] is False
    assert body["error"]["code"] == "VALIDATION_ERROR"
    return [d["field"] for d in body["error"]["details"]]


@pytest.fixture()
def execute_spy(client, monkeypatch):
    """Replaces AsyncSession.execute so tests can assert storage was never reached."""
    spy = AsyncMock(side_effect=AssertionError("storage must not be reached"))
    monkeypatch.setattr(AsyncSession, "execute", spy)
    return spy


def test_get_with_non_integer_id_cites_id(client, execute_spy):
    response = client.get("/students/abc")
    assert response.status_code == HTTPStatus.BAD_REQUEST
    assert error_fields(response) == ["id"]
    execute_spy.assert_not_called()


@pytest.mark.parametrize("bad_id", ["abc", "1.5", "1e3", "12abc"])
@pytest.mark.parametrize("method", ["patch", "delete"])
def test_writes_with_non_integer_id_never_reach_storage(client, execute_spy, method, bad_id):
    kwargs = {"json": {"email": "ann@example.com"}} if method == "patch" else {}
    response = getattr(client, method)(f"/students/{bad_id}", **kwargs)
    assert response.status_code == HTTPStatus.BAD_REQUEST
    assert error_fields(response) == ["id"]
    execute_spy.assert_not_called()


def test_create_lists_every_invalid_field(client, execute_spy):
    response = client.post(
        "/students",
        json={"name": "", "email": "not-an-email", "age": "thirty"},
    )
    assert response.status_code == HTTPStatus.BAD_REQUEST
    assert sorted(error_fields(response)) == ["age", "email", "name"]
    execute_spy.assert_not_called()


@pytest.mark.parametrize(
    "payload, expected",
    [
        ({"name": "", "email": "ann@example.com", "age": 30}, ["name"]),
        ({"name": "   ", "email": "ann@example.com", "age": 30}, ["name"]),
        ({"name": "Ann", "email": "ann@", "age": 30}, ["email"]),
        ({"name": "Ann", "email": "ann@example.com", "age": 30.5}, ["age"]),
        ({"name": "Ann", "email": "ann@example.com", "age": "30"}, ["age"]),
        ({"name": "Ann", "email": "ann@example.com"}, ["age"]),
        ({"email": "bad", "age": 30}, ["name", "email"]),
        ({"name": "<b></b>", "email": "ann@example.com", "age": 30}, ["name"]),
        ({"name": "<script>x</script>", "email": "ann@example.com", "age": 30}, ["name"]),
        ({"name": "Ann", "email": "a&b@example.com", "age": 30}, ["email"]),
    ],
)
def test_create_reports_exactly_the_violated_fields(client, execute_spy, payload, expected):
    response = client.post("/students", json=payload)
    assert response.status_code == HTTPStatus.BAD_REQUEST
    assert sorted(error_fields(response)) == sorted(expected)
    execute_spy.assert_not_called()


def test_create_failure_performs_no_insert(client):
    client.post("/students", json={"name": "Ann", "email": "nope", "age": 30})
    assert client.get("/students").json() == []


def test_update_with_invalid_email(client, execute_spy):
    response = client.patch("/students/1", json={"email": "nope"})
    assert response.status_code == HTTPStatus.BAD_REQUEST
    assert error_fields(response) == ["email"]
    execute_spy.assert_not_called()


def test_update_with_bad_id_and_bad_email_reports_both(client, execute_spy):
    response = client.patch("/students/abc", json={"email": "nope"})
    assert sorted(error_fields(response)) == ["email", "id"]


def test_missing_body_is_reported_under_body(client, execute_spy):
    response = client.post("/students")
    assert response.status_code == HTTPStatus.BAD_REQUEST
    assert error_fields(response) == ["body"]


def test_validation_details_carry_messages(client):
    response = client.get("/students/abc")
    detail = response.json()["error"]["details"][0]
    assert detail["message"]
    assert response.json()["error"]["message"] == "Input validation failed"


def test_markup_only_name_is_not_inserted(client):
    response = client.post("/students", json={"name": "<b></b>", "email": "x@example.com", "age": 1})
    assert response.status_code == HTTPStatus.BAD_REQUEST
    assert client.get("/students").json() == []


def test_update_rejects_email_that_sanitizing_would_change(client, execute_spy):
    response = client.patch("/students/1", json={"email": "a&b@example.com"})
    assert response.status_code == HTTPStatus.BAD_REQUEST
    assert error_fields(response) == ["email"]
    execute_spy.assert_not_called()


@pytest.mark.parametrize("method", ["get", "delete"])
def test_id_outside_64_bit_range_is_rejected(client, execute_spy, method):
    response = getattr(client, method)("/students/99999999999999999999")
    assert response.status_code == HTTPStatus.BAD_REQUEST
    assert error_fields(response) == ["id"]
    execute_spy.assert_not_called()

"""Unit tests for api/envelope.py -- success and failure response shapes."""

import json
from dataclasses import dataclass
from datetime import datetime, timezone

from api.envelope import DEFAULT_FAILURE_MESSAGE, failure, failure_body, success, success_body


def _body(response) -> dict:
    return json.loads(response.body)


class TestSuccess:
    def test_default_code(self) -> None:
        resp = success({"id": 1})
        assert resp.status_code == 200
        assert _body(resp) == {"status": "success", "data": {"id": 1}}

    def test_custom_code(self) -> None:
        resp = success({"id": 2}, code=201)
        assert resp.status_code == 201
        assert _body(resp)["data"] == {"id": 2}

    def test_list_and_none_data(self) -> None:
        assert _body(success([1, 2, 3]))["data"] == [1, 2, 3]
        assert _body(success(None)) == {"status": "success", "data": None}

    def test_encodes_dataclasses_and_datetimes(self) -> None:
        @dataclass
        class Item:
            id: int
            created: datetime

        body = success_body(Item(id=1, created=datetime(2024, 1, 1, tzinfo=timezone.utc)))
        assert body["data"] == {"id": 1, "created": "2024-01-01T00:00:00+00:00"}


class TestFailure:
    def test_not_found_without_errors(self) -> None:
        resp = failure(code=404, message="not found")
        assert resp.status_code == 404
        body = _body(resp)
        assert body == {"status": "fail", "error": {"message": "not found"}}
        assert "errors" not in body["error"]

    def test_defaults(self) -> None:
        resp = failure()
        assert resp.status_code == 500
        assert _body(resp)["error"]["message"] == DEFAULT_FAILURE_MESSAGE

    def test_single_structured_error(self) -> None:
        body = failure_body("Bad input", {"field": "email", "message": "is required"})
        assert body["error"]["errors"] == {"field": "email", "message": "is required"}

    def test_error_collection(self) -> None:
        errors = [{"field": "email"}, {"field": "password"}]
        resp = failure(code=422, message="Validation failed", errors=errors)
        assert resp.status_code == 422
        assert _body(resp)["error"] == {"message": "Validation failed", "errors": errors}

    def test_exactly_one_shape(self) -> None:
        assert set(success_body(1)) == {"status", "data"}
        assert set(failure_body()) == {"status", "error"}

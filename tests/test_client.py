"""Tests for the REST client's ``(value, error)`` results."""
from __future__ import annotations

import json

import requests

from people_service.client import ApiError, PersonsAPI


def _response(status_code: int, body) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response.reason = "OK" if status_code < 400 else "Error"
    response.url = "http://people.test/"
    if body is None:
        response._content = b""
    elif isinstance(body, bytes):
        response._content = body
    else:
        response._content = json.dumps(body).encode("utf-8")
    return response


class FakeSession:
    """Stands in for ``requests.Session`` and records the calls made."""

    def __init__(self, result):
        self.result = result
        self.calls = []

    def request(self, **kwargs):
        self.calls.append(kwargs)
        if isinstance(self.result, Exception):
            raise self.result
        return self.result


def _api(result) -> PersonsAPI:
    return PersonsAPI(base_url="http://people.test/", session=FakeSession(result))


def test_list_persons_parses_records():
    api = _api(_response(200, [{"id": 1, "name": "Alice"}, {"id": 2, "firstName": "Bob"}]))

    people, error = api.list_persons()

    assert error is None
    assert [p.id for p in people] == [1, 2]
    assert people[1].first_name == "Bob"
    call = api.session.calls[0]
    assert call["method"] == "GET"
    assert call["url"] == "http://people.test/persons"
    assert call["timeout"] == 15


def test_get_person_parses_record():
    api = _api(_response(200, {"id": 1, "name": "Alice"}))

    person, error = api.get_person(1)

    assert error is None
    assert person.extra_fields["name"] == "Alice"
    assert api.session.calls[0]["url"] == "http://people.test/persons/1/getbyid"


def test_null_body_means_absent_not_error():
    person, error = _api(_response(200, b"null")).get_person(3)

    assert person is None
    assert error is None


def test_not_found_status_means_absent_not_error():
    person, error = _api(_response(404, {"detail": "Person not found"})).get_person(3)

    assert person is None
    assert error is None


def test_server_error_is_reported():
    people, error = _api(_response(500, {"detail": "boom"})).list_persons()

    assert people == []
    assert error == ApiError(status_code=500, message="boom")


def test_transport_failure_is_reported():
    people, error = _api(requests.ConnectionError("connection refused")).list_persons()

    assert people == []
    assert error.status_code is None
    assert "connection refused" in error.message


def test_malformed_json_is_reported():
    person, error = _api(_response(200, b"{not json")).get_person(1)

    assert person is None
    assert error.message.startswith("Malformed response")


def test_wrong_shape_is_reported():
    people, error = _api(_response(200, {"id": 1})).list_persons()
    person, person_error = _api(_response(200, {"name": "no id"})).get_person(1)

    assert people == [] and error is not None
    assert person is None and person_error is not None


def test_empty_list_is_success():
    people, error = _api(_response(200, [])).list_persons()

    assert people == []
    assert error is None

"""Tests for the gRPC servicer, message conversion and client stub."""
from __future__ import annotations

import asyncio

import grpc
import pytest

from people_service.app.rpc import PeopleServicer, create_grpc_server
from people_service.app.rpc import messages
from people_service.app.rpc.client import PeopleRpcClient
from people_service.app.schemas.person import Person
from people_service.app.services import PersonQueryService, PersonStore


class _AbortCalled(Exception):
    pass


class FakeContext:
    def __init__(self):
        self.code = None
        self.details = None

    async def abort(self, code, details):
        self.code = code
        self.details = details
        raise _AbortCalled(details)


def test_get_all_wraps_every_person(query_service):
    servicer = PeopleServicer(query_service)

    reply = asyncio.run(servicer.GetAll(messages.GetAllPeopleRequest(), FakeContext()))

    assert [p.id for p in reply.people] == [1, 2]
    assert [p.attributes["name"] for p in reply.people] == ["Alice", "Bob"]


def test_get_person_by_id_returns_message(query_service):
    servicer = PeopleServicer(query_service)

    reply = asyncio.run(servicer.GetPersonById(messages.GetPersonByIdRequest(id=2), FakeContext()))

    assert reply.id == 2
    assert reply.attributes["name"] == "Bob"


def test_unknown_id_returns_empty_person_by_default(query_service):
    servicer = PeopleServicer(query_service)

    reply = asyncio.run(servicer.GetPersonById(messages.GetPersonByIdRequest(id=3), FakeContext()))

    assert messages.is_empty_person(reply)


def test_unknown_id_aborts_with_not_found_in_strict_mode(query_service):
    servicer = PeopleServicer(query_service, strict_not_found=True)
    context = FakeContext()

    with pytest.raises(_AbortCalled):
        asyncio.run(servicer.GetPersonById(messages.GetPersonByIdRequest(id=3), context))

    assert context.code == grpc.StatusCode.NOT_FOUND


def test_person_message_conversion_keeps_fields():
    person = Person(id=4, first_name="Katherine", bio=None, nickname="KJ", rank=3)

    message = messages.person_to_message(person)
    restored = messages.message_to_person(message)

    assert message.first_name == "Katherine"
    assert message.bio == ""
    assert dict(message.attributes) == {"nickname": "KJ", "rank": "3"}
    assert restored.first_name == "Katherine"
    assert restored.bio is None
    assert restored.extra_fields == {"nickname": "KJ", "rank": "3"}


def test_messages_survive_the_wire_format(query_service):
    reply = messages.PeopleReply()
    reply.people.extend(messages.person_to_message(p) for p in query_service.list_all())

    decoded = messages.PeopleReply.FromString(reply.SerializeToString())

    assert [messages.message_to_person(p) for p in decoded.people] == query_service.list_all()


def _call_through_server(query_service, call, *, strict_not_found=False, strict_client=False):
    """Start an in-process server on an ephemeral port and run ``call(client)``."""

    async def scenario():
        server = create_grpc_server(query_service, strict_not_found=strict_not_found)
        port = server.add_insecure_port("127.0.0.1:0")
        await server.start()
        try:
            with PeopleRpcClient(f"127.0.0.1:{port}", timeout=5, strict_not_found=strict_client) as client:
                loop = asyncio.get_running_loop()
                return await loop.run_in_executor(None, call, client)
        finally:
            await server.stop(None)

    return asyncio.run(scenario())


def test_client_round_trip_through_server(query_service):
    def call(client):
        return client.get_all(), client.get_person_by_id(1), client.get_person_by_id(3)

    (people, err_all), (alice, err_one), (missing, err_missing) = _call_through_server(query_service, call)

    assert err_all is None and err_one is None and err_missing is None
    assert [p.extra_fields["name"] for p in people] == ["Alice", "Bob"]
    assert alice.extra_fields["name"] == "Alice"
    assert missing is None


def test_client_treats_not_found_status_as_absence(query_service):
    missing, error = _call_through_server(
        query_service, lambda client: client.get_person_by_id(42), strict_not_found=True
    )

    assert missing is None
    assert error is None


def test_client_reports_unreachable_server():
    with PeopleRpcClient("127.0.0.1:1", timeout=1) as client:
        people, error = client.get_all()

    assert people == []
    assert error is not None
    assert error.status_code == "UNAVAILABLE"


def test_out_of_range_lookup_is_absent_not_raised():
    with PeopleRpcClient("127.0.0.1:1", timeout=1) as client:
        assert client.get_person_by_id(2**31) == (None, None)
        assert client.get_person_by_id(-(2**31) - 1) == (None, None)


def test_int32_boundary_ids_are_served(write_people):
    path = write_people([{"id": 2**31 - 1, "name": "Max"}, {"id": -(2**31), "name": "Min"}])
    servicer = PeopleServicer(PersonQueryService(PersonStore.load(str(path))))

    reply = asyncio.run(servicer.GetAll(messages.GetAllPeopleRequest(), FakeContext()))

    assert [p.id for p in reply.people] == [2**31 - 1, -(2**31)]


def test_id_zero_record_is_hidden_by_lenient_contract():
    service = PersonQueryService(PersonStore([Person(id=0)]))

    person, error = _call_through_server(service, lambda client: client.get_person_by_id(0))

    assert person is None
    assert error is None


def test_id_zero_record_is_returned_in_strict_mode():
    service = PersonQueryService(PersonStore([Person(id=0)]))

    def call(client):
        return client.get_person_by_id(0), client.get_person_by_id(1)

    (zero, zero_error), (missing, missing_error) = _call_through_server(
        service, call, strict_not_found=True, strict_client=True
    )

    assert zero_error is None and zero is not None and zero.id == 0
    assert missing is None and missing_error is None

"""
gRPC adapter for the People service.

:class:`PeopleServicer` maps the two RPC methods of ``people.People`` onto
the shared :class:`PersonQueryService`.  ``create_grpc_server`` registers
the servicer on a ``grpc.aio`` server the same way generated
``add_PeopleServicer_to_server`` helpers do, using the message classes
from :mod:`people_service.app.rpc.messages`.
"""

from __future__ import annotations

import logging
from typing import Optional

import grpc

from people_service.app.rpc import messages
from people_service.app.services.person_service import PersonQueryService


logger = logging.getLogger(__name__)


class PeopleServicer:
    """Implementation of the ``people.People`` service."""

    def __init__(self, query_service: PersonQueryService, *, strict_not_found: bool = False) -> None:
        self.query_service = query_service
        self.strict_not_found = strict_not_found

    async def GetAll(self, request, context):  # noqa: N802 - gRPC method name
        reply = messages.PeopleReply()
        reply.people.extend(messages.person_to_message(p) for p in self.query_service.list_all())
        return reply

    async def GetPersonById(self, request, context):  # noqa: N802 - gRPC method name
        person = self.query_service.find_by_id(request.id)
        if person is not None:
            return messages.person_to_message(person)
        if self.strict_not_found:
            await context.abort(grpc.StatusCode.NOT_FOUND, f"Person {request.id} not found")
        # Lenient contract: an empty message stands for "no such person".
        return messages.PersonMessage()


def add_people_servicer_to_server(servicer: PeopleServicer, server) -> None:
    """Register ``servicer`` under ``people.People`` on ``server``."""
    handlers = {
        "GetAll": grpc.unary_unary_rpc_method_handler(
            servicer.GetAll,
            request_deserializer=messages.GetAllPeopleRequest.FromString,
            response_serializer=messages.PeopleReply.SerializeToString,
        ),
        "GetPersonById": grpc.unary_unary_rpc_method_handler(
            servicer.GetPersonById,
            request_deserializer=messages.GetPersonByIdRequest.FromString,
            response_serializer=messages.PersonMessage.SerializeToString,
        ),
    }
    generic_handler = grpc.method_handlers_generic_handler(messages.SERVICE_NAME, handlers)
    server.add_generic_rpc_handlers((generic_handler,))


def create_grpc_server(
    query_service: PersonQueryService,
    *,
    strict_not_found: bool = False,
    address: Optional[str] = None,
) -> grpc.aio.Server:
    """Build a ``grpc.aio`` server exposing ``people.People``.

    When ``address`` is given an insecure port is bound to it; pass
    ``None`` to bind ports yourself (tests use ``127.0.0.1:0``).  The
    server is returned unstarted.
    """
    server = grpc.aio.server()
    add_people_servicer_to_server(
        PeopleServicer(query_service, strict_not_found=strict_not_found),
        server,
    )
    if address:
        server.add_insecure_port(address)
    return server


async def serve_grpc(
    query_service: PersonQueryService,
    address: str,
    *,
    strict_not_found: bool = False,
) -> None:
    """Run the gRPC server on ``address`` until it is stopped or cancelled."""
    server = create_grpc_server(query_service, strict_not_found=strict_not_found, address=address)
    await server.start()
    logger.info("gRPC server listening on %s", address)
    try:
        await server.wait_for_termination()
    finally:
        await server.stop(grace=None)

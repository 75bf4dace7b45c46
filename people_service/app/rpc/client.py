"""
Client stub for the People gRPC service.

:class:`PeopleRpcClient` wraps a synchronous channel and exposes the two
RPC methods with the same ``(value, error)`` convention as the REST
client in :mod:`people_service.client`: ``error`` is ``None`` on success
and an :class:`~people_service.client.ApiError` otherwise.  A person
that does not exist is reported as ``(None, None)``, whichever
not-found contract the server uses.  Against a lenient server an empty
reply means "not found", which also hides a record holding only ``id``
0; pass ``strict_not_found=True`` when the server runs in strict mode.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

import grpc

from people_service.app.rpc import messages
from people_service.app.schemas.person import ID_MAX, ID_MIN, Person
from people_service.client import ApiError


logger = logging.getLogger(__name__)


class PeopleRpcClient:
    """Synchronous client for ``people.People``."""

    def __init__(
        self,
        target: str,
        *,
        channel: Optional[grpc.Channel] = None,
        timeout: float = 15,
        strict_not_found: bool = False,
    ) -> None:
        self.target = target
        self.timeout = timeout
        # Set when the server runs with STRICT_NOT_FOUND: absence then arrives
        # as a NOT_FOUND status and an empty reply is a real record (id 0).
        self.strict_not_found = strict_not_found
        self._channel = channel or grpc.insecure_channel(target)
        self._get_all = self._channel.unary_unary(
            f"/{messages.SERVICE_NAME}/GetAll",
            request_serializer=messages.GetAllPeopleRequest.SerializeToString,
            response_deserializer=messages.PeopleReply.FromString,
        )
        self._get_person_by_id = self._channel.unary_unary(
            f"/{messages.SERVICE_NAME}/GetPersonById",
            request_serializer=messages.GetPersonByIdRequest.SerializeToString,
            response_deserializer=messages.PersonMessage.FromString,
        )

    def close(self) -> None:
        self._channel.close()

    def __enter__(self) -> PeopleRpcClient:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def get_all(self) -> Tuple[List[Person], Optional[ApiError]]:
        """Fetch every person.  Returns an empty list alongside any error."""
        try:
            reply = self._get_all(messages.GetAllPeopleRequest(), timeout=self.timeout)
        except grpc.RpcError as exc:
            return [], self._error("GetAll", exc)
        return [messages.message_to_person(m) for m in reply.people], None

    def get_person_by_id(self, person_id: int) -> Tuple[Optional[Person], Optional[ApiError]]:
        """Fetch one person; ``(None, None)`` when it does not exist."""
        if not ID_MIN <= person_id <= ID_MAX:
            # Outside the int32 wire range, so no stored person can match.
            logger.debug("Person id %s is outside the int32 range", person_id)
            return None, None
        try:
            reply = self._get_person_by_id(
                messages.GetPersonByIdRequest(id=person_id), timeout=self.timeout
            )
        except grpc.RpcError as exc:
            if exc.code() == grpc.StatusCode.NOT_FOUND:
                return None, None
            return None, self._error("GetPersonById", exc)
        if not self.strict_not_found and messages.is_empty_person(reply):
            return None, None
        return messages.message_to_person(reply), None

    def _error(self, method: str, exc: grpc.RpcError) -> ApiError:
        code = exc.code()
        name = code.name if code is not None else None
        message = exc.details() or str(exc)
        logger.error("RPC %s to %s failed (%s): %s", method, self.target, name, message)
        return ApiError(status_code=name, message=message)

"""
gRPC surface of the People service.

``service`` holds the servicer and server factory, ``messages`` the
protobuf message classes (mirroring ``people.proto``) and ``client`` a
synchronous client stub.
"""

from people_service.app.rpc.service import (
    PeopleServicer,
    add_people_servicer_to_server,
    create_grpc_server,
    serve_grpc,
)

__all__ = [
    "PeopleServicer",
    "add_people_servicer_to_server",
    "create_grpc_server",
    "serve_grpc",
]

"""
Pydantic schema definitions for API payloads.

Schemas describe records as the REST API sends them.  The gRPC surface
converts them to and from protobuf messages in ``rpc.messages``.
"""

"""
API package containing versioned REST routes.

A version subpackage exposes a top-level ``router`` which includes all
of its resource endpoints.  The gRPC surface lives separately in
``people_service.app.rpc``.
"""

"""
Top-level package for the People Service.

The server side lives in ``people_service.app`` (FastAPI app, gRPC
servicer, record store).  ``people_service.client`` holds the REST
client and ``people_service.app.rpc.client`` the gRPC client stub.
"""

__all__ = []

"""
Application package for the People Service.

The service exposes one in-memory collection of person records over
two protocols:

* ``api`` holds the versioned FastAPI routers (REST);
* ``rpc`` holds the gRPC servicer, its message types and a client stub;
* ``services`` holds the record store and the query service that both
  protocols share;
* ``core`` holds configuration and logging setup.

The FastAPI application itself is built in ``main``.
"""

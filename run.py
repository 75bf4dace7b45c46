"""Unified entry point for the REST API and the gRPC service.

This script loads the person records once and serves them over both
protocols concurrently from a single process, so the FastAPI app and
the gRPC servicer share one in-memory store.  It is intended to be
executed from the directory holding ``people.json``::

    python run.py

Hosts, ports, the data file and the not-found contract are read from
environment variables (see ``people_service.app.core.config``).  A
malformed data file stops the process before either server starts.
"""
import asyncio
import logging

from uvicorn import Config, Server

from people_service.app.core.config import settings
from people_service.app.core.logging_config import setup_logging
from people_service.app.main import create_app
from people_service.app.rpc import serve_grpc
from people_service.app.services import PersonQueryService, PersonStore


async def run_rest(query_service: PersonQueryService) -> None:
    """Serve the REST API with Uvicorn on ``HTTP_HOST``:``HTTP_PORT``."""
    app = create_app(query_service, settings)
    config = Config(app=app, host=settings.http_host, port=settings.http_port, reload=False, log_level="info")
    server = Server(config)
    await server.serve()


async def run_grpc(query_service: PersonQueryService) -> None:
    """Serve the gRPC service on ``GRPC_HOST``:``GRPC_PORT``."""
    await serve_grpc(query_service, settings.grpc_address, strict_not_found=settings.strict_not_found)


async def main() -> None:
    """Load the store, then run both servers until one of them stops."""
    setup_logging(settings.log_level, settings.log_file)
    query_service = PersonQueryService(PersonStore.load(settings.people_file))
    tasks = [asyncio.create_task(run_rest(query_service)), asyncio.create_task(run_grpc(query_service))]
    done, pending = await asyncio.wait(tasks, return_when=asyncio.FIRST_COMPLETED)
    for task in done:
        if exception := task.exception():
            logging.exception("Exception in service", exc_info=exception)
    for task in pending:
        task.cancel()
    await asyncio.gather(*pending, return_exceptions=True)


def cli() -> None:
    """Run until interrupted.  Ctrl+C exits quietly; ``SystemExit`` (for
    example uvicorn failing to bind its port) keeps its exit status."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    cli()

"""
Main entrypoint for the People Service REST API.

This module assembles the FastAPI application, sets up logging, loads
the person records and includes the versioned routers.  The
``create_app`` function builds and configures the app.  It is not
called at import time, so importing this module never touches the data
file; serve it with uvicorn's factory mode::

    uvicorn people_service.app.main:create_app --factory

To serve REST and gRPC from one process sharing a single in-memory
store, use ``run.py`` at the project root instead.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .core.config import Settings, settings
from .core.logging_config import setup_logging
from .api.v1.router import router as v1_router
from .services.person_service import PersonQueryService
from .services.person_store import PersonStore


logger = logging.getLogger(__name__)


def create_app(
    query_service: Optional[PersonQueryService] = None,
    app_settings: Optional[Settings] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    query_service : Optional[PersonQueryService]
        Service to answer person queries.  Pass one in to share a
        store with the gRPC server.  When omitted, a store is loaded
        from ``app_settings.people_file``.
    app_settings : Optional[Settings]
        Settings to use instead of the module-level ``settings``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.

    Raises
    ------
    PersonStoreError
        If the people file exists but cannot be parsed.  The app is
        not created in that case.
    """
    cfg = app_settings or settings
    setup_logging(cfg.log_level, cfg.log_file)

    if query_service is None:
        # Load before building the app so a corrupt file stops startup.
        query_service = PersonQueryService(PersonStore.load(cfg.people_file))

    app = FastAPI(title=cfg.project_name, version=cfg.api_version)
    app.state.query_service = query_service
    app.state.strict_not_found = cfg.strict_not_found

    app.include_router(v1_router)

    logger.info(
        "REST API ready (%s people, strict_not_found=%s)",
        len(query_service.store),
        cfg.strict_not_found,
    )
    return app


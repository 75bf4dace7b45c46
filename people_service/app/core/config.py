"""
Simple configuration management.

Like the rest of the service, settings are kept dependency free: the
``Settings`` dataclass reads configuration directly from environment
variables and provides defaults for all fields.  Values are computed
when this module is imported, so environment variables should be set
before the first import.  Tests and embedding code may construct
their own ``Settings`` instance and pass it to ``create_app``.
"""

import os
from dataclasses import dataclass
from typing import Optional


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "People Service")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # JSON file holding the person records.  Relative paths are resolved
    # against the working directory of the process, which is where the
    # data file lives in a typical deployment.
    people_file: str = os.getenv("PEOPLE_FILE", "people.json")

    http_host: str = os.getenv("HTTP_HOST", "0.0.0.0")
    http_port: int = int(os.getenv("HTTP_PORT", "8000"))
    grpc_host: str = os.getenv("GRPC_HOST", "0.0.0.0")
    grpc_port: int = int(os.getenv("GRPC_PORT", "50051"))

    # When enabled, a lookup for an unknown id answers with HTTP 404 on
    # the REST surface and StatusCode.NOT_FOUND on the gRPC surface.
    # When disabled (the default) REST returns ``null`` with status 200
    # and gRPC returns an empty Person message.
    strict_not_found: bool = _env_bool("STRICT_NOT_FOUND")

    @property
    def grpc_address(self) -> str:
        return f"{self.grpc_host}:{self.grpc_port}"


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()

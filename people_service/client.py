"""People service REST client.

This module defines a small client wrapper around the People REST API
using the ``requests`` library.  It exposes one method per endpoint:

* :meth:`PersonsAPI.list_persons` – return every person.
* :meth:`PersonsAPI.get_person` – fetch a single person by identifier.

Every method returns a tuple ``(value, error)``.  On success ``error``
is ``None``; on failure ``error`` is an :class:`ApiError` carrying the
HTTP status code (``None`` for transport problems) and a message.
Failures are logged but never raised, and they are never confused with
an absent person: a lookup for an unknown id yields ``(None, None)``
whether the server answers with ``null`` or with 404.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple, Union

import requests
from pydantic import ValidationError

from people_service.app.schemas.person import Person


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ApiError:
    """Describes why a request failed.

    Attributes:
        status_code: HTTP status code, gRPC status name, or ``None``
            when the server could not be reached or sent an unreadable
            response.
        message: Human readable description of the failure.
    """

    status_code: Optional[Union[int, str]]
    message: str


class PersonsAPI:
    """Client for the ``/persons`` endpoints."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each response.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None
    ) -> Tuple[Optional[Any], Optional[ApiError]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, error)``.  ``data`` contains the parsed JSON
            response on success (``None`` for an empty or ``null`` body)
            and ``error`` is ``None``.  On failure ``data`` is ``None``.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    if isinstance(err_json, dict):
                        message = str(err_json.get("detail") or err_json.get("message") or err_json)
                    else:
                        message = str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, ApiError(status_code=status, message=message)
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, ApiError(status_code=None, message=str(exc))
        if not response.content:
            return None, None
        try:
            return response.json(), None
        except ValueError as exc:
            logger.error("API returned a malformed body for %s: %s", url, exc)
            return None, ApiError(status_code=response.status_code, message=f"Malformed response: {exc}")

    # ------------------------------------------------------------------
    # Person operations
    # ------------------------------------------------------------------
    def list_persons(self) -> Tuple[List[Person], Optional[ApiError]]:
        """Retrieve all people.

        Returns:
            A tuple ``(people, error)``.  ``people`` is empty on failure.
        """
        data, error = self._request("GET", "/persons")
        if error:
            return [], error
        if data is None:
            return [], None
        if not isinstance(data, list):
            logger.error("Expected a JSON array from /persons, got %s", type(data).__name__)
            return [], ApiError(status_code=None, message="Malformed response: expected a JSON array")
        try:
            return [Person.model_validate(item) for item in data], None
        except ValidationError as exc:
            logger.error("API returned an invalid person: %s", exc)
            return [], ApiError(status_code=None, message=f"Malformed response: {exc}")

    def get_person(self, person_id: int) -> Tuple[Optional[Person], Optional[ApiError]]:
        """Retrieve a single person by ID.

        Returns:
            A tuple ``(person, error)``.  ``(None, None)`` means the
            server has no person with that id.
        """
        data, error = self._request("GET", f"/persons/{person_id}/getbyid")
        if error:
            if error.status_code == 404:
                logger.debug("Person %s not found", person_id)
                return None, None
            return None, error
        if data is None:
            return None, None
        try:
            return Person.model_validate(data), None
        except ValidationError as exc:
            logger.error("API returned an invalid person: %s", exc)
            return None, ApiError(status_code=None, message=f"Malformed response: {exc}")

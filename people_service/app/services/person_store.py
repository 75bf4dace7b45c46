"""
In-memory record store for person data.

The store is populated exactly once, from a JSON file holding an array
of person objects, and is never modified afterwards.  Because nothing
writes to it after construction, any number of concurrent requests may
read from it without locking.

Two "no data" situations are kept apart on purpose:

* the data file does not exist: the store is *uninitialized*
  (``people is None``);
* the data file holds an empty array: the store is initialized and
  simply has no records (``people == []``).

A data file that exists but cannot be parsed is a fatal error.
``PersonStore.load`` raises :class:`PersonStoreError` and the process
is expected to stop instead of serving partial or corrupt data.
"""

from __future__ import annotations

import json
import logging
import os
from typing import List, Optional, Sequence

from pydantic import ValidationError

from people_service.app.schemas.person import Person


logger = logging.getLogger(__name__)


class PersonStoreError(RuntimeError):
    """Raised when the data file exists but does not hold valid person records."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot load person records from {path}: {reason}")
        self.path = path
        self.reason = reason


class PersonStore:
    """Write-once container for the process-wide list of people."""

    def __init__(self, people: Optional[Sequence[Person]] = None) -> None:
        # A tuple keeps the snapshot immutable for the lifetime of the store.
        self._people = tuple(people) if people is not None else None

    @classmethod
    def load(cls, path: str) -> PersonStore:
        """Build a store from the JSON file at ``path``.

        Returns an uninitialized store when the file is missing.  Raises
        :class:`PersonStoreError` when the file is not valid JSON, is not
        a JSON array or contains an element that is not a valid person.
        """
        resolved = os.path.abspath(path)
        if not os.path.exists(resolved):
            logger.warning("People file %s not found; store left uninitialized", resolved)
            return cls()
        try:
            with open(resolved, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            logger.error("Failed to read people file %s: %s", resolved, exc)
            raise PersonStoreError(resolved, str(exc)) from exc
        if not isinstance(raw, list):
            logger.error("People file %s does not contain a JSON array", resolved)
            raise PersonStoreError(resolved, f"expected a JSON array, got {type(raw).__name__}")
        people: List[Person] = []
        for index, item in enumerate(raw):
            try:
                people.append(Person.model_validate(item))
            except ValidationError as exc:
                logger.error("Invalid person at index %s in %s: %s", index, resolved, exc)
                raise PersonStoreError(resolved, f"invalid person at index {index}: {exc}") from exc
        logger.info("Loaded %s people from %s", len(people), resolved)
        return cls(people)

    @property
    def initialized(self) -> bool:
        return self._people is not None

    @property
    def people(self) -> Optional[List[Person]]:
        """The stored records, or ``None`` when the store is uninitialized."""
        if self._people is None:
            return None
        return list(self._people)

    def all(self) -> List[Person]:
        """Return every record in file order; empty when uninitialized."""
        if self._people is None:
            return []
        return list(self._people)

    def __len__(self) -> int:
        return len(self._people) if self._people is not None else 0

"""
Query service for person records.

Both protocol adapters (the REST router and the gRPC servicer) answer
their requests through a single :class:`PersonQueryService` instance,
so the lookup rules live in exactly one place.  The service only reads
from its :class:`PersonStore`; it performs no I/O and holds no mutable
state of its own.
"""

from __future__ import annotations

from typing import List, Optional

from people_service.app.schemas.person import Person
from people_service.app.services.person_store import PersonStore


class PersonQueryService:
    """Read-only queries over a :class:`PersonStore`."""

    def __init__(self, store: PersonStore) -> None:
        self.store = store

    def list_all(self) -> List[Person]:
        """Return all people in store order.

        Never returns ``None``: an empty or uninitialized store yields an
        empty list.
        """
        return self.store.all()

    def find_by_id(self, person_id: int) -> Optional[Person]:
        """Return the first person whose ``id`` equals ``person_id``.

        If the data file contains duplicate ids, the earliest record
        wins.  Returns ``None`` when nothing matches.
        """
        for person in self.store.all():
            if person.id == person_id:
                return person
        return None

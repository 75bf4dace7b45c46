"""
Service layer abstraction.

The record store owns the in-memory data loaded at startup and the
query service answers lookups against it.  API handlers for both
protocols depend on the query service only, so swapping the JSON file
for another source does not touch them.
"""

from people_service.app.services.person_service import PersonQueryService
from people_service.app.services.person_store import PersonStore, PersonStoreError

__all__ = ["PersonQueryService", "PersonStore", "PersonStoreError"]

"""
Person endpoints for API v1.

Two read-only routes expose the person records held in memory:

* ``GET /persons`` lists every record in file order;
* ``GET /persons/{person_id}/getbyid`` returns a single record.

For an unknown id the default response is ``null`` with status 200,
which is what existing clients expect.  Deployments that prefer an
explicit signal can set ``STRICT_NOT_FOUND`` to get a 404 instead.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status

from people_service.app.schemas.person import Person
from people_service.app.services.person_service import PersonQueryService

router = APIRouter()


def get_query_service(request: Request) -> PersonQueryService:
    """Return the query service attached to the application at startup."""
    return request.app.state.query_service


@router.get("", response_model=List[Person])
async def list_persons(
    service: PersonQueryService = Depends(get_query_service),
) -> List[Person]:
    """Return all people.  Always 200, with an empty array if there are none."""
    return service.list_all()


@router.get("/{person_id}/getbyid", response_model=Optional[Person])
async def get_person_by_id(
    person_id: int,
    request: Request,
    service: PersonQueryService = Depends(get_query_service),
) -> Optional[Person]:
    """Retrieve a single person by ID.

    Returns ``null`` when no person matches, or HTTP 404 if the
    application was created with ``strict_not_found`` enabled.
    """
    person = service.find_by_id(person_id)
    if person is None and request.app.state.strict_not_found:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Person not found")
    return person

# /dog_adoption/routers/dogs_router.py

import logging
from typing import NoReturn

from fastapi import APIRouter, Depends, HTTPException, Request, status

# Import the Pydantic models that define our API contract
from ..models.dog_model import AdoptionReport, DogDetailView

# Import the services that contain our business logic
from ..services.dog_detail_service import DogDetailSession
from ..services.dog_list_service import DogListResource, DogListService
from ..services.errors import IndexOutOfRange, InvalidState

logger = logging.getLogger(__name__)

router = APIRouter()


def get_dog_list_service(request: Request) -> DogListService:
    """FastAPI dependency that returns the service created by the app lifespan."""
    return request.app.state.dog_list_service


def _raise_for_state_error(e: InvalidState) -> NoReturn:
    if isinstance(e, IndexOutOfRange):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


def _require_resource(service: DogListService) -> DogListResource:
    resource = service.resource
    if resource is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="The dog list has not been loaded yet."
        )
    return resource


@router.get(
    "",  # Maps to /api/dogs
    response_model=DogListResource,
    summary="Get the Dog List",
    responses={503: {"description": "The dog list has not been requested yet"}}
)
def get_dogs(service: DogListService = Depends(get_dog_list_service)):
    """
    Returns the current state of the dog list: loading, success with the
    dogs in document order, or error with a message.
    """
    return _require_resource(service)


@router.post(
    "/reload",
    response_model=DogListResource,
    summary="Reload the Dog List"
)
async def reload_dogs(service: DogListService = Depends(get_dog_list_service)):
    """Reads the bundled dogs asset again and returns the outcome."""
    return await service.load()


@router.post(
    "/adoption-reports",
    response_model=DogListResource,
    summary="Apply a Detail View Result",
    responses={
        404: {"description": "Position out of range"},
        409: {"description": "Dogs not loaded"},
        503: {"description": "The dog list has not been requested yet"}
    }
)
def apply_adoption_report(
    report: AdoptionReport,
    service: DogListService = Depends(get_dog_list_service)
):
    """
    Applies the {position, adopted} result handed back by a detail view.
    A report with adopted=false leaves the list unchanged.
    """
    try:
        service.apply_adoption_report(report)
    except InvalidState as e:
        _raise_for_state_error(e)
    return _require_resource(service)


@router.get(
    "/{position}",
    response_model=DogDetailView,
    summary="Get a Dog's Detail",
    responses={404: {"description": "Position out of range"}, 409: {"description": "Dogs not loaded"}}
)
def get_dog_detail(position: int, service: DogListService = Depends(get_dog_list_service)):
    try:
        dog = service.get_dog(position)
    except InvalidState as e:
        _raise_for_state_error(e)
    return DogDetailSession(dog, position).to_view()


@router.post(
    "/{position}/adopt",
    response_model=DogDetailView,
    summary="Adopt a Dog",
    responses={404: {"description": "Position out of range"}, 409: {"description": "Dogs not loaded"}}
)
def adopt_dog(position: int, service: DogListService = Depends(get_dog_list_service)):
    """
    Runs the detail flow for one dog: open it, confirm adoption, and hand the
    result back to the list. Adopting an already adopted dog is a no-op.
    """
    try:
        session = DogDetailSession(service.get_dog(position), position)
        session.request_adoption()
        if session.show_confirm_dialog:
            session.confirm_adoption()
        report = session.close()
        service.apply_adoption_report(report)
    except InvalidState as e:
        _raise_for_state_error(e)
    logger.info("Adoption handled for position %d", position)
    return session.to_view()

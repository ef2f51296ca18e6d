"""
API routes - Inscription CRUD endpoints.

This module defines the HTTP endpoints:
- POST   /inscriptions       - Create an inscription
- GET    /inscriptions       - List inscriptions (optional ?search=)
- GET    /inscriptions/{id}  - Fetch one inscription
- PUT    /inscriptions/{id}  - Replace an inscription
- DELETE /inscriptions/{id}  - Delete an inscription

Failures are raised as domain exceptions and turned into JSON errors by
the handlers in src.api.errors.
"""

from fastapi import APIRouter, Depends, Query, Response, status

from src.api.dependencies import get_inscription_service
from src.api.models import ErrorResponse, InscriptionRequest, InscriptionResponse
from src.domain.inscription import InscriptionService

router = APIRouter(prefix="/inscriptions", tags=["inscriptions"])

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Inscription not found"}}
_INVALID_BODY = {400: {"model": ErrorResponse, "description": "Missing or empty field"}}
_SERVER_ERROR = {500: {"model": ErrorResponse, "description": "Storage failure"}}


@router.post(
    "",
    response_model=InscriptionResponse,
    status_code=status.HTTP_201_CREATED,
    responses={**_INVALID_BODY, **_SERVER_ERROR},
    summary="Create an inscription",
)
async def create_inscription(
    request_data: InscriptionRequest,
    service: InscriptionService = Depends(get_inscription_service),
) -> InscriptionResponse:
    """
    Create an inscription and return it as stored, including its generated id.

    - **name**, **contact**, **email**: required, non-empty
    """
    inscription = await service.create(request_data.name, request_data.contact, request_data.email)
    return InscriptionResponse.from_domain(inscription)


@router.get(
    "",
    response_model=list[InscriptionResponse],
    responses=_SERVER_ERROR,
    summary="List inscriptions",
)
async def list_inscriptions(
    search: str | None = Query(
        None, description="Substring matched against name, contact and email (case-insensitive)"
    ),
    service: InscriptionService = Depends(get_inscription_service),
) -> list[InscriptionResponse]:
    """List inscriptions, newest first."""
    inscriptions = await service.list_all(search)
    return [InscriptionResponse.from_domain(inscription) for inscription in inscriptions]


@router.get(
    "/{inscription_id}",
    response_model=InscriptionResponse,
    responses={**_NOT_FOUND, **_SERVER_ERROR},
    summary="Get an inscription",
)
async def get_inscription(
    inscription_id: int,
    service: InscriptionService = Depends(get_inscription_service),
) -> InscriptionResponse:
    inscription = await service.get(inscription_id)
    return InscriptionResponse.from_domain(inscription)


@router.put(
    "/{inscription_id}",
    response_model=InscriptionResponse,
    responses={**_INVALID_BODY, **_NOT_FOUND, **_SERVER_ERROR},
    summary="Update an inscription",
)
async def update_inscription(
    inscription_id: int,
    request_data: InscriptionRequest,
    service: InscriptionService = Depends(get_inscription_service),
) -> InscriptionResponse:
    """Replace name, contact and email. The id never changes."""
    inscription = await service.update(
        inscription_id, request_data.name, request_data.contact, request_data.email
    )
    return InscriptionResponse.from_domain(inscription)


@router.delete(
    "/{inscription_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={**_NOT_FOUND, **_SERVER_ERROR},
    summary="Delete an inscription",
)
async def delete_inscription(
    inscription_id: int,
    service: InscriptionService = Depends(get_inscription_service),
) -> Response:
    await service.delete(inscription_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

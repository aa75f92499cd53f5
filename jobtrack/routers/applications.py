"""API routes for job application records."""

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status

from jobtrack.core.exceptions import (
    ApplicationNotFoundError,
    UpstreamFetchError,
    bad_gateway_exception,
    not_found_exception,
)
from jobtrack.schemas.application import (
    IncompleteApplications,
    JobApplication,
    JobApplicationCreate,
    JobApplicationUpdate,
    NextIncompleteResponse,
    Suggestions,
)
from jobtrack.services.application_service import ApplicationService, AttachmentKind
from jobtrack.services.dependencies import get_application_service, get_current_user_id
from jobtrack.services.file_storage import FileStorage, get_file_storage

router = APIRouter(prefix="/applications", tags=["applications"])


@router.get("", response_model=list[JobApplication])
async def list_applications(
    user_id: str = Depends(get_current_user_id),
    service: ApplicationService = Depends(get_application_service),
):
    """List the user's applications, newest first."""
    try:
        return await service.list_applications(user_id)
    except UpstreamFetchError as e:
        raise bad_gateway_exception(e.message)


@router.post("", response_model=JobApplication, status_code=status.HTTP_201_CREATED)
async def create_application(
    request: JobApplicationCreate,
    user_id: str = Depends(get_current_user_id),
    service: ApplicationService = Depends(get_application_service),
):
    """Record a new job application."""
    try:
        return await service.create_application(user_id, request)
    except UpstreamFetchError as e:
        raise bad_gateway_exception(e.message)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/incomplete", response_model=IncompleteApplications)
async def list_incomplete(
    exclude_id: str | None = Query(default=None, description="Record being edited"),
    user_id: str = Depends(get_current_user_id),
    service: ApplicationService = Depends(get_application_service),
):
    """Applications that still miss data."""
    try:
        items = await service.incomplete_applications(user_id, exclude_id)
    except UpstreamFetchError as e:
        raise bad_gateway_exception(e.message)
    return IncompleteApplications(count=len(items), items=items)


@router.get("/incomplete/next", response_model=NextIncompleteResponse)
async def next_incomplete(
    exclude_id: str | None = Query(default=None, description="Record being edited"),
    user_id: str = Depends(get_current_user_id),
    service: ApplicationService = Depends(get_application_service),
):
    """The next application to backfill."""
    try:
        return await service.next_incomplete(user_id, exclude_id)
    except UpstreamFetchError as e:
        raise bad_gateway_exception(e.message)


@router.get("/suggestions", response_model=Suggestions)
async def suggestions(
    user_id: str = Depends(get_current_user_id),
    service: ApplicationService = Depends(get_application_service),
):
    """Autocomplete values for the application form."""
    try:
        return await service.suggestions(user_id)
    except UpstreamFetchError as e:
        raise bad_gateway_exception(e.message)


@router.get("/{application_id}", response_model=JobApplication)
async def get_application(
    application_id: str,
    user_id: str = Depends(get_current_user_id),
    service: ApplicationService = Depends(get_application_service),
):
    """Get one application."""
    try:
        return await service.get_application(user_id, application_id)
    except ApplicationNotFoundError as e:
        raise not_found_exception(e.message)
    except UpstreamFetchError as e:
        raise bad_gateway_exception(e.message)


@router.patch("/{application_id}", response_model=JobApplication)
async def update_application(
    application_id: str,
    request: JobApplicationUpdate,
    user_id: str = Depends(get_current_user_id),
    service: ApplicationService = Depends(get_application_service),
):
    """Update the fields sent in the request body."""
    try:
        return await service.update_application(user_id, application_id, request)
    except ApplicationNotFoundError as e:
        raise not_found_exception(e.message)
    except UpstreamFetchError as e:
        raise bad_gateway_exception(e.message)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.delete("/{application_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_application(
    application_id: str,
    user_id: str = Depends(get_current_user_id),
    service: ApplicationService = Depends(get_application_service),
):
    """Delete an application."""
    try:
        await service.delete_application(user_id, application_id)
    except ApplicationNotFoundError as e:
        raise not_found_exception(e.message)
    except UpstreamFetchError as e:
        raise bad_gateway_exception(e.message)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/{application_id}/attachments/{kind}", response_model=JobApplication)
async def upload_attachment(
    application_id: str,
    kind: AttachmentKind,
    request: Request,
    filename: str = Query(..., min_length=1, description="Original file name"),
    user_id: str = Depends(get_current_user_id),
    service: ApplicationService = Depends(get_application_service),
    storage: FileStorage = Depends(get_file_storage),
):
    """Upload a CV or cover letter as the raw request body."""
    content = await request.body()
    try:
        return await service.attach_file(
            user_id, application_id, kind, filename, content, storage
        )
    except ApplicationNotFoundError as e:
        raise not_found_exception(e.message)
    except UpstreamFetchError as e:
        raise bad_gateway_exception(e.message)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

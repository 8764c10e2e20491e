"""
Project endpoints for API v1.

CRUD over projects.  Request bodies are validated by the pydantic
schemas in ``app.schemas.project`` before the service is called; a
rejected body is answered with 400 and the full list of reasons by
the handler registered in ``app.main``.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from project_report_api.app.api.deps import get_project_service
from project_report_api.app.api.responses import ensure_id, error_responses, unwrap
from project_report_api.app.schemas.project import ProjectCreate, ProjectRead, ProjectUpdate
from project_report_api.app.services.project_service import ProjectService

router = APIRouter()


@router.get("", response_model=List[ProjectRead], responses=error_responses(401, 500))
async def list_projects(service: ProjectService = Depends(get_project_service)) -> List[ProjectRead]:
    """Return all projects in creation order."""
    return service.get_all()


@router.get("/{project_id}", response_model=ProjectRead, responses=error_responses(400, 401, 404, 500))
async def get_project(
    project_id: str,
    service: ProjectService = Depends(get_project_service),
) -> ProjectRead:
    """Retrieve a single project by its ID."""
    return unwrap(service.get_by_id(ensure_id(project_id)))


@router.post(
    "",
    response_model=ProjectRead,
    status_code=status.HTTP_201_CREATED,
    responses=error_responses(400, 401, 500),
)
async def create_project(
    project_in: ProjectCreate,
    service: ProjectService = Depends(get_project_service),
) -> ProjectRead:
    """Create a new project.

    ``name`` is required and must be a non‑empty string;
    ``description`` is optional and defaults to an empty string.
    """
    return service.create(project_in)


@router.put("/{project_id}", response_model=ProjectRead, responses=error_responses(400, 401, 404, 500))
async def update_project(
    project_id: str,
    project_in: ProjectUpdate,
    service: ProjectService = Depends(get_project_service),
) -> ProjectRead:
    """Update a project.

    At least one of ``name`` and ``description`` must be given; fields
    that are not provided keep their current values.
    """
    return unwrap(service.update(ensure_id(project_id), project_in))


@router.delete(
    "/{project_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=error_responses(400, 401, 404, 500),
)
async def delete_project(
    project_id: str,
    service: ProjectService = Depends(get_project_service),
) -> None:
    """Delete a project and all of its reports."""
    unwrap(service.delete(ensure_id(project_id)))
    return None

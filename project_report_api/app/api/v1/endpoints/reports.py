"""
Report endpoints for API v1.

Reports are created and listed through their owning project
(``/reports/project/{project_id}``) and read, updated or deleted by
their own id.  ``/reports/special`` runs the special search; it is
declared before ``/{report_id}`` so that the literal path wins.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from project_report_api.app.api.deps import get_report_service
from project_report_api.app.api.responses import ensure_id, error_responses, unwrap
from project_report_api.app.schemas.report import ReportCreate, ReportRead, ReportUpdate
from project_report_api.app.services.report_service import ReportService

router = APIRouter()


@router.get(
    "/project/{project_id}",
    response_model=List[ReportRead],
    responses=error_responses(400, 401, 404, 500),
)
async def list_reports_for_project(
    project_id: str,
    service: ReportService = Depends(get_report_service),
) -> List[ReportRead]:
    """Return all reports of a project; 404 if the project does not exist."""
    return unwrap(service.get_by_project(ensure_id(project_id)))


@router.post(
    "/project/{project_id}",
    response_model=ReportRead,
    status_code=status.HTTP_201_CREATED,
    responses=error_responses(400, 401, 404, 500),
)
async def create_report(
    project_id: str,
    report_in: ReportCreate,
    service: ReportService = Depends(get_report_service),
) -> ReportRead:
    """Create a report for an existing project."""
    return unwrap(service.create(ensure_id(project_id), report_in))


@router.get("/special", response_model=List[ReportRead], responses=error_responses(401, 404, 500))
async def special_search(service: ReportService = Depends(get_report_service)) -> List[ReportRead]:
    """Return reports in which a single word is repeated at least three times.

    The threshold is configurable through ``SPECIAL_SEARCH_MIN_REPEATS``.
    Responds with 404 when no report matches.
    """
    return unwrap(service.special_search())


@router.get("/{report_id}", response_model=ReportRead, responses=error_responses(400, 401, 404, 500))
async def get_report(
    report_id: str,
    service: ReportService = Depends(get_report_service),
) -> ReportRead:
    return unwrap(service.get_by_id(ensure_id(report_id)))


@router.put("/{report_id}", response_model=ReportRead, responses=error_responses(400, 401, 404, 500))
async def update_report(
    report_id: str,
    report_in: ReportUpdate,
    service: ReportService = Depends(get_report_service),
) -> ReportRead:
    """Replace the text of a report."""
    return unwrap(service.update(ensure_id(report_id), report_in))


@router.delete(
    "/{report_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=error_responses(400, 401, 404, 500),
)
async def delete_report(
    report_id: str,
    service: ReportService = Depends(get_report_service),
) -> None:
    unwrap(service.delete(ensure_id(report_id)))
    return None

"""
Top‑level router for version 1 of the API.

This router aggregates the project and report routers under a unified
prefix.  Every route it contains requires the shared API token.
"""

from fastapi import APIRouter, Depends

from project_report_api.app.core.security import require_api_token

from .endpoints import projects, reports

router = APIRouter(dependencies=[Depends(require_api_token)])

router.include_router(projects.router, prefix="/projects", tags=["Projects"])
router.include_router(reports.router, prefix="/reports", tags=["Reports"])

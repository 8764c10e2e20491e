"""
Dependencies shared by the API routers.

The services of an application instance live on ``app.state.services``
(set up by ``create_app``); these helpers hand them to route handlers
via ``Depends`` so handlers never touch global state.
"""

from fastapi import Request

from ..services import Services
from ..services.project_service import ProjectService
from ..services.report_service import ReportService


def get_services(request: Request) -> Services:
    return request.app.state.services


def get_project_service(request: Request) -> ProjectService:
    return get_services(request).projects


def get_report_service(request: Request) -> ReportService:
    return get_services(request).reports

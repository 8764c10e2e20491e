"""
Service layer abstraction.

Each service encapsulates business logic for a domain and works
against an explicitly injected :class:`~project_report_api.app.core.store.Database`
instead of process-wide state, so every application instance (and
every test) gets its own isolated data.
"""

from dataclasses import dataclass
from typing import Optional

from ..core.store import Database
from .project_service import ProjectService
from .report_service import ReportService


@dataclass
class Services:
    """The services of one application instance, sharing one database."""

    db: Database
    projects: ProjectService
    reports: ReportService


def build_services(db: Optional[Database] = None) -> Services:
    db = db or Database()
    projects = ProjectService(db)
    reports = ReportService(db, projects)
    return Services(db=db, projects=projects, reports=reports)

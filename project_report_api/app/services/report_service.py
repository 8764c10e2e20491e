"""
Service layer for reports.

Reports belong to a project: creating or listing reports for a project
that does not exist yields :class:`ProjectNotFoundError`.  The project
existence check and the insert happen under one acquisition of the
database lock, so a project deleted concurrently can never end up with
a freshly created orphan report.  When a project is deleted its reports
are removed through the cascade registered with ``ProjectService``.

The special search returns reports in which some word is repeated at
least ``min_repeats`` times (case‑insensitive).  An empty match set is
reported as :class:`NoReportsFoundError`, never as an empty list.
"""

import logging
import re
from collections import Counter
from typing import List, Optional

from ..core.config import settings
from ..core.errors import NoReportsFoundError, NotFoundError, ProjectNotFoundError, ReportNotFoundError
from ..core.result import Result
from ..core.store import Database
from ..schemas.report import ReportCreate, ReportRead, ReportUpdate
from .project_service import ProjectService

logger = logging.getLogger(__name__)

WORD_RE = re.compile(r"[^\W_]+(?:'[^\W_]+)*")


def most_repeated_word_count(text: str) -> int:
    """Return how often the most frequent word occurs in ``text``."""
    counts = Counter(word.casefold() for word in WORD_RE.findall(text))
    if not counts:
        return 0
    return max(counts.values())


class ReportService:
    """Service for managing reports attached to projects."""

    def __init__(self, db: Database, projects: ProjectService, min_repeats: Optional[int] = None) -> None:
        self.db = db
        self.projects = projects
        self.min_repeats = min_repeats if min_repeats is not None else settings.special_search_min_repeats
        projects.add_delete_cascade(self.delete_by_project)

    def get_by_project(self, project_id: str) -> Result[List[ReportRead], ProjectNotFoundError]:
        """Return the reports of a project in creation order."""
        with self.db.lock:
            if not self.projects.exists(project_id):
                return Result.failure(ProjectNotFoundError())
            records = self.db.reports.filter(lambda r: r["project_id"] == project_id)
        return Result.success([self._to_read(record) for record in records])

    def get_by_id(self, report_id: str) -> Result[ReportRead, ReportNotFoundError]:
        with self.db.lock:
            record = self.db.reports.get(report_id)
        if record is None:
            return Result.failure(ReportNotFoundError())
        return Result.success(self._to_read(record))

    def create(self, project_id: str, data: ReportCreate) -> Result[ReportRead, ProjectNotFoundError]:
        with self.db.lock:
            if not self.projects.exists(project_id):
                logger.info("Refused report for unknown project %s", project_id)
                return Result.failure(ProjectNotFoundError())
            record = self.db.reports.insert({"project_id": project_id, "text": data.text})
        logger.info("Created report %s for project %s", record["id"], project_id)
        return Result.success(self._to_read(record))

    def update(self, report_id: str, data: ReportUpdate) -> Result[ReportRead, ReportNotFoundError]:
        with self.db.lock:
            record = self.db.reports.update(report_id, {"text": data.text})
        if record is None:
            return Result.failure(ReportNotFoundError())
        logger.info("Updated report %s", report_id)
        return Result.success(self._to_read(record))

    def delete(self, report_id: str) -> Result[None, NotFoundError]:
        with self.db.lock:
            deleted = self.db.reports.delete(report_id)
        if not deleted:
            return Result.failure(ReportNotFoundError())
        logger.info("Deleted report %s", report_id)
        return Result.success()

    def delete_by_project(self, project_id: str) -> int:
        """Remove every report of ``project_id`` and return how many were removed."""
        with self.db.lock:
            ids = [r["id"] for r in self.db.reports.filter(lambda r: r["project_id"] == project_id)]
            for report_id in ids:
                self.db.reports.delete(report_id)
        return len(ids)

    def special_search(self) -> Result[List[ReportRead], NoReportsFoundError]:
        with self.db.lock:
            records = self.db.reports.filter(
                lambda r: most_repeated_word_count(r["text"]) >= self.min_repeats
            )
        if not records:
            return Result.failure(NoReportsFoundError())
        return Result.success([self._to_read(record) for record in records])

    @staticmethod
    def _to_read(record: dict) -> ReportRead:
        return ReportRead(id=record["id"], project_id=record["project_id"], text=record["text"])

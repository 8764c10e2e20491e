"""
Business logic for projects.

``ProjectService`` owns the project store of a :class:`Database` and is
the only component that creates project ids.  Lookups and mutations
return a :class:`Result`; a missing project is reported as
:class:`ProjectNotFoundError` rather than raised.

Other services that keep records tied to a project register a cascade
callback with :meth:`ProjectService.add_delete_cascade`; the callbacks
run under the database lock when a project is deleted.
"""

import logging
from typing import Callable, List

from ..core.errors import ProjectNotFoundError
from ..core.result import Result
from ..core.store import Database
from ..schemas.project import ProjectCreate, ProjectRead, ProjectUpdate

logger = logging.getLogger(__name__)


class ProjectService:
    """Service for managing projects."""

    def __init__(self, db: Database) -> None:
        self.db = db
        self._delete_cascades: List[Callable[[str], int]] = []

    def add_delete_cascade(self, callback: Callable[[str], int]) -> None:
        """Run ``callback(project_id)`` whenever a project is deleted."""
        self._delete_cascades.append(callback)

    def exists(self, project_id: str) -> bool:
        with self.db.lock:
            return project_id in self.db.projects

    def get_all(self) -> List[ProjectRead]:
        """Return every project in insertion order."""
        with self.db.lock:
            return [self._to_read(record) for record in self.db.projects.all()]

    def get_by_id(self, project_id: str) -> Result[ProjectRead, ProjectNotFoundError]:
        with self.db.lock:
            record = self.db.projects.get(project_id)
        if record is None:
            return Result.failure(ProjectNotFoundError())
        return Result.success(self._to_read(record))

    def create(self, data: ProjectCreate) -> ProjectRead:
        with self.db.lock:
            record = self.db.projects.insert(
                {"name": data.name, "description": data.description}
            )
        logger.info("Created project %s", record["id"])
        return self._to_read(record)

    def update(self, project_id: str, data: ProjectUpdate) -> Result[ProjectRead, ProjectNotFoundError]:
        """Overwrite the fields set in ``data``; other fields are kept."""
        changes = {k: v for k, v in data.model_dump().items() if v is not None}
        with self.db.lock:
            record = self.db.projects.update(project_id, changes)
        if record is None:
            return Result.failure(ProjectNotFoundError())
        logger.info("Updated project %s (%s)", project_id, ", ".join(sorted(changes)))
        return Result.success(self._to_read(record))

    def delete(self, project_id: str) -> Result[None, ProjectNotFoundError]:
        """Delete a project together with everything registered as dependent on it."""
        with self.db.lock:
            if project_id not in self.db.projects:
                return Result.failure(ProjectNotFoundError())
            removed = sum(cascade(project_id) for cascade in self._delete_cascades)
            self.db.projects.delete(project_id)
        logger.info("Deleted project %s (%d dependent records removed)", project_id, removed)
        return Result.success()

    @staticmethod
    def _to_read(record: dict) -> ProjectRead:
        return ProjectRead(
            id=record["id"],
            name=record["name"],
            description=record["description"],
        )

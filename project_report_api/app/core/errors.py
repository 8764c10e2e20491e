"""Service error taxonomy.

Services never raise these for expected failures; they return them as
the error side of a :class:`~project_report_api.app.core.result.Result`
so every failure path is visible to the caller.  The HTTP layer maps
each kind to a status code in ``api/responses.py``.
"""

from typing import List, Optional


class ServiceError(Exception):
    """Base class for all service-layer failures."""

    default_message = "Service error"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class NotFoundError(ServiceError):
    """The requested entity does not exist."""

    default_message = "Not found"


class ProjectNotFoundError(NotFoundError):
    default_message = "No Project Found with the given ID"


class ReportNotFoundError(NotFoundError):
    default_message = "No Report Found with the given ID"


class NoReportsFoundError(NotFoundError):
    """A report query matched nothing."""

    default_message = "No reports found"


class ValidationFailedError(ServiceError):
    """Input was malformed; ``reasons`` lists every problem found."""

    default_message = "Validation failed"

    def __init__(self, reasons: List[str]) -> None:
        super().__init__("; ".join(reasons) or self.default_message)
        self.reasons = list(reasons)


class InternalError(ServiceError):
    default_message = "INTERNAL SERVER ERROR OCCURRED"

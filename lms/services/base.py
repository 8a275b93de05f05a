"""
Shared plumbing for the per-role services.
"""

from typing import Callable, List

import structlog

from ..core.entities import Course, User
from ..core.enums import Role
from ..core.exceptions import InvalidIndexError, LMSException
from ..core.validators import is_valid_index
from ..persistence.registry import Registry
from .results import OperationResult
from .schemas import CourseSummary

logger = structlog.get_logger(__name__)


class RoleService:
    """Operations available to one logged-in user.

    Subclasses set ``role``; the session table in ``auth_service`` maps each
    role to its service class.
    """

    role: Role

    def __init__(self, registry: Registry, user: User):
        self._registry = registry
        self._user = user
        self._log = logger.bind(actor=user.email, role=self.role.value)

    @property
    def user(self) -> User:
        return self._user

    @property
    def email(self) -> str:
        return self._user.email

    def _run(self, operation: str, action: Callable[[], OperationResult]) -> OperationResult:
        """Run ``action`` under the registry lock, translating core errors."""
        with self._registry.transaction():
            try:
                result = action()
            except LMSException as e:
                self._log.warning("operation_failed", operation=operation,
                                  error_code=e.error_code, reason=e.message, details=e.details)
                return OperationResult.failed(e)
        self._log.info("operation_succeeded", operation=operation)
        return result

    def _view(self, courses: List[Course]) -> List[CourseSummary]:
        return [CourseSummary.from_course(i, course) for i, course in enumerate(courses)]

    def _resolve(self, view: List[Course], index: int) -> Course:
        """Map an index into a filtered view back to the registry's course."""
        if not is_valid_index(index, len(view)):
            raise InvalidIndexError(details={'index': index, 'size': len(view)})
        return self._registry.find_course(view[index].id)

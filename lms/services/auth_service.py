"""
Login and role dispatch.
"""

from typing import Dict, Type, Union

import structlog

from ..core.entities import User
from ..core.enums import Role
from ..core.exceptions import AuthError
from ..persistence.registry import Registry
from .admin_service import AdminService
from .base import RoleService
from .student_service import StudentService
from .teacher_service import TeacherService

logger = structlog.get_logger(__name__)

Session = Union[AdminService, TeacherService, StudentService]

SESSION_TYPES: Dict[Role, Type[RoleService]] = {
    Role.ADMIN: AdminService,
    Role.TEACHER: TeacherService,
    Role.STUDENT: StudentService,
}


class AuthService:
    """Resolves credentials to a user and opens the session for its role."""

    def __init__(self, registry: Registry):
        self._registry = registry

    def login(self, email: str, password: str) -> Session:
        try:
            user = self._registry.authenticate(email, password)
        except AuthError:
            logger.warning("login_failed", email=email)
            raise
        logger.info("login_succeeded", email=email, role=user.role.value)
        return self.dispatch(user)

    def dispatch(self, user: User) -> Session:
        """Open the session object for ``user``'s role."""
        return SESSION_TYPES[user.role](self._registry, user)

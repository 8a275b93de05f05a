"""
Services module containing the role-scoped operations.
"""

from .results import OperationResult, TeacherRegistration
from .base import RoleService
from .admin_service import AdminService
from .teacher_service import TeacherService
from .student_service import StudentService
from .auth_service import AuthService, Session, SESSION_TYPES

__all__ = [
    "OperationResult",
    "TeacherRegistration",
    "RoleService",
    "AdminService",
    "TeacherService",
    "StudentService",
    "AuthService",
    "Session",
    "SESSION_TYPES",
]

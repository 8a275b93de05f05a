"""
Result values returned by role operations.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ..core.exceptions import LMSException


@dataclass
class OperationResult:
    """Result of a role operation."""
    success: bool
    message: str
    error_code: Optional[str] = None
    data: Any = None
    details: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def ok(cls, message: str, data: Any = None) -> "OperationResult":
        return cls(success=True, message=message, data=data)

    @classmethod
    def failed(cls, error: LMSException) -> "OperationResult":
        return cls(success=False, message=error.message, error_code=error.error_code,
                   details=dict(error.details))

    def __bool__(self) -> bool:
        return self.success


@dataclass
class TeacherRegistration:
    """Details for registering a missing teacher while adding a course."""
    username: str
    password: str

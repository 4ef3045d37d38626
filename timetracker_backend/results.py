"""Uniform return value for service operations.

Services never raise for expected failures. They hand back a
``ServiceResult`` that tells the caller whether the operation succeeded and,
if not, whether it failed on field validation or on a general reason
(not found, unauthorized, business rule).
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

KIND_OK = 'ok'
KIND_VALIDATION = 'validation'
KIND_NOT_FOUND = 'not_found'
KIND_UNAUTHORIZED = 'unauthorized'
KIND_BUSINESS_RULE = 'business_rule'

VALIDATION_FAILED = 'Validation failed'


@dataclass
class ServiceResult:
    success: bool
    data: Any = None
    kind: str = KIND_OK
    errors: List[str] = field(default_factory=list)
    messages: List[str] = field(default_factory=list)
    validation_errors: Dict[str, List[str]] = field(default_factory=dict)

    @classmethod
    def ok(cls, data=None, message: Optional[str] = None) -> 'ServiceResult':
        return cls(success=True, data=data, messages=[message] if message else [])

    @classmethod
    def failure(cls, *errors: str, kind: str = KIND_BUSINESS_RULE) -> 'ServiceResult':
        return cls(success=False, kind=kind, errors=list(errors))

    @classmethod
    def not_found(cls, error: str) -> 'ServiceResult':
        return cls.failure(error, kind=KIND_NOT_FOUND)

    @classmethod
    def unauthorized(cls, error: str = 'Unauthorized access') -> 'ServiceResult':
        return cls.failure(error, kind=KIND_UNAUTHORIZED)

    @classmethod
    def validation_failure(cls, validation_errors) -> 'ServiceResult':
        """Build a validation failure from a DRF ``serializer.errors`` mapping."""
        return cls(
            success=False,
            kind=KIND_VALIDATION,
            errors=[VALIDATION_FAILED],
            validation_errors=flatten_errors(validation_errors),
        )

    @property
    def message(self) -> Optional[str]:
        return self.messages[0] if self.messages else None

    @property
    def error(self) -> Optional[str]:
        return self.errors[0] if self.errors else None


def flatten_errors(errors) -> Dict[str, List[str]]:
    """Turn serializer ``ErrorDetail`` structures into plain strings."""
    flattened = {}
    for name, details in dict(errors).items():
        if isinstance(details, (list, tuple)):
            flattened[name] = [str(detail) for detail in details]
        else:
            flattened[name] = [str(details)]
    return flattened

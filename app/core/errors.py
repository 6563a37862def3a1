from dataclasses import dataclass, field
from enum import Enum


class ErrorCategory(str, Enum):
    INVALID_IDENTIFIER = "invalid_identifier"
    VALIDATION_FAILED = "validation_failed"
    EMPTY_UPDATE = "empty_update"
    UNEXPECTED = "unexpected"


ERROR_MESSAGES = {
    "INVALID_JSON": "Invalid JSON",
    "INTERNAL_SERVER_ERROR": "Internal Server Error",
    "NOT_FOUND": "Not Found",
    "METHOD_NOT_ALLOWED": "Method Not Allowed",
    "VALIDATION_FAILED": "Validation failed",
    "INVALID_ID": "Invalid memo ID",
    "EMPTY_UPDATE": "No fields to update",
}


@dataclass
class ValidationIssue:
    """Single rule violation, addressed by a dotted field path"""
    path: str
    message: str
    code: str = "custom"

    def to_dict(self) -> dict[str, str]:
        return {"path": self.path, "code": self.code, "message": self.message}


class MemoError(Exception):
    """Base class for failures a caller is expected to handle"""
    category: ErrorCategory = ErrorCategory.UNEXPECTED

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class SchemaViolationError(MemoError):
    """Raised when untyped input does not satisfy a schema rule"""

    def __init__(self, message: str, issues: list[ValidationIssue] | None = None) -> None:
        super().__init__(message)
        self.issues: list[ValidationIssue] = issues or []


class InvalidIdentifierError(SchemaViolationError):
    category = ErrorCategory.INVALID_IDENTIFIER

    def __init__(self, issues: list[ValidationIssue] | None = None) -> None:
        super().__init__(ERROR_MESSAGES["INVALID_ID"], issues)


class ValidationFailedError(SchemaViolationError):
    category = ErrorCategory.VALIDATION_FAILED

    def __init__(self, issues: list[ValidationIssue] | None = None) -> None:
        super().__init__(ERROR_MESSAGES["VALIDATION_FAILED"], issues)


class EmptyUpdateError(ValidationFailedError):
    """Raised when an update patch carries no fields"""
    category = ErrorCategory.EMPTY_UPDATE

    def __init__(self) -> None:
        super().__init__([ValidationIssue(path="", message=ERROR_MESSAGES["EMPTY_UPDATE"])])

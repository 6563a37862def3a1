import re
from typing import Any

from pydantic import BaseModel, ValidationError

from app.core.errors import (
    EmptyUpdateError,
    InvalidIdentifierError,
    ValidationFailedError,
    ValidationIssue,
)
from app.models.memo.models import ListArgs, MemoCreate, MemoUpdate
from app.models.memo.requests import CreateMemoRequest, ListMemosQuery, UpdateMemoRequest
from app.services.id_generator import MEMO_ID_LENGTH


MEMO_ID_PATTERN = re.compile(rf"[A-Za-z0-9_-]{{{MEMO_ID_LENGTH}}}")


def _issues_from(error: ValidationError) -> list[ValidationIssue]:
    return [
        ValidationIssue(
            path=".".join(str(part) for part in issue["loc"]),
            message=issue["msg"],
            code=issue["type"],
        )
        for issue in error.errors()
    ]


def _parse[M: BaseModel](model: type[M], raw: Any) -> M:
    try:
        return model.model_validate(raw)
    except ValidationError as e:
        raise ValidationFailedError(_issues_from(e)) from e


def validate_memo_id(raw: Any) -> str:
    """
    Check that ``raw`` is a 21-character URL-safe memo ID.
    
    Raises:
        InvalidIdentifierError: If the value is not a string or has the wrong shape
    """
    if not isinstance(raw, str) or MEMO_ID_PATTERN.fullmatch(raw) is None:
        raise InvalidIdentifierError([ValidationIssue(path="id", message="Invalid NanoID format", code="invalid_string")])
    return raw


def validate_memo_create(raw: Any) -> MemoCreate:
    """
    Validate and normalize a creation payload.
    
    Raises:
        ValidationFailedError: If title/body are missing, not strings, empty after trimming or too long
    """
    request = _parse(CreateMemoRequest, raw)
    return MemoCreate(title=request.title, body=request.body)


def validate_memo_update(raw: Any) -> MemoUpdate:
    """
    Validate and normalize an update patch. Only keys present in ``raw`` count as provided.
    
    Raises:
        ValidationFailedError: If a provided field is null or violates the field rules
        EmptyUpdateError: If no field is left to update
    """
    request = _parse(UpdateMemoRequest, raw)
    fields = request.model_dump(exclude_unset=True)
    if not fields:
        raise EmptyUpdateError()
    return MemoUpdate(**fields)


def validate_list_query(raw: Any) -> ListArgs:
    """
    Validate list parameters, coercing numeric strings.
    
    Absent parameters are omitted from the result rather than defaulted.
    
    Raises:
        ValidationFailedError: If page/limit are not positive integers
    """
    request = _parse(ListMemosQuery, raw if raw is not None else {})
    return ListArgs(**request.model_dump(exclude_unset=True))

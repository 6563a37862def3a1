from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class MemoResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
    
    id: str = Field(..., description="21-character URL-safe memo ID")
    title: str
    body: str
    created_at: datetime = Field(..., description="When the memo was created (UTC)")
    updated_at: datetime = Field(..., description="When the memo was last updated (UTC)")
    version: int = Field(..., ge=1, description="Incremented by one on every update")


class MemoListResponse(BaseModel):
    data: list[MemoResponse]
    total: int = Field(..., description="Number of matching memos before pagination")
    page: int
    limit: int


class ErrorDetail(BaseModel):
    path: str
    code: str
    message: str


class ErrorResponse(BaseModel):
    error: str
    details: list[ErrorDetail] | None = None

from dataclasses import dataclass
from datetime import datetime
from typing import TypedDict

from app.models.memo.responses import MemoListResponse, MemoResponse


@dataclass(frozen=True)
class Memo:
    id: str
    title: str
    body: str
    created_at: datetime
    updated_at: datetime
    version: int

    def to_response(self) -> MemoResponse:
        return MemoResponse(
            id=self.id,
            title=self.title,
            body=self.body,
            created_at=self.created_at,
            updated_at=self.updated_at,
            version=self.version,
        )


@dataclass(frozen=True)
class MemoCreate:
    title: str
    body: str


@dataclass(frozen=True)
class MemoUpdate:
    title: str | None = None
    body: str | None = None


class ListArgs(TypedDict, total=False):
    """Normalized list parameters; absent keys are left to repository defaults"""
    page: int
    limit: int
    query: str


@dataclass
class MemoPage:
    data: list[Memo]
    total: int
    page: int
    limit: int

    def to_response(self) -> MemoListResponse:
        return MemoListResponse(
            data=[memo.to_response() for memo in self.data],
            total=self.total,
            page=self.page,
            limit=self.limit,
        )

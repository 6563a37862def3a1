import math
import threading
from dataclasses import replace
from datetime import datetime, timezone
from typing import Callable

from app.models.memo.models import Memo, MemoCreate, MemoPage, MemoUpdate
from app.services.id_generator import IdGenerator, generate_memo_id


DEFAULT_PAGE = 1
DEFAULT_LIMIT = 20
MAX_LIMIT = 100

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _bound(value: float | None, default: int) -> int:
    # NaN and infinities are treated as absent
    if value is None or not math.isfinite(value):
        return default
    return math.floor(value)


def _matches_query(memo: Memo, needle: str) -> bool:
    return needle in memo.title.lower() or needle in memo.body.lower()


class InMemoryMemoRepo:
    """Repository for memos, kept in an insertion-ordered dict
    
    Stored memos are immutable snapshots; every mutation swaps the snapshot
    under a single lock, so readers never see a half-applied update.
    """
    
    def __init__(self, id_gen: IdGenerator = generate_memo_id, clock: Clock = utc_now) -> None:
        self._id_gen = id_gen
        self._clock = clock
        self._memos: dict[str, Memo] = {}
        self._lock = threading.RLock()
    
    def list(
        self,
        page: float | None = None,
        limit: float | None = None,
        query: str | None = None,
    ) -> MemoPage:
        """List memos in insertion order, optionally filtered, one page at a time"""
        page = max(1, _bound(page, DEFAULT_PAGE))
        limit = min(MAX_LIMIT, max(1, _bound(limit, DEFAULT_LIMIT)))
        needle = query.strip().lower() if query else ""
        
        with self._lock:
            rows = list(self._memos.values())
        
        if needle:
            rows = [memo for memo in rows if _matches_query(memo, needle)]
        
        start = (page - 1) * limit
        return MemoPage(
            data=rows[start:start + limit],
            total=len(rows),
            page=page,
            limit=limit,
        )
    
    def get(self, memo_id: str) -> Memo | None:
        with self._lock:
            return self._memos.get(memo_id)
    
    def create(self, data: MemoCreate) -> Memo:
        with self._lock:
            now = self._clock()
            memo = Memo(
                id=self._id_gen(),
                title=data.title,
                body=data.body,
                created_at=now,
                updated_at=now,
                version=1,
            )
            self._memos[memo.id] = memo
            return memo
    
    def update(self, memo_id: str, patch: MemoUpdate) -> Memo | None:
        """Apply a patch and bump the version; returns None if the memo does not exist"""
        with self._lock:
            existing = self._memos.get(memo_id)
            if existing is None:
                return None
            
            updated = replace(
                existing,
                title=patch.title if patch.title is not None else existing.title,
                body=patch.body if patch.body is not None else existing.body,
                # A clock that runs backwards must not break created_at <= updated_at
                updated_at=max(self._clock(), existing.created_at),
                version=existing.version + 1,
            )
            # Reassigning an existing key keeps its position in the ordering
            self._memos[memo_id] = updated
            return updated
    
    def delete(self, memo_id: str) -> bool:
        with self._lock:
            return self._memos.pop(memo_id, None) is not None
    
    def clear(self) -> None:
        """Remove all memos. Intended for test fixtures only."""
        with self._lock:
            self._memos.clear()
    
    def count(self) -> int:
        with self._lock:
            return len(self._memos)

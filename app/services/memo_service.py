import logging
from typing import Any

from app.db.memo_repo import InMemoryMemoRepo
from app.models.memo.models import Memo, MemoPage
from app.models.memo.validation import validate_memo_create, validate_memo_update


logger = logging.getLogger(__name__)


class MemoService:
    """Validate-then-delegate entry point for untrusted callers
    
    ``create`` and ``update`` accept raw payloads and run them through the
    schema rules; validation errors propagate unchanged. Identifiers and list
    parameters are expected to be validated by the caller.
    """
    
    def __init__(self, memo_repo: InMemoryMemoRepo) -> None:
        self._memo_repo = memo_repo
    
    async def list(self, page: int | None = None, limit: int | None = None, query: str | None = None) -> MemoPage:
        return self._memo_repo.list(page=page, limit=limit, query=query)
    
    async def get(self, memo_id: str) -> Memo | None:
        return self._memo_repo.get(memo_id)
    
    async def create(self, raw: Any) -> Memo:
        data = validate_memo_create(raw)
        memo = self._memo_repo.create(data)
        logger.info("Created memo %s", memo.id)
        return memo
    
    async def update(self, memo_id: str, raw: Any) -> Memo | None:
        patch = validate_memo_update(raw)
        memo = self._memo_repo.update(memo_id, patch)
        if memo is not None:
            logger.info("Updated memo %s to version %d", memo.id, memo.version)
        return memo
    
    async def delete(self, memo_id: str) -> bool:
        deleted = self._memo_repo.delete(memo_id)
        if deleted:
            logger.info("Deleted memo %s", memo_id)
        return deleted

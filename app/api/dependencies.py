from typing import Annotated

from fastapi import Depends

from app.db.memo_repo import InMemoryMemoRepo
from app.services.memo_service import MemoService

# Singleton instances
_memo_repo_instance = InMemoryMemoRepo()
_memo_service_instance = MemoService(_memo_repo_instance)


def get_memo_repo() -> InMemoryMemoRepo:
    """Get the singleton InMemoryMemoRepo instance"""
    return _memo_repo_instance


def get_memo_service() -> MemoService:
    """Get the singleton MemoService instance"""
    return _memo_service_instance


# Type annotations for dependencies
MemoRepoDep = Annotated[InMemoryMemoRepo, Depends(get_memo_repo)]
MemoServiceDep = Annotated[MemoService, Depends(get_memo_service)]

from datetime import datetime, timedelta, timezone
from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from app.api.dependencies import get_memo_repo, get_memo_service
from app.db.memo_repo import InMemoryMemoRepo
from app.services.memo_service import MemoService
from main import app


START_2025 = datetime(2025, 1, 1, tzinfo=timezone.utc)


class SequentialIds:
    """Deterministic ID generator yielding zero-padded 21-digit IDs: 000...001, 000...002, ..."""
    
    def __init__(self) -> None:
        self.calls = 0
    
    def __call__(self) -> str:
        self.calls += 1
        return f"{self.calls:021d}"


class FakeClock:
    def __init__(self, now: datetime = START_2025) -> None:
        self.now = now
    
    def __call__(self) -> datetime:
        return self.now
    
    def advance(self, **kwargs: float) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def repo(clock: FakeClock) -> InMemoryMemoRepo:
    return InMemoryMemoRepo(id_gen=SequentialIds(), clock=clock)


@pytest.fixture
def service(repo: InMemoryMemoRepo) -> MemoService:
    return MemoService(repo)


@pytest.fixture
def client(repo: InMemoryMemoRepo, service: MemoService) -> Iterator[TestClient]:
    app.dependency_overrides[get_memo_repo] = lambda: repo
    app.dependency_overrides[get_memo_service] = lambda: service
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()

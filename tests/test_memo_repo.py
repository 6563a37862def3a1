"""Tests for the in-memory memo repository."""

import threading
from datetime import timedelta

import pytest

from app.db.memo_repo import DEFAULT_LIMIT, MAX_LIMIT, InMemoryMemoRepo
from app.models.memo.models import MemoCreate, MemoUpdate
from tests.conftest import START_2025, FakeClock


def _seed(repo: InMemoryMemoRepo, count: int) -> None:
    for index in range(count):
        repo.create(MemoCreate(title=f"title-{index}", body=f"body-{index}"))


class TestCreateAndGet:
    def test_create_uses_injected_id_and_clock(self, repo: InMemoryMemoRepo):
        memo = repo.create(MemoCreate(title="Test title", body="Test body"))

        assert memo.id == "0" * 20 + "1"
        assert memo.title == "Test title"
        assert memo.body == "Test body"
        assert memo.version == 1
        assert memo.created_at == START_2025
        assert memo.updated_at == memo.created_at

    def test_get_returns_created_record(self, repo: InMemoryMemoRepo):
        memo = repo.create(MemoCreate(title="Test title", body="Test body"))
        assert repo.get(memo.id) == memo

    def test_get_missing_returns_none(self, repo: InMemoryMemoRepo):
        assert repo.get("9" * 21) is None

    def test_default_generators(self):
        repo = InMemoryMemoRepo()
        memo = repo.create(MemoCreate(title="T", body="B"))
        assert len(memo.id) == 21
        assert memo.created_at.tzinfo is not None


class TestList:
    def test_pagination_in_insertion_order(self, repo: InMemoryMemoRepo):
        _seed(repo, 5)

        page1 = repo.list(page=1, limit=2)
        assert page1.total == 5
        assert page1.page == 1
        assert page1.limit == 2
        assert [m.title for m in page1.data] == ["title-0", "title-1"]

        assert [m.title for m in repo.list(page=2, limit=2).data] == ["title-2", "title-3"]
        assert [m.title for m in repo.list(page=3, limit=2).data] == ["title-4"]

        page4 = repo.list(page=4, limit=2)
        assert page4.data == []
        assert page4.total == 5

    def test_defaults(self, repo: InMemoryMemoRepo):
        _seed(repo, 25)
        result = repo.list()
        assert result.page == 1
        assert result.limit == DEFAULT_LIMIT
        assert len(result.data) == DEFAULT_LIMIT
        assert result.total == 25

    def test_bounds_are_clamped(self, repo: InMemoryMemoRepo):
        _seed(repo, 3)
        clamped = repo.list(page=-5, limit=9999)
        explicit = repo.list(page=1, limit=MAX_LIMIT)
        assert clamped == explicit
        assert clamped.page == 1
        assert clamped.limit == MAX_LIMIT
        assert clamped.total == 3
        assert len(clamped.data) == 3

    def test_zero_limit_is_raised_to_one(self, repo: InMemoryMemoRepo):
        _seed(repo, 3)
        result = repo.list(limit=0)
        assert result.limit == 1
        assert [m.title for m in result.data] == ["title-0"]

    def test_fractional_values_are_floored(self, repo: InMemoryMemoRepo):
        _seed(repo, 5)
        result = repo.list(page=2.7, limit=2.9)
        assert result.page == 2
        assert result.limit == 2
        assert [m.title for m in result.data] == ["title-2", "title-3"]

    @pytest.mark.parametrize("limit", [1, 3, 7, 100])
    def test_pages_concatenate_to_full_set(self, limit: int):
        repo = InMemoryMemoRepo()
        _seed(repo, 23)
        expected = [m.id for m in repo.list(limit=100).data]

        collected = []
        page = 1
        while True:
            chunk = repo.list(page=page, limit=limit).data
            if not chunk:
                break
            collected.extend(m.id for m in chunk)
            page += 1

        assert collected == expected
        assert len(set(collected)) == 23

    @pytest.mark.parametrize(
        "page, limit",
        [
            (None, float("inf")),
            (float("nan"), None),
            (float("-inf"), float("nan")),
            (float("inf"), float("-inf")),
        ],
    )
    def test_non_finite_bounds_fall_back_to_defaults(self, repo: InMemoryMemoRepo, page, limit):
        _seed(repo, 25)
        result = repo.list(page=page, limit=limit)
        assert result.page == 1
        assert result.limit == DEFAULT_LIMIT
        assert [m.title for m in result.data] == [f"title-{index}" for index in range(DEFAULT_LIMIT)]
        assert result.total == 25

    def test_filter_by_query(self, repo: InMemoryMemoRepo):
        repo.create(MemoCreate(title="Filter result", body="Test1"))
        repo.create(MemoCreate(title="Ignored", body="Test2"))
        repo.create(MemoCreate(title="Test3", body="Filter result"))

        filtered = repo.list(query="fil")
        assert filtered.total == 2
        assert [m.title for m in filtered.data] == ["Filter result", "Test3"]

    def test_filter_is_case_insensitive_and_trimmed(self, repo: InMemoryMemoRepo):
        _seed(repo, 3)
        result = repo.list(query="  TITLE-1  ")
        assert result.total == 1
        assert result.data[0].title == "title-1"

    def test_blank_query_does_not_filter(self, repo: InMemoryMemoRepo):
        _seed(repo, 3)
        assert repo.list(query="   ").total == 3

    def test_total_counts_matches_before_pagination(self, repo: InMemoryMemoRepo):
        _seed(repo, 12)
        # title-1, title-10, title-11
        result = repo.list(query="title-1", limit=2)
        assert result.total == 3
        assert [m.title for m in result.data] == ["title-1", "title-10"]

    def test_list_has_no_side_effects(self, repo: InMemoryMemoRepo):
        _seed(repo, 3)
        before = repo.list()
        repo.list(page=9, limit=1, query="body")
        assert repo.list() == before


class TestUpdate:
    def test_update_bumps_version_and_timestamp(self, repo: InMemoryMemoRepo, clock: FakeClock):
        created = repo.create(MemoCreate(title="Original", body="Body"))

        later = clock.advance(minutes=5)
        updated = repo.update(created.id, MemoUpdate(title="Renamed"))

        assert updated is not None
        assert updated.id == created.id
        assert updated.title == "Renamed"
        assert updated.body == "Body"
        assert updated.version == 2
        assert updated.created_at == created.created_at
        assert updated.updated_at == later
        assert updated.updated_at > created.created_at

    def test_each_update_increments_by_one(self, repo: InMemoryMemoRepo, clock: FakeClock):
        memo = repo.create(MemoCreate(title="T", body="B"))
        for expected_version in range(2, 7):
            clock.advance(seconds=1)
            memo = repo.update(memo.id, MemoUpdate(body=f"B{expected_version}"))
            assert memo.version == expected_version
        assert repo.get(memo.id) == memo

    def test_update_keeps_position(self, repo: InMemoryMemoRepo):
        _seed(repo, 3)
        first = repo.list().data[0]
        repo.update(first.id, MemoUpdate(title="moved?"))
        assert [m.title for m in repo.list().data] == ["moved?", "title-1", "title-2"]

    def test_update_does_not_mutate_previous_snapshot(self, repo: InMemoryMemoRepo):
        created = repo.create(MemoCreate(title="Original", body="Body"))
        repo.update(created.id, MemoUpdate(title="Renamed"))
        assert created.title == "Original"
        assert created.version == 1

    def test_updated_at_never_precedes_created_at(self, repo: InMemoryMemoRepo, clock: FakeClock):
        created = repo.create(MemoCreate(title="T", body="B"))
        clock.now = START_2025 - timedelta(days=1)
        updated = repo.update(created.id, MemoUpdate(title="T2"))
        assert updated.updated_at >= updated.created_at

    def test_update_missing_returns_none(self, repo: InMemoryMemoRepo):
        assert repo.update("missing-id", MemoUpdate(title="missing")) is None
        assert repo.count() == 0


class TestDelete:
    def test_delete_then_missing(self, repo: InMemoryMemoRepo):
        memo = repo.create(MemoCreate(title="To remove", body="Test"))

        assert repo.delete(memo.id) is True
        assert repo.get(memo.id) is None
        assert repo.delete(memo.id) is False
        assert repo.update(memo.id, MemoUpdate(title="again")) is None

    def test_clear(self, repo: InMemoryMemoRepo):
        _seed(repo, 4)
        repo.clear()
        assert repo.count() == 0
        assert repo.list().total == 0


class TestConcurrency:
    def test_concurrent_updates_are_serialized(self, repo: InMemoryMemoRepo):
        memo = repo.create(MemoCreate(title="T", body="B"))

        def bump() -> None:
            for _ in range(100):
                repo.update(memo.id, MemoUpdate(body="x"))

        threads = [threading.Thread(target=bump) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert repo.get(memo.id).version == 801

    def test_concurrent_creates_keep_every_record(self):
        repo = InMemoryMemoRepo()

        def create_many() -> None:
            for index in range(50):
                repo.create(MemoCreate(title=f"t{index}", body="b"))

        threads = [threading.Thread(target=create_many) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert repo.count() == 200

"""CachedAncestryLookupのテスト"""

from unittest.mock import Mock

import pytest

from equinoid.errors import AncestryLookupError
from equinoid.models import Horse
from equinoid.repositories.cache import CachedAncestryLookup


@pytest.fixture
def inner():
    """キャッシュ対象の血統参照"""
    lookup = Mock()
    lookup.resolve.side_effect = lambda equinoid: (
        Horse(id=1, equinoid=equinoid, name="馬", sex="macho")
        if equinoid == "EQ-1"
        else None
    )
    lookup.get_parents.side_effect = lambda horse_id: (
        (2, 3) if horse_id == 1 else None
    )
    return lookup


class TestCacheHit:
    """キャッシュヒットのテスト"""

    def test_get_parents_cached(self, inner):
        """同じ内部IDの親は1回だけ参照する"""
        cache = CachedAncestryLookup(inner)

        assert cache.get_parents(1) == (2, 3)
        assert cache.get_parents(1) == (2, 3)

        inner.get_parents.assert_called_once_with(1)

    def test_resolve_cached(self, inner):
        """同じEquinoIdの解決は1回だけ参照する"""
        cache = CachedAncestryLookup(inner)

        first = cache.resolve("EQ-1")
        second = cache.resolve("EQ-1")

        assert first is second
        inner.resolve.assert_called_once_with("EQ-1")

    def test_none_is_cached(self, inner):
        """未登録（None）の結果もキャッシュする"""
        cache = CachedAncestryLookup(inner)

        assert cache.get_parents(99) is None
        assert cache.get_parents(99) is None

        inner.get_parents.assert_called_once_with(99)

    def test_resolve_and_parents_use_separate_keys(self, inner):
        """resolveとget_parentsのキーは衝突しない"""
        cache = CachedAncestryLookup(inner)

        cache.get_parents(1)
        cache.resolve("EQ-1")

        inner.resolve.assert_called_once()


class TestCacheFailure:
    """参照失敗のテスト"""

    def test_failure_is_not_cached(self, inner):
        """例外は伝播し、キャッシュされない"""
        inner.get_parents.side_effect = [AncestryLookupError("boom"), (2, 3)]
        cache = CachedAncestryLookup(inner)

        with pytest.raises(AncestryLookupError):
            cache.get_parents(1)

        assert cache.get_parents(1) == (2, 3)
        assert inner.get_parents.call_count == 2


class TestCacheEviction:
    """LRU削除のテスト"""

    def test_eviction_removes_oldest_entry(self, inner):
        """max_size超過時に最も古いエントリを削除する"""
        cache = CachedAncestryLookup(inner, max_size=2)

        cache.get_parents(1)
        cache.get_parents(2)
        cache.get_parents(3)
        cache.get_parents(1)

        assert inner.get_parents.call_count == 4
        assert cache.stats()["size"] == 2

    def test_access_refreshes_entry(self, inner):
        """アクセスされたエントリは削除されにくくなる"""
        cache = CachedAncestryLookup(inner, max_size=2)

        cache.get_parents(1)
        cache.get_parents(2)
        cache.get_parents(1)
        cache.get_parents(3)
        cache.get_parents(1)

        assert inner.get_parents.call_count == 3


class TestCacheStats:
    """統計情報のテスト"""

    def test_stats_initial_state(self, inner):
        """初期状態の統計"""
        cache = CachedAncestryLookup(inner, max_size=10)

        assert cache.stats() == {"size": 0, "hits": 0, "misses": 0, "hit_rate": 0.0}
        assert cache.max_size == 10

    def test_stats_after_hit_and_miss(self, inner):
        """ヒット・ミスが記録される"""
        cache = CachedAncestryLookup(inner)

        cache.get_parents(1)
        cache.get_parents(1)

        stats = cache.stats()
        assert stats["hits"] == 1
        assert stats["misses"] == 1
        assert stats["hit_rate"] == 0.5

    def test_clear(self, inner):
        """clearでキャッシュと統計がリセットされる"""
        cache = CachedAncestryLookup(inner)
        cache.get_parents(1)

        cache.clear()

        assert cache.stats()["size"] == 0
        assert cache.stats()["misses"] == 0

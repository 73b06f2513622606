"""血統参照のキャッシュ

LRUキャッシュにより同じ馬の親の参照を繰り返さないようにする。
"""

from collections import OrderedDict
from typing import Any

from equinoid.breeding.ancestry import AncestryLookup
from equinoid.models import Horse


class CachedAncestryLookup:
    """血統参照のLRUキャッシュ

    resolve()とget_parents()の結果をキャッシュする。
    例外は伝播させ、キャッシュには保存しない。

    Attributes:
        max_size: キャッシュの最大エントリ数
    """

    def __init__(self, lookup: AncestryLookup, max_size: int = 10_000):
        """キャッシュを初期化

        Args:
            lookup: 実際の血統参照
            max_size: キャッシュの最大エントリ数。超過時はLRUで古いエントリを削除
        """
        self._lookup = lookup
        self._max_size = max_size
        self._cache: OrderedDict[tuple[str, Any], Any] = OrderedDict()
        self._hits = 0
        self._misses = 0

    @property
    def max_size(self) -> int:
        return self._max_size

    def resolve(self, equinoid: str) -> Horse | None:
        """EquinoIdから馬を解決する（キャッシュ付き）"""
        key = ("resolve", equinoid)
        hit, value = self._get(key)
        if hit:
            return value
        value = self._lookup.resolve(equinoid)
        self._set(key, value)
        return value

    def get_parents(self, horse_id: int) -> tuple[int | None, int | None] | None:
        """内部IDから (父ID, 母ID) を取得する（キャッシュ付き）"""
        key = ("parents", horse_id)
        hit, value = self._get(key)
        if hit:
            return value
        value = self._lookup.get_parents(horse_id)
        self._set(key, value)
        return value

    def _get(self, key: tuple[str, Any]) -> tuple[bool, Any]:
        if key in self._cache:
            self._hits += 1
            # LRU: アクセスされたエントリを末尾に移動
            self._cache.move_to_end(key)
            return True, self._cache[key]
        self._misses += 1
        return False, None

    def _set(self, key: tuple[str, Any], value: Any) -> None:
        self._cache[key] = value
        self._cache.move_to_end(key)
        if len(self._cache) > self._max_size:
            self._cache.popitem(last=False)

    def clear(self) -> None:
        """キャッシュと統計をクリア"""
        self._cache.clear()
        self._hits = 0
        self._misses = 0

    def stats(self) -> dict:
        """キャッシュ統計を取得

        Returns:
            size, hits, misses, hit_rate を含む辞書
        """
        total = self._hits + self._misses
        hit_rate = self._hits / total if total > 0 else 0.0
        return {
            "size": len(self._cache),
            "hits": self._hits,
            "misses": self._misses,
            "hit_rate": hit_rate,
        }

"""祖先探索

親子関係を世代上限まで遡り、祖先ごとの最短世代数を収集する。
"""

import logging
from dataclasses import dataclass
from typing import Iterator, Protocol

from equinoid.constants import MAX_ANCESTOR_GENERATIONS
from equinoid.errors import AncestryLookupError
from equinoid.models import Horse

logger = logging.getLogger(__name__)


class AncestryLookup(Protocol):
    """血統参照のプロトコル"""

    def resolve(self, equinoid: str) -> Horse | None:
        """EquinoIdから馬を取得（未登録の場合はNone）"""
        ...

    def get_parents(self, horse_id: int) -> tuple[int | None, int | None] | None:
        """内部IDから (父ID, 母ID) を取得（未登録の場合はNone）"""
        ...


@dataclass(frozen=True)
class AncestorRecord:
    """片親側の探索で得られた祖先"""

    ancestor_id: int
    generation: int


@dataclass(frozen=True)
class CommonAncestor:
    """父側・母側の双方に現れる祖先"""

    ancestor_id: int
    generations_via_sire: int
    generations_via_dam: int


def collect_ancestors(
    lookup: AncestryLookup,
    start_id: int,
    max_generations: int = MAX_ANCESTOR_GENERATIONS,
) -> dict[int, int]:
    """祖先IDと最短世代数の対応を収集する

    start_idを第0世代として父・母の両方を深さ優先で辿る。
    max_generationsを超える世代の個体は記録も展開もしない。
    同じ祖先に複数の経路で到達した場合は、より小さい世代数のみ保持する。

    Args:
        lookup: 血統参照
        start_id: 起点となる馬の内部ID
        max_generations: 遡る最大世代数

    Returns:
        祖先ID → 最短世代数 の辞書（起点自身は含まない）
    """
    ancestors: dict[int, int] = {}

    def visit(horse_id: int, generation: int) -> None:
        if generation > max_generations:
            return

        if generation > 0:
            if horse_id == start_id:
                return
            known = ancestors.get(horse_id)
            if known is not None and known <= generation:
                # より近い世代で展開済み
                return
            ancestors[horse_id] = generation

        try:
            parents = lookup.get_parents(horse_id)
        except AncestryLookupError as e:
            logger.warning("Ancestry lookup failed for horse %s: %s", horse_id, e)
            return

        if parents is None:
            return

        for parent_id in parents:
            if parent_id is not None:
                visit(parent_id, generation + 1)

    visit(start_id, 0)
    return ancestors


def iter_ancestor_records(ancestors: dict[int, int]) -> Iterator[AncestorRecord]:
    """祖先辞書をAncestorRecordとして世代順に列挙する"""
    for ancestor_id, generation in sorted(
        ancestors.items(), key=lambda item: (item[1], item[0])
    ):
        yield AncestorRecord(ancestor_id=ancestor_id, generation=generation)


def find_common_ancestors(
    sire_ancestors: dict[int, int], dam_ancestors: dict[int, int]
) -> list[CommonAncestor]:
    """父側・母側の祖先辞書から共通祖先を抽出する

    Args:
        sire_ancestors: 父側の祖先辞書
        dam_ancestors: 母側の祖先辞書

    Returns:
        共通祖先のリスト（父側の探索順）
    """
    return [
        CommonAncestor(
            ancestor_id=ancestor_id,
            generations_via_sire=generation,
            generations_via_dam=dam_ancestors[ancestor_id],
        )
        for ancestor_id, generation in sire_ancestors.items()
        if ancestor_id in dam_ancestors
    ]

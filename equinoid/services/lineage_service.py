"""LineageService - 血統樹・血縁関係・産駒を扱うサービス"""

import logging
from dataclasses import dataclass
from typing import Protocol

from equinoid.breeding.ancestry import collect_ancestors, find_common_ancestors
from equinoid.breeding.inbreeding import estimate_inbreeding
from equinoid.constants import MAX_ANCESTOR_GENERATIONS, MAX_PEDIGREE_GENERATIONS
from equinoid.errors import HorseNotFoundError
from equinoid.models import Horse

logger = logging.getLogger(__name__)

RELATIONSHIP_CHILD = "filho/filha"
RELATIONSHIP_PARENT = "pai/mãe"
RELATIONSHIP_SIBLING = "irmão/irmã"


class LineageRepository(Protocol):
    """血統サービスが利用するリポジトリのプロトコル"""

    def find_by_equinoid(self, equinoid: str) -> Horse | None: ...

    def find_by_id(self, horse_id: int) -> Horse | None: ...

    def get_parents(self, horse_id: int) -> tuple[int | None, int | None] | None: ...

    def find_offspring(self, equinoid: str) -> list[Horse]: ...


@dataclass(frozen=True)
class PedigreeNode:
    """血統樹のノード"""

    equinoid: str
    name: str
    sex: str
    sire: "PedigreeNode | None" = None
    dam: "PedigreeNode | None" = None

    def to_dict(self) -> dict:
        data = {"equinoid": self.equinoid, "nome": self.name, "sexo": self.sex}
        ancestors = _ancestors_dict(self.sire, self.dam)
        if ancestors:
            data["ancestrais"] = ancestors
        return data


@dataclass(frozen=True)
class PedigreeTree:
    """血統樹"""

    equinoid: str
    name: str
    generations: int
    sire: PedigreeNode | None = None
    dam: PedigreeNode | None = None

    def to_dict(self) -> dict:
        data = {"equinoid": self.equinoid, "nome": self.name, "geracoes": self.generations}
        ancestors = _ancestors_dict(self.sire, self.dam)
        if ancestors:
            data["ancestrais"] = ancestors
        return data


@dataclass(frozen=True)
class KinshipResult:
    """血縁関係の判定結果"""

    horse_a: str
    horse_b: str
    are_related: bool
    relationship: str | None
    common_ancestors: tuple[str, ...]
    inbreeding: float


def _ancestors_dict(sire: PedigreeNode | None, dam: PedigreeNode | None) -> dict:
    ancestors = {}
    if sire is not None:
        ancestors["pai"] = sire.to_dict()
    if dam is not None:
        ancestors["mae"] = dam.to_dict()
    return ancestors


class LineageService:
    """血統樹の構築、血縁関係の判定、産駒の取得を行うサービス"""

    def __init__(self, repository: LineageRepository):
        """初期化

        Args:
            repository: 馬リポジトリ
        """
        self._repository = repository

    def get_pedigree_tree(self, equinoid: str, generations: int = 3) -> PedigreeTree:
        """血統樹を構築する

        世代数は0〜10に制限する。未登録の親は省略する。

        Args:
            equinoid: 起点の馬のEquinoId
            generations: 遡る世代数（1=父母まで）

        Returns:
            PedigreeTree

        Raises:
            HorseNotFoundError: 起点の馬が登録されていない場合
        """
        generations = max(0, min(generations, MAX_PEDIGREE_GENERATIONS))
        horse = self._get_horse(equinoid)

        sire = dam = None
        if generations > 0:
            sire, dam = self._build_parents(horse, generations - 1)

        return PedigreeTree(
            equinoid=horse.equinoid,
            name=horse.name,
            generations=generations,
            sire=sire,
            dam=dam,
        )

    def validate_kinship(self, equinoid_a: str, equinoid_b: str) -> KinshipResult:
        """2頭の血縁関係を判定する

        Args:
            equinoid_a: 1頭目のEquinoId
            equinoid_b: 2頭目のEquinoId

        Returns:
            KinshipResult

        Raises:
            HorseNotFoundError: いずれかの馬が登録されていない場合
        """
        horse_a = self._get_horse(equinoid_a)
        horse_b = self._get_horse(equinoid_b)

        ancestors_a = collect_ancestors(
            self._repository, horse_a.id, MAX_ANCESTOR_GENERATIONS
        )
        ancestors_b = collect_ancestors(
            self._repository, horse_b.id, MAX_ANCESTOR_GENERATIONS
        )

        common = sorted(
            find_common_ancestors(ancestors_a, ancestors_b),
            key=lambda c: (c.generations_via_sire + c.generations_via_dam, c.ancestor_id),
        )
        common_equinoids = []
        for ancestor in common:
            found = self._repository.find_by_id(ancestor.ancestor_id)
            if found is not None:
                common_equinoids.append(found.equinoid)

        relationship = self._determine_relationship(horse_a, horse_b, len(common))

        return KinshipResult(
            horse_a=horse_a.equinoid,
            horse_b=horse_b.equinoid,
            are_related=relationship is not None,
            relationship=relationship,
            common_ancestors=tuple(common_equinoids),
            inbreeding=estimate_inbreeding(ancestors_a, ancestors_b),
        )

    def get_offspring(self, equinoid: str) -> list[Horse]:
        """産駒を取得する

        Raises:
            HorseNotFoundError: 馬が登録されていない場合
        """
        horse = self._get_horse(equinoid)
        return self._repository.find_offspring(horse.equinoid)

    def _get_horse(self, equinoid: str) -> Horse:
        horse = self._repository.find_by_equinoid(equinoid)
        if horse is None:
            raise HorseNotFoundError(equinoid)
        return horse

    def _build_node(self, equinoid: str | None, remaining: int) -> PedigreeNode | None:
        if not equinoid:
            return None

        horse = self._repository.find_by_equinoid(equinoid)
        if horse is None:
            logger.debug("Parent %s is not registered", equinoid)
            return None

        sire = dam = None
        if remaining > 0:
            sire, dam = self._build_parents(horse, remaining - 1)

        return PedigreeNode(
            equinoid=horse.equinoid,
            name=horse.name,
            sex=horse.sex,
            sire=sire,
            dam=dam,
        )

    def _build_parents(
        self, horse: Horse, remaining: int
    ) -> tuple[PedigreeNode | None, PedigreeNode | None]:
        return (
            self._build_node(horse.sire_equinoid, remaining),
            self._build_node(horse.dam_equinoid, remaining),
        )

    @staticmethod
    def _determine_relationship(
        horse_a: Horse, horse_b: Horse, common_count: int
    ) -> str | None:
        if horse_b.equinoid in (horse_a.sire_equinoid, horse_a.dam_equinoid):
            return RELATIONSHIP_CHILD
        if horse_a.equinoid in (horse_b.sire_equinoid, horse_b.dam_equinoid):
            return RELATIONSHIP_PARENT

        same_sire = horse_a.sire_equinoid and horse_a.sire_equinoid == horse_b.sire_equinoid
        same_dam = horse_a.dam_equinoid and horse_a.dam_equinoid == horse_b.dam_equinoid
        if same_sire or same_dam:
            return RELATIONSHIP_SIBLING

        if common_count > 0:
            return f"parentes ({common_count} ancestrais comuns)"

        return None
